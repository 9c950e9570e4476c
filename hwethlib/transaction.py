"""
Signed Transactions
*******************

:class:`SignedTransaction` holds a legacy (EIP-155) Ethereum transaction together with the
``r``, ``s`` and ``v`` signature components returned by the device.
The components are stored exactly as the device returned them and only converted when the
transaction is serialized.
"""

from dataclasses import dataclass
from typing import (
    Any,
    List,
    Mapping,
    Optional,
    Union,
)

import rlp

from eth_utils import (
    decode_hex,
    encode_hex,
    keccak,
    to_int,
)

from .transport import RawSignature


HexOrInt = Union[str, int]


def _to_int(value: HexOrInt) -> int:
    if isinstance(value, int):
        return value
    return to_int(hexstr=value.strip())


def _to_bytes(value: Optional[str]) -> bytes:
    if not value:
        return b""
    return decode_hex(value)


@dataclass(frozen=True)
class SignedTransaction:
    nonce: HexOrInt
    gas_price: HexOrInt
    gas_limit: HexOrInt
    to: Optional[str]
    value: HexOrInt
    data: str
    chain_id: int
    r: HexOrInt
    s: HexOrInt
    v: HexOrInt

    def _unsigned_fields(self) -> List[Any]:
        return [
            _to_int(self.nonce),
            _to_int(self.gas_price),
            _to_int(self.gas_limit),
            _to_bytes(self.to),
            _to_int(self.value),
            _to_bytes(self.data),
        ]

    def signing_hash(self) -> bytes:
        """
        The EIP-155 hash the device signed

        :return: keccak-256 of ``rlp([nonce, gasPrice, gasLimit, to, value, data, chainId, 0, 0])``
        """
        return keccak(rlp.encode(self._unsigned_fields() + [self.chain_id, 0, 0]))

    def serialize(self) -> bytes:
        """
        Serialize the signed transaction into its RLP encoding, ready to be broadcast

        :return: ``rlp([nonce, gasPrice, gasLimit, to, value, data, v, r, s])``
        """
        return rlp.encode(self._unsigned_fields() + [_to_int(self.v), _to_int(self.r), _to_int(self.s)])

    def hex(self) -> str:
        """
        :return: The serialized transaction as a ``0x`` prefixed hex string
        """
        return encode_hex(self.serialize())

    def hash(self) -> bytes:
        """
        :return: The transaction hash, keccak-256 of the serialized transaction
        """
        return keccak(self.serialize())


def assemble_signed_transaction(fields: Mapping[str, Any], signature: RawSignature) -> SignedTransaction:
    """
    Build the signed transaction from the normalized fields that were sent to the device and
    the signature it returned. ``r``, ``s`` and ``v`` are used as they are.

    :param fields: The normalized transaction fields, keyed by their wire names
    :param signature: The ``{r, s, v}`` returned by the device
    :return: The signed transaction
    """
    return SignedTransaction(
        nonce=fields["nonce"],
        gas_price=fields["gasPrice"],
        gas_limit=fields["gasLimit"],
        to=fields.get("to"),
        value=fields["value"],
        data=fields.get("inputData", ""),
        chain_id=fields["chainId"],
        r=signature["r"],
        s=signature["s"],
        v=signature["v"],
    )
