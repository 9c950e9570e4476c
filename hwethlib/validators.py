"""
Validators
**********

Predicates run on user input before anything is normalized or sent to the device.
Each validator returns ``True`` for valid input and raises :class:`~hwethlib.errors.BadArgumentError` otherwise.
"""

import re
import string

from typing import Any

from eth_utils import (
    is_checksum_address,
    remove_0x_prefix,
)

from .defaults import (
    MAX_MESSAGE_SIZE,
    OPTIONAL_TRANSACTION_FIELDS,
    PATH_COIN_MAINNET,
    PATH_COIN_TESTNET,
    PATH_DELIMITER,
    PATH_HEADER,
    PATH_PURPOSE,
    TRANSACTION_FIELDS,
)
from .errors import BadArgumentError
from .key import (
    H_,
    is_hardened,
    parse_path,
)
from .messages import errors


NUMERIC_FIELDS = ("gasPrice", "gasLimit", "nonce", "value")

# ASCII digits with an optional hardening marker
PATH_SEGMENT = re.compile(r"[0-9]+['hH]?")


def _is_hex_digits(value: str) -> bool:
    return all(c in string.hexdigits for c in value)


def _field_error(field: str, reason: str) -> BadArgumentError:
    return BadArgumentError(errors["validators"]["transaction"].format(field, reason))


def derivation_path_validator(derivation_path: Any) -> bool:
    """
    Check that a derivation path is an Ethereum BIP 44 path.

    The path must look like ``m/44'/60'/<account>'/<change>[/<index>]``.
    Coin type ``1'`` is accepted for test networks.

    :param derivation_path: The path to check
    :return: ``True`` if the path is valid
    :raises BadArgumentError: if it is not
    """
    if not isinstance(derivation_path, str):
        raise BadArgumentError(errors["validators"]["derivationPath"].format("expected a string"))
    segments = "".join(derivation_path.split()).split(PATH_DELIMITER)
    if segments[0].lower() != PATH_HEADER:
        raise BadArgumentError(errors["validators"]["derivationPath"].format(f"it must start with '{PATH_HEADER}'"))
    if len(segments) not in (5, 6):
        raise BadArgumentError(errors["validators"]["derivationPath"].format("expected 4 or 5 levels after the header"))
    for segment in segments[1:]:
        if not PATH_SEGMENT.fullmatch(segment):
            raise BadArgumentError(errors["validators"]["derivationPath"].format(f"'{segment}' is not an index"))
    try:
        path = parse_path(PATH_DELIMITER.join(segments))
    except ValueError:
        raise BadArgumentError(errors["validators"]["derivationPath"].format(derivation_path))

    if path[0] != H_(PATH_PURPOSE):
        raise BadArgumentError(errors["validators"]["derivationPath"].format(f"purpose must be {PATH_PURPOSE}'"))
    if path[1] not in (H_(PATH_COIN_MAINNET), H_(PATH_COIN_TESTNET)):
        raise BadArgumentError(errors["validators"]["derivationPath"].format(f"coin type must be {PATH_COIN_MAINNET}' or {PATH_COIN_TESTNET}'"))
    if not is_hardened(path[2]):
        raise BadArgumentError(errors["validators"]["derivationPath"].format("account must be hardened"))
    if any(is_hardened(i) for i in path[3:]):
        raise BadArgumentError(errors["validators"]["derivationPath"].format("change and address index must not be hardened"))
    return True


def _validate_numeric(field: str, value: Any) -> None:
    if isinstance(value, bool):
        raise _field_error(field, "expected a number")
    if isinstance(value, int):
        if value < 0:
            raise _field_error(field, "must not be negative")
        return
    if not isinstance(value, str):
        raise _field_error(field, "expected a hex string or an integer")
    digits = remove_0x_prefix(value.strip())
    if not digits or not _is_hex_digits(digits):
        raise _field_error(field, f"'{value}' is not a hex number")


def _validate_chain_id(value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise _field_error("chainId", "expected an integer")
    if value <= 0:
        raise _field_error("chainId", "must be positive")


def _validate_address(value: Any) -> None:
    if not isinstance(value, str):
        raise _field_error("to", "expected a hex string")
    digits = remove_0x_prefix(value.strip())
    if len(digits) != 40 or not _is_hex_digits(digits):
        raise _field_error("to", f"'{value}' is not a 20 byte address")
    # Mixed case means the address carries an EIP-55 checksum
    if digits != digits.lower() and digits != digits.upper():
        if not is_checksum_address("0x" + digits):
            raise _field_error("to", f"'{value}' has an invalid checksum")


def _validate_input_data(value: Any) -> None:
    if not isinstance(value, str):
        raise _field_error("inputData", "expected a hex string")
    digits = remove_0x_prefix(value.strip())
    if not _is_hex_digits(digits):
        raise _field_error("inputData", "not a hex sequence")
    if len(digits) % 2:
        raise _field_error("inputData", "odd number of hex digits")


def transaction_object_validator(transaction: Any) -> bool:
    """
    Check the fields of a transaction object, individually and against each other.

    ``gasPrice``, ``gasLimit``, ``nonce`` and ``value`` must be hex strings or non-negative integers,
    ``chainId`` a positive integer, ``to`` a 20 byte address (checksummed if mixed case) and
    ``inputData`` an even length hex sequence. A transaction without ``to`` creates a contract,
    so it must carry ``inputData``.

    :param transaction: The transaction object, without the derivation path
    :return: ``True`` if the transaction is valid
    :raises BadArgumentError: if it is not
    """
    if not isinstance(transaction, dict):
        raise BadArgumentError(errors["validators"]["transaction"].format("transaction", "expected an object"))

    missing = [f for f in TRANSACTION_FIELDS if f not in OPTIONAL_TRANSACTION_FIELDS and transaction.get(f) is None]
    if missing:
        raise BadArgumentError(errors["validators"]["transaction"].format(", ".join(missing), "missing"))

    for field in NUMERIC_FIELDS:
        _validate_numeric(field, transaction[field])
    _validate_chain_id(transaction["chainId"])

    to = transaction.get("to")
    input_data = transaction.get("inputData")
    if to is not None:
        _validate_address(to)
    if input_data is not None:
        _validate_input_data(input_data)
    if to is None and not remove_0x_prefix((input_data or "").strip()):
        raise _field_error("inputData", "a contract creation needs input data")
    return True


def message_validator(message: Any) -> bool:
    """
    Check that a message can be signed by the device.

    :param message: The message to check
    :return: ``True`` if it is a string of at most 1 kB
    :raises BadArgumentError: if it is not
    """
    if not isinstance(message, str):
        raise BadArgumentError(errors["validators"]["message"].format("expected a string"))
    if len(message.encode("utf-8")) > MAX_MESSAGE_SIZE:
        raise BadArgumentError(errors["validators"]["message"].format(f"larger than {MAX_MESSAGE_SIZE} bytes"))
    return True
