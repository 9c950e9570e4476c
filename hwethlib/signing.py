"""
Signing
*******

The functions in this module are the primary way to sign with a hardware wallet.
Each takes a :class:`~hwethlib.transport.DeviceTransport` and the user supplied arguments,
validates and normalizes the arguments, sends a single request to the device and turns the
device response into a usable result.

If the user rejects the request on the device, the functions log a warning and return ``None``.
Every other failure is raised to the caller; nothing is retried.
"""

import logging

from typing import (
    Any,
    Dict,
    Mapping,
    Optional,
    cast,
)

from .defaults import (
    DEFAULT_INPUT_DATA,
    REQUIRED_PROPS,
)
from .errors import ActionCanceledError
from .messages import warnings
from .normalizers import (
    address_normalizer,
    derivation_path_normalizer,
    hex_sequence_normalizer,
    multiple_of_two_hex_value_normalizer,
)
from .payloads import (
    DEFAULT_PAYLOADS,
    SIGN_MESSAGE,
    SIGN_TRANSACTION,
    PayloadDescriptor,
    build_payload,
)
from .request import (
    MessageRequest,
    TransactionRequest,
    get_field,
    user_input_validator,
)
from .transaction import SignedTransaction, assemble_signed_transaction
from .transport import DeviceTransport, MessageSignature, RawSignature
from .validators import (
    derivation_path_validator,
    message_validator,
    transaction_object_validator,
)

logger = logging.getLogger(__name__)


def normalize_transaction(transaction: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Normalize validated transaction fields into the encoding the device expects

    :param transaction: The transaction fields, keyed by their wire names
    :return: The normalized fields
    """
    normalized = {
        "gasPrice": multiple_of_two_hex_value_normalizer(transaction["gasPrice"]),
        "gasLimit": multiple_of_two_hex_value_normalizer(transaction["gasLimit"]),
        "chainId": transaction["chainId"],
        "nonce": multiple_of_two_hex_value_normalizer(transaction["nonce"]),
        "value": multiple_of_two_hex_value_normalizer(transaction["value"]),
        "inputData": hex_sequence_normalizer(get_field(transaction, "inputData", DEFAULT_INPUT_DATA), False),
    }
    to = get_field(transaction, "to")
    if to is not None:
        normalized["to"] = address_normalizer(to, False)
    return normalized


def sign_transaction(
    transport: DeviceTransport,
    arguments: Optional[Mapping[str, Any]] = None,
    payloads: Mapping[str, PayloadDescriptor] = DEFAULT_PAYLOADS,
) -> Optional[SignedTransaction]:
    """
    Sign a transaction with the key at a derivation path.

    ``arguments`` holds ``derivationPath`` and the transaction fields ``gasPrice``,
    ``gasLimit``, ``chainId``, ``nonce``, ``to``, ``value`` and ``inputData``, either next to
    the path or nested under ``transaction``.

    :param transport: The device to sign with
    :param arguments: The path and the transaction
    :param payloads: The payload descriptor table
    :return: The signed transaction, or ``None`` if the user canceled signing on the device
    :raises MissingArgumentsError: if the path or a required transaction field is missing
    :raises BadArgumentError: if the path or a transaction field is invalid
    :raises HWWError: if the device failed to sign
    """
    fields = user_input_validator(
        arguments_access=[arguments],
        required_either=REQUIRED_PROPS["SIGN_TRANSACTION"],
    )
    request = TransactionRequest.from_fields(fields)

    transaction_object_validator(request.transaction)
    derivation_path_validator(request.derivation_path)

    normalized = normalize_transaction(request.transaction)
    payload = build_payload(SIGN_TRANSACTION, dict(normalized, path=derivation_path_normalizer(request.derivation_path)), payloads)

    try:
        signature = cast(RawSignature, transport.send(payload))
    except ActionCanceledError:
        logger.warning(warnings["signing"]["cancelTransaction"])
        return None
    return assemble_signed_transaction(normalized, signature)


def sign_message(
    transport: DeviceTransport,
    arguments: Optional[Mapping[str, Any]] = None,
    payloads: Mapping[str, PayloadDescriptor] = DEFAULT_PAYLOADS,
) -> Optional[MessageSignature]:
    """
    Sign a personal message with the key at a derivation path.
    The device prefixes the message with ``"\\x19Ethereum Signed Message:\\n" + len(message)``.

    :param transport: The device to sign with
    :param arguments: ``derivationPath`` and ``message``
    :param payloads: The payload descriptor table
    :return: The signing address and the signature, or ``None`` if the user canceled signing on the device
    :raises MissingArgumentsError: if the path or the message is missing
    :raises BadArgumentError: if the path or the message is invalid
    :raises HWWError: if the device failed to sign
    """
    fields = user_input_validator(
        arguments_access=[arguments],
        required_all=REQUIRED_PROPS["SIGN_MESSAGE"],
    )
    request = MessageRequest.from_fields(fields)

    message_validator(request.message)
    derivation_path_validator(request.derivation_path)

    payload = build_payload(SIGN_MESSAGE, {
        "path": derivation_path_normalizer(request.derivation_path),
        "message": hex_sequence_normalizer(request.message.encode("utf-8").hex(), False),
    }, payloads)

    try:
        response = transport.send(payload)
    except ActionCanceledError:
        logger.warning(warnings["signing"]["cancelMessage"])
        return None
    return MessageSignature(address=response["address"], signature=response["signature"])
