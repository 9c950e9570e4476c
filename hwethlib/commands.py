"""
Commands
********

Wrappers around :mod:`~hwethlib.signing` that return JSON ready dictionaries instead of
objects and exceptions, in the form ``{"error": "<msg>", "code": <code>}`` for failures.
"""

from typing import (
    Any,
    Dict,
    Mapping,
    Optional,
)

from .errors import (
    common_err_msgs,
    handle_errors,
)
from .signing import (
    sign_message,
    sign_transaction,
)
from .transport import DeviceTransport


def signtx(transport: DeviceTransport, arguments: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
    """
    Sign a transaction with the device.

    :param transport: The device to sign with
    :param arguments: See :func:`~hwethlib.signing.sign_transaction`
    :return: A dictionary containing the serialized signed transaction under ``signed_tx``
        and its hash under ``hash``, ``{"canceled": True}`` if the user canceled on the device,
        or an error dictionary.
    """
    result: Dict[str, Any] = {}
    with handle_errors(common_err_msgs["signtx"], result):
        signed = sign_transaction(transport, arguments)
        if signed is None:
            result["canceled"] = True
        else:
            result["signed_tx"] = signed.hex()
            result["hash"] = "0x" + signed.hash().hex()
    return result


def signmessage(transport: DeviceTransport, arguments: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
    """
    Sign a personal message with the device.

    :param transport: The device to sign with
    :param arguments: See :func:`~hwethlib.signing.sign_message`
    :return: A dictionary containing ``address`` and ``signature``,
        ``{"canceled": True}`` if the user canceled on the device, or an error dictionary.
    """
    result: Dict[str, Any] = {}
    with handle_errors(common_err_msgs["signmessage"], result):
        signature = sign_message(transport, arguments)
        if signature is None:
            result["canceled"] = True
        else:
            result.update(signature)
    return result
