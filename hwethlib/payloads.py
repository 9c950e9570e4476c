"""
Payloads
********

Every device operation is described by a :class:`PayloadDescriptor`: the request ``type`` the
device recognizes and the oldest firmware that supports it. Descriptors are looked up in an
immutable table passed to :func:`build_payload`, so a protocol bump only changes the table.
"""

from types import MappingProxyType
from typing import (
    Any,
    Dict,
    Mapping,
    NamedTuple,
)
from typing_extensions import TypedDict

import semver

from .errors import UnavailableActionError
from .messages import errors

SIGN_TRANSACTION = "SIGN_TRANSACTION"
SIGN_MESSAGE = "SIGN_MESSAGE"


class PayloadDescriptor(NamedTuple):
    type: str
    required_firmware: str

    def supported_by(self, firmware_version: semver.VersionInfo) -> bool:
        """
        Whether a device running the given firmware can handle this payload

        :param firmware_version: The firmware version reported by the device
        :return: ``True`` if the firmware is at least :attr:`required_firmware`
        """
        return firmware_version >= semver.VersionInfo.parse(self.required_firmware)


class SigningPayload(TypedDict, total=False):
    type: str
    requiredFirmware: str
    path: str
    gasPrice: str
    gasLimit: str
    chainId: int
    nonce: str
    to: str
    value: str
    inputData: str
    message: str


DEFAULT_PAYLOADS: Mapping[str, PayloadDescriptor] = MappingProxyType({
    SIGN_TRANSACTION: PayloadDescriptor(type="signethtx", required_firmware="1.4.0"),
    SIGN_MESSAGE: PayloadDescriptor(type="signethmsg", required_firmware="1.5.2"),
})


def get_descriptor(operation: str, payloads: Mapping[str, PayloadDescriptor] = DEFAULT_PAYLOADS) -> PayloadDescriptor:
    try:
        return payloads[operation]
    except KeyError:
        raise UnavailableActionError(errors["payloads"]["unknownOperation"].format(operation))


def build_payload(
    operation: str,
    fields: Dict[str, Any],
    payloads: Mapping[str, PayloadDescriptor] = DEFAULT_PAYLOADS,
) -> SigningPayload:
    """
    Assemble the request sent to the device for an operation.

    ``type`` and ``requiredFirmware`` always come from the descriptor table and can not be
    overridden by ``fields``.

    :param operation: The operation name, e.g. :data:`SIGN_TRANSACTION`
    :param fields: The normalized fields of the request
    :param payloads: The descriptor table
    :return: The payload
    :raises UnavailableActionError: if the table has no descriptor for the operation
    """
    descriptor = get_descriptor(operation, payloads)
    payload: SigningPayload = {"type": descriptor.type, "requiredFirmware": descriptor.required_firmware}
    payload.update({k: v for k, v in fields.items() if k not in payload})  # type: ignore
    return payload
