"""
Device Transport
****************

The signing functions talk to the device through any object implementing :class:`DeviceTransport`.
The link itself (USB, HID, a bridge daemon) is up to the implementation.

Transports report the user rejecting a request on the device by raising
:class:`~hwethlib.errors.ActionCanceledError`. Every other failure is raised as some other
:class:`~hwethlib.errors.HWWError`.
"""

import functools
import logging

from typing import (
    Any,
    Callable,
    Dict,
    Mapping,
    TypeVar,
    Union,
)
from typing_extensions import Protocol, TypedDict

import semver

from .defaults import STD_ERRORS
from .errors import (
    ActionCanceledError,
    DeviceConnectionError,
    DeviceFailureError,
    HWWError,
    UnavailableActionError,
)
from .messages import errors
from .payloads import PayloadDescriptor, SigningPayload

logger = logging.getLogger(__name__)

CANCEL_MESSAGES = frozenset((
    STD_ERRORS["CANCEL_TX_SIGN"],
    STD_ERRORS["CANCEL_MSG_SIGN"],
))


class RawSignature(TypedDict):
    r: str
    s: str
    v: Union[str, int]


class MessageSignature(TypedDict):
    address: str
    signature: str


class DeviceTransport(Protocol):
    """
    A link to a signing device.
    """

    # pylint: disable=unused-argument,no-self-use
    def send(self, payload: SigningPayload) -> Dict[str, Any]:
        """
        Send a payload and wait for the device to answer.
        This blocks until the user confirms or rejects the request on the device.

        :param payload: The request
        :return: The response payload, e.g. a :class:`RawSignature`
        :raises ActionCanceledError: if the user rejected the request
        """
        ...


def classify_failure(message: str) -> HWWError:
    """
    Turn a failure message reported by the device into the matching exception

    :param message: The failure message
    :return: :class:`~hwethlib.errors.ActionCanceledError` for the cancellation messages,
        :class:`~hwethlib.errors.DeviceFailureError` for anything else
    """
    if message in CANCEL_MESSAGES:
        return ActionCanceledError(message)
    return DeviceFailureError(errors["transport"]["failure"].format(message))


def unwrap_response(response: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Unwrap a ``{"success": <bool>, "payload": {...}}`` envelope as sent by the device bridge.

    :param response: The envelope
    :return: The payload of a successful response
    :raises HWWError: the classified failure of an unsuccessful one
    """
    payload = response.get("payload") or {}
    if not response.get("success"):
        raise classify_failure(str(payload.get("error", "")))
    return dict(payload)


T = TypeVar("T")

def transport_exception(f: Callable[..., T]) -> Callable[..., T]:
    @functools.wraps(f)
    def func(*args: Any, **kwargs: Any) -> T:
        try:
            return f(*args, **kwargs)
        except ConnectionError:
            raise DeviceConnectionError('Device disconnected')
        except OSError as e:
            raise DeviceConnectionError(str(e))
    return func


class FirmwareGatedTransport(object):
    """
    Base class for transports that talk to a device of known firmware version.

    :meth:`send` refuses payloads the firmware is too old for, then hands the payload to
    :meth:`_send`, which subclasses implement for their link and which returns the bridge
    envelope understood by :func:`unwrap_response`.
    """

    def __init__(self, firmware_version: Union[str, semver.VersionInfo], model: str = "Trezor") -> None:
        """
        :param firmware_version: The firmware version reported by the device
        :param model: The device model, used in messages
        """
        if isinstance(firmware_version, str):
            firmware_version = semver.VersionInfo.parse(firmware_version)
        self.firmware_version = firmware_version
        self.model = model

    def check_firmware(self, payload: SigningPayload) -> None:
        """
        :raises UnavailableActionError: if the device firmware is older than the payload requires
        """
        descriptor = PayloadDescriptor(payload["type"], payload["requiredFirmware"])
        if not descriptor.supported_by(self.firmware_version):
            raise UnavailableActionError(errors["transport"]["outdatedFirmware"].format(
                self.firmware_version, descriptor.type, descriptor.required_firmware))

    @transport_exception
    def send(self, payload: SigningPayload) -> Dict[str, Any]:
        self.check_firmware(payload)
        logger.debug("Sending %s payload to %s (firmware %s)", payload["type"], self.model, self.firmware_version)
        return unwrap_response(self._send(payload))

    def _send(self, payload: SigningPayload) -> Mapping[str, Any]:
        raise NotImplementedError("The FirmwareGatedTransport base class "
                                  "does not implement this method")
