"""
Normalizers
***********

Functions that turn already validated values into the exact encoding the device expects.
They do not validate their input and they do not raise on it.
"""

from typing import Union

from eth_utils import remove_0x_prefix

from .defaults import (
    PATH_DELIMITER,
    PATH_HARDENED_CHAR,
    PATH_HEADER,
)
from .key import (
    HARDENED_FLAG,
    is_hardened,
    parse_path,
)


def derivation_path_normalizer(derivation_path: str) -> str:
    """
    Canonicalize a derivation path string.

    The path is rebuilt from its parsed indexes: whitespace and empty segments are dropped,
    the header is lowercased, leading zeros are removed and every hardened index is marked with ``'``.

    e.g.: " M/44H/60'/0h/ 00 " -> "m/44'/60'/0'/0"

    :param derivation_path: The path to normalize
    :return: The normalized path
    """
    segments = [s for s in "".join(derivation_path.split()).split(PATH_DELIMITER) if s]
    normalized = [PATH_HEADER]
    for i in parse_path(PATH_DELIMITER.join(segments[1:])):
        normalized.append(str(i & ~HARDENED_FLAG) + (PATH_HARDENED_CHAR if is_hardened(i) else ""))
    return PATH_DELIMITER.join(normalized)


def hex_sequence_normalizer(value: str, prefix: bool = True) -> str:
    """
    Lowercase a hex string and set or remove its ``0x`` prefix.

    :param value: The hex string, with or without a prefix
    :param prefix: Whether the result starts with ``0x``
    :return: The normalized hex string
    """
    digits = remove_0x_prefix(value.strip()).lower()
    if prefix:
        return "0x" + digits
    return digits


def address_normalizer(address: str, prefix: bool = True) -> str:
    """
    Normalize an address to lowercase hex. The result never carries EIP-55 checksum casing.

    :param address: The address, in any casing, with or without a prefix
    :param prefix: Whether the result starts with ``0x``
    :return: The normalized address
    """
    return hex_sequence_normalizer(address, prefix)


def multiple_of_two_hex_value_normalizer(value: Union[str, int]) -> str:
    """
    Normalize a numeric value into a non-prefixed hex string with an even number of digits.

    e.g.: "3e8" -> "03e8", "0x0" -> "00", 21000 -> "5208"

    :param value: A hex string or a non-negative integer
    :return: The byte aligned hex digits
    """
    if isinstance(value, int):
        digits = format(value, "x")
    else:
        digits = hex_sequence_normalizer(value, False)
    if len(digits) % 2:
        digits = "0" + digits
    return digits
