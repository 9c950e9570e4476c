"""
Requests
********

The signing functions accept loosely shaped arguments: the transaction fields may be given
at the top level next to ``derivationPath`` or nested under a ``transaction`` key, and
snake_case spellings are accepted for every field. :func:`user_input_validator` checks that
shape and :class:`TransactionRequest` / :class:`MessageRequest` hold the single canonical
form the rest of the library works with.
"""

from dataclasses import dataclass, field
from typing import (
    Any,
    Dict,
    Mapping,
    Optional,
    Sequence,
)

from .defaults import (
    FIELD_ALIASES,
    TRANSACTION_FIELDS,
)
from .errors import (
    BadArgumentError,
    MissingArgumentsError,
)
from .messages import errors


def _canonical_keys(arguments: Mapping[str, Any]) -> Dict[str, Any]:
    return {FIELD_ALIASES.get(k, k): v for k, v in arguments.items()}


def user_input_validator(
    arguments_access: Sequence[Any],
    required_all: Sequence[str] = (),
    required_either: Sequence[str] = (),
) -> Dict[str, Any]:
    """
    Check the shape of the arguments passed to a signing function and flatten them.

    :param arguments_access: The positional arguments the signing function received.
        Only the first one is inspected.
    :param required_all: Properties that must be present at the top level
    :param required_either: Properties that must be present either at the top level or inside
        the nested ``transaction`` object
    :return: A flat dictionary using the wire field names
    :raises MissingArgumentsError: if there are no arguments or a required property is missing
    :raises BadArgumentError: if the arguments are not an object
    """
    expected = ", ".join(list(required_all) + list(required_either))
    if not arguments_access or arguments_access[0] is None:
        raise MissingArgumentsError(errors["userInput"]["missingArguments"].format(expected))
    arguments = arguments_access[0]
    if not isinstance(arguments, Mapping):
        raise BadArgumentError(errors["userInput"]["notAnObject"].format(type(arguments).__name__))

    top_level = _canonical_keys(arguments)
    nested = top_level.pop("transaction", None)
    if nested is not None and not isinstance(nested, Mapping):
        raise BadArgumentError(errors["userInput"]["notAnObject"].format(type(nested).__name__))

    flat = dict(top_level)
    for k, v in _canonical_keys(nested or {}).items():
        flat.setdefault(k, v)

    missing = [p for p in required_all if top_level.get(p) is None]
    missing += [p for p in required_either if flat.get(p) is None]
    if missing:
        raise MissingArgumentsError(errors["userInput"]["missingRequired"].format(", ".join(missing)))
    return flat


@dataclass(frozen=True)
class TransactionRequest:
    """
    A transaction to sign and the derivation path of the key to sign it with.

    ``transaction`` holds only the transaction fields (``gasPrice``, ``gasLimit``, ``chainId``,
    ``nonce``, ``to``, ``value``, ``inputData``) that were supplied, keyed by their wire names.
    """
    derivation_path: str
    transaction: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_fields(cls, fields: Mapping[str, Any]) -> 'TransactionRequest':
        """
        Build a request from the flat dictionary returned by :func:`user_input_validator`

        :param fields: The flattened arguments
        :return: The request
        """
        transaction = {k: fields[k] for k in TRANSACTION_FIELDS if k in fields}
        return cls(derivation_path=fields["derivationPath"], transaction=transaction)


@dataclass(frozen=True)
class MessageRequest:
    """
    A message to sign and the derivation path of the key to sign it with.
    """
    derivation_path: str
    message: str

    @classmethod
    def from_fields(cls, fields: Mapping[str, Any]) -> 'MessageRequest':
        return cls(derivation_path=fields["derivationPath"], message=fields["message"])


def get_field(transaction: Mapping[str, Any], name: str, default: Optional[Any] = None) -> Any:
    """
    Get a transaction field, treating an explicit ``None`` the same as a missing field.
    """
    value = transaction.get(name)
    return default if value is None else value
