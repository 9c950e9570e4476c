"""
Defaults
********

Constant values shared by the validators, the request model and the signing functions.
"""

from typing import Dict, Tuple

#: Properties a signing call needs before any field level validation runs.
#: Transaction fields may be given flat or nested under ``transaction``.
REQUIRED_PROPS: Dict[str, Tuple[str, ...]] = {
    "SIGN_TRANSACTION": ("derivationPath", "gasPrice", "gasLimit", "chainId", "nonce", "value"),
    "SIGN_MESSAGE": ("derivationPath", "message"),
}

#: Transaction fields, in the order they are sent to the device
TRANSACTION_FIELDS: Tuple[str, ...] = (
    "gasPrice",
    "gasLimit",
    "chainId",
    "nonce",
    "to",
    "value",
    "inputData",
)

#: Fields that may be left out of a transaction object
OPTIONAL_TRANSACTION_FIELDS: Tuple[str, ...] = ("to", "inputData")

#: Value used for ``inputData`` when it is not supplied
DEFAULT_INPUT_DATA = "0x"

#: snake_case spellings accepted for the wire field names
FIELD_ALIASES: Dict[str, str] = {
    "derivation_path": "derivationPath",
    "gas_price": "gasPrice",
    "gas_limit": "gasLimit",
    "chain_id": "chainId",
    "input_data": "inputData",
}

#: Failure messages the device reports when the user rejects an action on screen
STD_ERRORS: Dict[str, str] = {
    "CANCEL_TX_SIGN": "Action cancelled by user",
    "CANCEL_MSG_SIGN": "Action cancelled by user",
}

#: Largest message, in bytes, the device accepts for signing
MAX_MESSAGE_SIZE = 1024

# Derivation path
PATH_HEADER = "m"
PATH_DELIMITER = "/"
PATH_HARDENED_CHAR = "'"
PATH_PURPOSE = 44
#: SLIP-44 coin types for the Ethereum mainnet and for test networks
PATH_COIN_MAINNET = 60
PATH_COIN_TESTNET = 1
