"""
User facing warning and error message templates.
"""

warnings = {
    "signing": {
        "cancelTransaction": "User cancelled signing the transaction (via the hardware wallet device)",
        "cancelMessage": "User cancelled signing the message (via the hardware wallet device)",
    },
}

errors = {
    "userInput": {
        "missingArguments": "No arguments were provided. Expected an object containing: {}",
        "missingRequired": "Missing required argument(s): {}",
        "notAnObject": "Expected the arguments to be an object, got: {}",
    },
    "validators": {
        "derivationPath": "Derivation path is not valid: {}",
        "transaction": "Transaction field `{}` is not valid: {}",
        "message": "Message is not valid: {}",
    },
    "payloads": {
        "unknownOperation": "No payload is defined for the `{}` operation",
    },
    "transport": {
        "failure": "Device reported a failure: {}",
        "outdatedFirmware": "The device firmware ({}) is too old for {}. Version {} or newer is required.",
    },
}
