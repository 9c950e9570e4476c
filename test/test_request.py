#!/usr/bin/env python3
# Copyright (c) 2020 The HWI developers
# Distributed under the MIT software license, see the accompanying
# file COPYING or http://www.opensource.org/licenses/mit-license.php.

from hwethlib.defaults import REQUIRED_PROPS
from hwethlib.errors import (
    BadArgumentError,
    MissingArgumentsError,
    MISSING_ARGUMENTS,
)
from hwethlib.request import (
    TransactionRequest,
    user_input_validator,
)

import unittest

TRANSACTION = {
    'gasPrice': '3e8',
    'gasLimit': '5208',
    'chainId': 1,
    'nonce': '0',
    'to': '0x' + 'ab' * 20,
    'value': '0',
}
PATH = "m/44'/60'/0'/0"

class TestUserInputValidator(unittest.TestCase):
    def test_flat(self):
        fields = user_input_validator([dict(TRANSACTION, derivationPath=PATH)], required_either=REQUIRED_PROPS['SIGN_TRANSACTION'])
        self.assertEqual(fields, dict(TRANSACTION, derivationPath=PATH))

    def test_nested(self):
        for arguments in [
            {'derivationPath': PATH, 'transaction': TRANSACTION},
            {'transaction': dict(TRANSACTION, derivationPath=PATH)},
        ]:
            with self.subTest(arguments=arguments):
                fields = user_input_validator([arguments], required_either=REQUIRED_PROPS['SIGN_TRANSACTION'])
                self.assertEqual(fields, dict(TRANSACTION, derivationPath=PATH))

    def test_aliases(self):
        fields = user_input_validator([{'derivation_path': PATH, 'gas_price': '3e8', 'input_data': '0x'}], required_all=['derivationPath'])
        self.assertEqual(fields, {'derivationPath': PATH, 'gasPrice': '3e8', 'inputData': '0x'})

    def test_missing(self):
        with self.assertRaises(MissingArgumentsError) as e:
            user_input_validator([], required_either=REQUIRED_PROPS['SIGN_TRANSACTION'])
        self.assertEqual(e.exception.get_code(), MISSING_ARGUMENTS)
        self.assertRaises(MissingArgumentsError, user_input_validator, [None], required_either=REQUIRED_PROPS['SIGN_TRANSACTION'])
        self.assertRaises(MissingArgumentsError, user_input_validator, [TRANSACTION], required_either=REQUIRED_PROPS['SIGN_TRANSACTION'])
        self.assertRaises(MissingArgumentsError, user_input_validator, [{'derivationPath': PATH}], required_either=REQUIRED_PROPS['SIGN_TRANSACTION'])
        self.assertRaises(MissingArgumentsError, user_input_validator, [dict(TRANSACTION, derivationPath=None)], required_either=REQUIRED_PROPS['SIGN_TRANSACTION'])

    def test_required_all(self):
        self.assertRaises(MissingArgumentsError, user_input_validator, [{'transaction': {'derivationPath': PATH, 'message': 'hi'}}], required_all=REQUIRED_PROPS['SIGN_MESSAGE'])
        self.assertEqual(user_input_validator([{'derivationPath': PATH, 'message': 'hi'}], required_all=REQUIRED_PROPS['SIGN_MESSAGE']), {'derivationPath': PATH, 'message': 'hi'})

    def test_not_an_object(self):
        self.assertRaises(BadArgumentError, user_input_validator, [PATH], required_either=REQUIRED_PROPS['SIGN_TRANSACTION'])
        self.assertRaises(BadArgumentError, user_input_validator, [{'derivationPath': PATH, 'transaction': 'tx'}], required_either=REQUIRED_PROPS['SIGN_TRANSACTION'])

class TestTransactionRequest(unittest.TestCase):
    def test_from_fields(self):
        request = TransactionRequest.from_fields(dict(TRANSACTION, derivationPath=PATH, extra='ignored'))
        self.assertEqual(request.derivation_path, PATH)
        self.assertEqual(request.transaction, TRANSACTION)

if __name__ == "__main__":
    unittest.main()
