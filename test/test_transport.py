#!/usr/bin/env python3
# Copyright (c) 2020 The HWI developers
# Distributed under the MIT software license, see the accompanying
# file COPYING or http://www.opensource.org/licenses/mit-license.php.

from hwethlib.defaults import STD_ERRORS
from hwethlib.errors import (
    ActionCanceledError,
    ACTION_CANCELED,
    DeviceConnectionError,
    DeviceFailureError,
    UnavailableActionError,
)
from hwethlib.payloads import (
    DEFAULT_PAYLOADS,
    SIGN_MESSAGE,
    SIGN_TRANSACTION,
    PayloadDescriptor,
    build_payload,
)
from hwethlib.transport import (
    FirmwareGatedTransport,
    classify_failure,
    unwrap_response,
)

import semver
import unittest

class BridgeTransport(FirmwareGatedTransport):
    def __init__(self, firmware_version, response=None, error=None):
        super().__init__(firmware_version)
        self.response = response
        self.error = error
        self.sent = []

    def _send(self, payload):
        self.sent.append(payload)
        if self.error is not None:
            raise self.error
        return self.response

class TestPayloads(unittest.TestCase):
    def test_default_table(self):
        self.assertEqual(DEFAULT_PAYLOADS[SIGN_TRANSACTION], PayloadDescriptor('signethtx', '1.4.0'))
        self.assertEqual(DEFAULT_PAYLOADS[SIGN_MESSAGE], PayloadDescriptor('signethmsg', '1.5.2'))
        with self.assertRaises(TypeError):
            DEFAULT_PAYLOADS['OTHER'] = PayloadDescriptor('other', '1.0.0')

    def test_build(self):
        payload = build_payload(SIGN_TRANSACTION, {'nonce': '00', 'type': 'evil', 'requiredFirmware': '0.0.1'})
        self.assertEqual(payload, {'type': 'signethtx', 'requiredFirmware': '1.4.0', 'nonce': '00'})

    def test_unknown_operation(self):
        self.assertRaises(UnavailableActionError, build_payload, 'GET_XPUB', {})
        self.assertRaises(UnavailableActionError, build_payload, SIGN_MESSAGE, {}, {SIGN_TRANSACTION: DEFAULT_PAYLOADS[SIGN_TRANSACTION]})

    def test_supported_by(self):
        descriptor = DEFAULT_PAYLOADS[SIGN_MESSAGE]
        self.assertTrue(descriptor.supported_by(semver.VersionInfo(1, 5, 2)))
        self.assertTrue(descriptor.supported_by(semver.VersionInfo(2, 0, 0)))
        self.assertFalse(descriptor.supported_by(semver.VersionInfo(1, 5, 1)))

class TestFailureClassification(unittest.TestCase):
    def test_cancel(self):
        e = classify_failure(STD_ERRORS['CANCEL_TX_SIGN'])
        self.assertIsInstance(e, ActionCanceledError)
        self.assertEqual(e.get_code(), ACTION_CANCELED)

    def test_other(self):
        self.assertIsInstance(classify_failure('Oh no!'), DeviceFailureError)
        self.assertIsInstance(classify_failure(''), DeviceFailureError)

    def test_unwrap(self):
        self.assertEqual(unwrap_response({'success': True, 'payload': {'r': '0x1', 's': '0x2', 'v': 37}}), {'r': '0x1', 's': '0x2', 'v': 37})
        self.assertRaises(ActionCanceledError, unwrap_response, {'success': False, 'payload': {'error': STD_ERRORS['CANCEL_TX_SIGN']}})
        self.assertRaises(DeviceFailureError, unwrap_response, {'success': False, 'payload': {'error': 'Device disconnected'}})
        self.assertRaises(DeviceFailureError, unwrap_response, {})

class TestFirmwareGatedTransport(unittest.TestCase):
    def setUp(self):
        self.payload = build_payload(SIGN_TRANSACTION, {'nonce': '00'})

    def test_send(self):
        transport = BridgeTransport('1.6.2', response={'success': True, 'payload': {'r': '0x1', 's': '0x2', 'v': '0x25'}})
        self.assertEqual(transport.send(self.payload), {'r': '0x1', 's': '0x2', 'v': '0x25'})
        self.assertEqual(transport.sent, [self.payload])

    def test_outdated_firmware(self):
        transport = BridgeTransport('1.3.9', response={'success': True, 'payload': {}})
        self.assertRaises(UnavailableActionError, transport.send, self.payload)
        self.assertEqual(transport.sent, [])

    def test_cancel(self):
        transport = BridgeTransport(semver.VersionInfo(2, 0, 7), response={'success': False, 'payload': {'error': STD_ERRORS['CANCEL_TX_SIGN']}})
        self.assertRaises(ActionCanceledError, transport.send, self.payload)

    def test_disconnected(self):
        transport = BridgeTransport('1.6.2', error=ConnectionResetError('reset'))
        self.assertRaises(DeviceConnectionError, transport.send, self.payload)

    def test_not_implemented(self):
        self.assertRaises(NotImplementedError, FirmwareGatedTransport('1.6.2').send, self.payload)

if __name__ == "__main__":
    unittest.main()
