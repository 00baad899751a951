from appxsign import base, WindowsKit, AppxWarning, PublisherNameWarning
from appxsign.publisher import PublisherNameRule, get_publisher_name_rule
from .mock_tools import MockToolRunner

import logging
import os
import unittest
import warnings
from unittest import mock


class TestWindowsKit(unittest.TestCase):
    def test_default_rule_shared(self):
        """Ensure kits with default grammar settings share the default rule"""
        kit = WindowsKit('kit')
        self.assertIs(kit.publisher_rule, get_publisher_name_rule())
        self.assertTrue(kit.is_valid_publisher_name('CN=Common Name,O=Some organization'))
        self.assertFalse(kit.is_valid_publisher_name('Not a distinguished name'))
        self.assertFalse(kit.is_valid_publisher_name(None))

    def test_custom_rule(self):
        kit = WindowsKit('kit', publisher_extra_keys=['DNQ'], publisher_separators=',')
        self.assertIsInstance(kit.publisher_rule, PublisherNameRule)
        self.assertIsNot(kit.publisher_rule, get_publisher_name_rule())
        self.assertTrue(kit.is_valid_publisher_name('CN=X,DNQ=qualifier'))
        self.assertTrue(kit.is_valid_publisher_name('CN=X;UID=userId'))

    def test_defaults(self):
        with mock.patch('os.getcwd', return_value='cwd'):
            kit = WindowsKit()
        self.assertEqual(kit.windows_kit, 'cwd')
        self.assertEqual(kit.cert_file_path, '.')
        self.assertEqual(kit.signtool_params, [])

    def test_make_cert(self):
        runner = MockToolRunner()
        kit = WindowsKit('kit', cert_file_path='certs')
        with mock.patch('appxsign.cert.execute_child_process', runner):
            with mock.patch('os.makedirs'):
                pfx = kit.make_cert('Contoso', cert_file_name='devcert')
        self.assertEqual(pfx, os.path.join('certs', 'devcert.pfx'))
        self.assertEqual(runner.calls[0][0], os.path.join('kit', 'makecert.exe'))
        args = runner.args_for('makecert.exe')
        self.assertEqual(args[args.index('-n') + 1], 'CN=Contoso')

    def test_make_cert_positional(self):
        """Ensure positional arguments line up with cert.make_cert"""
        runner = MockToolRunner()
        kit = WindowsKit('kit', cert_file_path='certs')
        with mock.patch('appxsign.cert.execute_child_process', runner):
            with mock.patch('os.makedirs'):
                pfx = kit.make_cert('Contoso', 'out', 'devcert')
        self.assertEqual(pfx, os.path.join('out', 'devcert.pfx'))

    def test_sign_appx(self):
        runner = MockToolRunner()
        kit = WindowsKit('kit', signtool_params=['-a'])
        with mock.patch('appxsign.sign.execute_child_process', runner):
            kit.sign_appx('devcert.pfx', 'out', 'testapp', ['-v2'])
        self.assertEqual(runner.args_for('signtool.exe'),
                         ['sign', '-f', 'devcert.pfx', '-fd', 'SHA256', '-v', '-a', '-v2',
                          os.path.join('out', 'testapp.appx')])
        self.assertEqual(kit.signtool_params, ['-a'])


class TestLoggingAndWarnings(unittest.TestCase):
    def tearDown(self):
        WindowsKit.default_warnings()

    def test_enable_logging(self):
        handler = WindowsKit.enable_logging(logging.INFO)
        try:
            self.assertIn(handler, base.logger.handlers)
            self.assertEqual(handler.level, logging.INFO)
        finally:
            base.logger.removeHandler(handler)

    def test_log_warnings(self):
        WindowsKit.log_warnings()
        with self.assertLogs('appxsign', level='WARNING') as logs:
            warnings.showwarning('bad name', PublisherNameWarning, __file__, 1)
        self.assertIn('PublisherNameWarning: bad name', logs.output[0])

    def test_disable_warnings(self):
        WindowsKit.disable_warnings()
        with mock.patch.object(base, '_showwarning_default') as default:
            warnings.showwarning('bad name', AppxWarning, __file__, 1)
            default.assert_not_called()
            warnings.showwarning('other', UserWarning, __file__, 1)
            self.assertEqual(default.call_count, 1)
