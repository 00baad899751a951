from appxsign import cert
from appxsign.exceptions import ToolError
from appxsign.publisher import PublisherNameRule
from .mock_tools import MockToolRunner

import os
import shutil
import tempfile
import unittest
from unittest import mock


class TestMakeCert(unittest.TestCase):
    def setUp(self):
        self.tmp_dir = tempfile.mkdtemp(prefix='appxsign-cert-test')
        self.runner = MockToolRunner()
        patcher = mock.patch.object(cert, 'execute_child_process', self.runner)
        patcher.start()
        self.addCleanup(patcher.stop)

    def tearDown(self):
        shutil.rmtree(self.tmp_dir, ignore_errors=True)

    def test_make_cert(self):
        """Ensure the tools are invoked in order with the expected arguments"""
        kit = os.path.join('fakepath', 'to', 'windows', 'kit', 'bin')
        cert_dir = os.path.join(self.tmp_dir, 'certs')

        pfx = cert.make_cert('CN=Contoso, O=Contoso Ltd', cert_dir, 'devcert', kit)

        expected_pvk = os.path.join(cert_dir, 'devcert.pvk')
        expected_cer = os.path.join(cert_dir, 'devcert.cer')
        expected_pfx = os.path.join(cert_dir, 'devcert.pfx')
        self.assertEqual(pfx, expected_pfx)
        self.assertTrue(os.path.isdir(cert_dir))

        self.assertEqual(self.runner.executables(), ['makecert.exe', 'pvk2pfx.exe', 'powershell.exe'])
        self.assertEqual(self.runner.calls[0][0], os.path.join(kit, 'makecert.exe'))
        self.assertEqual(self.runner.calls[1][0], os.path.join(kit, 'pvk2pfx.exe'))
        self.assertEqual(self.runner.args_for('makecert.exe'), [
            '-r', '-h', '0', '-n', 'CN=Contoso, O=Contoso Ltd', '-eku', '1.3.6.1.5.5.7.3.3', '-pe',
            '-sv', expected_pvk, expected_cer,
        ])
        self.assertEqual(self.runner.args_for('pvk2pfx.exe'),
                         ['-pvk', expected_pvk, '-spc', expected_cer, '-pfx', expected_pfx])
        self.assertEqual(self.runner.args_for('powershell.exe'), [
            'Import-PfxCertificate', '-FilePath', expected_pfx,
            '-CertStoreLocation', 'Cert:\\LocalMachine\\TrustedPeople',
        ])

    def test_bare_name_prefixed(self):
        """Ensure a bare publisher name becomes a common name but keeps its file name"""
        pfx = cert.make_cert('Contoso', self.tmp_dir, windows_kit='kit')
        self.assertEqual(pfx, os.path.join(self.tmp_dir, 'Contoso.pfx'))
        args = self.runner.args_for('makecert.exe')
        self.assertEqual(args[args.index('-n') + 1], 'CN=Contoso')

    def test_publisher_rule(self):
        rule = PublisherNameRule(extra_keys=['DNQ'])
        cert.make_cert('CN=X,DNQ=qualifier', self.tmp_dir, 'devcert', 'kit', rule)
        args = self.runner.args_for('makecert.exe')
        self.assertEqual(args[args.index('-n') + 1], 'CN=X,DNQ=qualifier')

    def test_defaults(self):
        with mock.patch('os.getcwd', return_value='cwd'):
            with mock.patch('os.makedirs') as makedirs:
                pfx = cert.make_cert('CN=Contoso')
        makedirs.assert_not_called()
        self.assertEqual(pfx, os.path.join('.', 'CN=Contoso.pfx'))
        self.assertEqual(self.runner.calls[0][0], os.path.join('cwd', 'makecert.exe'))

    def test_bad_publisher(self):
        for test in (None, '', 42):
            with self.assertRaises(ValueError):
                cert.make_cert(test, self.tmp_dir)
        self.assertEqual(self.runner.calls, [])

    def test_tool_failure(self):
        """Ensure the first failing tool stops the sequence"""
        self.runner.fail_on = 'pvk2pfx.exe'
        with self.assertRaises(ToolError):
            cert.make_cert('CN=Contoso', self.tmp_dir, 'devcert', 'kit')
        self.assertEqual(self.runner.executables(), ['makecert.exe', 'pvk2pfx.exe'])
