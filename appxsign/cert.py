"""Creating and installing a self-signed developer certificate"""

import logging
import os

from .publisher import normalize_publisher_name
from .tools import execute_child_process

logger = logging.getLogger(__name__)

# id-kp-codeSigning, see RFC 5280 4.2.1.12
OID_KEY_USAGE_CODE_SIGNING = '1.3.6.1.5.5.7.3.3'

CERT_STORE_LOCATION = 'Cert:\\LocalMachine\\TrustedPeople'


def make_cert(publisher_name, cert_file_path=None, cert_file_name=None, windows_kit=None, publisher_rule=None):
    """Create a self-signed code signing certificate and install it as trusted.

    The publisher name is checked first; a bare name such as ``Contoso`` is turned into ``CN=Contoso``. Then
    makecert.exe creates the certificate and private key, pvk2pfx.exe bundles them into a PFX, and PowerShell imports
    the PFX into the TrustedPeople store of the local machine.

    :param str publisher_name: Subject distinguished name, or a bare common name
    :param str cert_file_path: Output directory, created if missing. Defaults to the current directory.
    :param str cert_file_name: Base name of the output files. Defaults to the publisher name as given.
    :param str windows_kit: Directory containing makecert.exe and pvk2pfx.exe. Defaults to the current directory.
    :param PublisherNameRule publisher_rule: Rule used to check the publisher name
    :return: Path to the generated PFX file
    :rtype: str
    :raises ValueError: if publisher_name is not a non-empty string
    :raises ToolError: if any of the tools fail
    """
    if not isinstance(publisher_name, str) or not publisher_name:
        raise ValueError('publisher_name must be a non-empty string')

    if cert_file_path is None:
        cert_file_path = '.'
    if cert_file_name is None:
        cert_file_name = publisher_name
    if windows_kit is None:
        windows_kit = os.getcwd()

    subject = normalize_publisher_name(publisher_name, publisher_rule)

    cer = os.path.join(cert_file_path, '{0}.cer'.format(cert_file_name))
    pvk = os.path.join(cert_file_path, '{0}.pvk'.format(cert_file_name))
    pfx = os.path.join(cert_file_path, '{0}.pfx'.format(cert_file_name))

    makecert_args = [
        '-r',                               # root (self-signed) CA
        '-h', '0',                          # no CAs follow
        '-n', subject,                      # subject DN
        '-eku', OID_KEY_USAGE_CODE_SIGNING,
        '-pe',                              # exportable private key
        '-sv', pvk,                         # private key file, generated if missing
        cer,
    ]
    pvk2pfx_args = ['-pvk', pvk, '-spc', cer, '-pfx', pfx]
    import_args = ['Import-PfxCertificate', '-FilePath', pfx, '-CertStoreLocation', CERT_STORE_LOCATION]

    if not os.path.isdir(cert_file_path):
        os.makedirs(cert_file_path)

    logger.info('When asked to enter a password, please select "None".')

    execute_child_process(os.path.join(windows_kit, 'makecert.exe'), makecert_args)
    execute_child_process(os.path.join(windows_kit, 'pvk2pfx.exe'), pvk2pfx_args)
    execute_child_process('powershell.exe', import_args)

    logger.info('Created developer certificate {0} for {1}'.format(pfx, subject))
    return pfx
