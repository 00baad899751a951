"""Contains base classes for appxsign"""

from . import rfc1779
from .cert import make_cert
from .exceptions import AppxWarning
from .publisher import (
    MIN_LENGTH,
    MAX_LENGTH,
    PublisherNameRule,
    get_publisher_name_rule,
)
from .sign import sign_appx

import logging
import os
import warnings

logger = logging.getLogger('appxsign')
logger.addHandler(logging.NullHandler())
logger.setLevel(logging.DEBUG)  # set to DEBUG to allow handler levels full discretion


_showwarning_default = warnings.showwarning


def _showwarning_disabled(message, category, filename, lineno, file=None, line=None):
    if not issubclass(category, AppxWarning):
        _showwarning_default(message, category, filename, lineno, file, line)


def _showwarning_log(message, category, filename, lineno, file=None, line=None):
    if issubclass(category, AppxWarning):
        logger.warning('{0}: {1}'.format(category.__name__, message))
    else:
        _showwarning_default(message, category, filename, lineno, file, line)


class WindowsKit(object):
    """A Windows SDK tool directory along with the settings used to drive its tools"""

    # global defaults
    DEFAULT_WINDOWS_KIT = None
    DEFAULT_CERT_FILE_PATH = '.'
    DEFAULT_SIGNTOOL_PARAMS = []
    DEFAULT_PUBLISHER_MIN_LENGTH = MIN_LENGTH
    DEFAULT_PUBLISHER_MAX_LENGTH = MAX_LENGTH
    DEFAULT_PUBLISHER_SEPARATORS = rfc1779.SEPARATORS
    DEFAULT_PUBLISHER_EXTRA_KEYS = []

    # logging config
    LOG_FORMAT = '[%(asctime)s] %(name)s %(levelname)s : %(message)s'

    ## logging and warning controls

    @staticmethod
    def enable_logging(level=logging.DEBUG):
        """Enable logging output to stderr"""
        stderr_handler = logging.StreamHandler()
        stderr_handler.setFormatter(logging.Formatter(WindowsKit.LOG_FORMAT))
        stderr_handler.setLevel(level)
        logger.addHandler(stderr_handler)
        return stderr_handler

    @staticmethod
    def disable_warnings():
        """Prevent all appxsign warnings from being shown - default action for others"""
        warnings.showwarning = _showwarning_disabled

    @staticmethod
    def log_warnings():
        """Log all appxsign warnings rather than showing them - default action for others"""
        warnings.showwarning = _showwarning_log

    @staticmethod
    def default_warnings():
        """Always take the default action for warnings"""
        warnings.showwarning = _showwarning_default

    ## basic methods

    def __init__(self, windows_kit=None, cert_file_path=None, signtool_params=None, publisher_min_length=None,
                 publisher_max_length=None, publisher_separators=None, publisher_extra_keys=None):

        # setup
        if windows_kit is None:
            windows_kit = WindowsKit.DEFAULT_WINDOWS_KIT
        if windows_kit is None:
            windows_kit = os.getcwd()
        if cert_file_path is None:
            cert_file_path = WindowsKit.DEFAULT_CERT_FILE_PATH
        if signtool_params is None:
            signtool_params = WindowsKit.DEFAULT_SIGNTOOL_PARAMS
        if publisher_min_length is None:
            publisher_min_length = WindowsKit.DEFAULT_PUBLISHER_MIN_LENGTH
        if publisher_max_length is None:
            publisher_max_length = WindowsKit.DEFAULT_PUBLISHER_MAX_LENGTH
        if publisher_separators is None:
            publisher_separators = WindowsKit.DEFAULT_PUBLISHER_SEPARATORS
        if publisher_extra_keys is None:
            publisher_extra_keys = WindowsKit.DEFAULT_PUBLISHER_EXTRA_KEYS

        self.windows_kit = windows_kit
        self.cert_file_path = cert_file_path
        self.signtool_params = list(signtool_params)

        if (publisher_min_length == MIN_LENGTH and publisher_max_length == MAX_LENGTH and
                publisher_separators == rfc1779.SEPARATORS and not publisher_extra_keys):
            self.publisher_rule = get_publisher_name_rule()
        else:
            self.publisher_rule = PublisherNameRule(publisher_min_length, publisher_max_length, publisher_separators,
                                                    tuple(publisher_extra_keys))
        logger.debug('Using Windows kit {0} with {1!r}'.format(self.windows_kit, self.publisher_rule))

    def __repr__(self):
        return 'WindowsKit({0!r})'.format(self.windows_kit)

    def is_valid_publisher_name(self, candidate):
        """Check a publisher name against this kit's rule. Never raises.

        :param candidate: The publisher name
        :rtype: bool
        """
        return self.publisher_rule.is_valid(candidate)

    def make_cert(self, publisher_name, cert_file_path=None, cert_file_name=None):
        """Create and install a developer certificate using this kit. See :func:`.cert.make_cert`

        :param str publisher_name: Subject distinguished name, or a bare common name
        :param str cert_file_path: Output directory. Defaults to this kit's ``cert_file_path``.
        :param str cert_file_name: Base name of the output files. Defaults to the publisher name.
        :return: Path to the generated PFX file
        :rtype: str
        """
        if cert_file_path is None:
            cert_file_path = self.cert_file_path
        return make_cert(publisher_name, cert_file_path, cert_file_name, self.windows_kit, self.publisher_rule)

    def sign_appx(self, dev_cert, output_directory, package_name, signtool_params=None):
        """Sign a package using this kit's signtool.exe. See :func:`.sign.sign_appx`

        Extra ``signtool_params`` are appended after this kit's own.
        """
        params = self.signtool_params + list(signtool_params or [])
        return sign_appx(dev_cert, output_directory, package_name, self.windows_kit, params)
