"""Signing app packages with signtool.exe"""

import json
import logging
import os

from .exceptions import SigningError
from .tools import execute_child_process

logger = logging.getLogger(__name__)


def sign_appx(dev_cert, output_directory, package_name, windows_kit=None, signtool_params=None):
    """Sign ``<output_directory>/<package_name>.appx`` with a PFX certificate.

    :param str dev_cert: Path to the PFX file, e.g. as returned by :func:`.make_cert`
    :param str output_directory: Directory containing the package
    :param str package_name: Package file name without the ``.appx`` extension
    :param str windows_kit: Directory containing signtool.exe. Defaults to the current directory.
    :param list[str] signtool_params: Extra arguments for ``signtool.exe sign``
    :return: Path to the signed package
    :rtype: str
    :raises SigningError: if no certificate was given
    :raises ToolError: if signtool.exe fails
    """
    if not dev_cert:
        logger.debug('Tried to sign a package without a developer certificate')
        raise SigningError('No developer certificate specified!')
    if windows_kit is None:
        windows_kit = os.getcwd()

    appx = os.path.join(output_directory, '{0}.appx'.format(package_name))
    params = ['sign', '-f', dev_cert, '-fd', 'SHA256', '-v'] + list(signtool_params or [])

    logger.debug('Using PFX certificate from: {0}'.format(dev_cert))
    logger.debug('Signing appx package: {0}'.format(appx))
    logger.debug('Using the following parameters for signtool.exe: {0}'.format(json.dumps(params)))

    params.append(appx)
    execute_child_process(os.path.join(windows_kit, 'signtool.exe'), params)

    logger.info('Signed {0}'.format(appx))
    return appx
