"""Running the Windows SDK tools"""

import logging
import subprocess
from subprocess import PIPE

from .exceptions import ToolError, ToolNotFoundError

logger = logging.getLogger(__name__)


def _log_output(executable, stream_name, text):
    for line in text.splitlines():
        if line.strip():
            logger.debug('{0} {1}: {2}'.format(executable, stream_name, line))


def execute_child_process(executable, args):
    """Run an external tool to completion.

    :param str executable: Path to the executable
    :param list[str] args: Arguments, passed without a shell
    Output is decoded with the locale encoding. Bytes it cannot decode, e.g. OEM code page text from a localized SDK,
    are replaced rather than raised.

    :return: Everything the tool wrote to stdout
    :rtype: str
    :raises ToolNotFoundError: if the executable could not be started
    :raises ToolError: if the tool exited with a non-zero status
    """
    cmd = [executable] + list(args)
    logger.debug('Executing {0}'.format(subprocess.list2cmdline(cmd)))
    try:
        proc = subprocess.run(cmd, stdout=PIPE, stderr=PIPE, universal_newlines=True, errors='replace')
    except OSError as e:
        raise ToolNotFoundError('Could not start {0}: {1}'.format(executable, e))

    _log_output(executable, 'stdout', proc.stdout or '')
    _log_output(executable, 'stderr', proc.stderr or '')

    if proc.returncode != 0:
        output = (proc.stdout or '') + (proc.stderr or '')
        raise ToolError('{0} exited with status {1}'.format(executable, proc.returncode),
                        returncode=proc.returncode, output=output)
    return proc.stdout or ''
