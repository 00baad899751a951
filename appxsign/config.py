"""Provides support for setting up a Windows kit via config files and dicts"""

from .base import WindowsKit
from .exceptions import ConfigError
import json
import yaml


def _default_mapper(val):
    return val


def _string_list_mapper(val):
    """signtool arguments, either a list or one space separated string"""
    if isinstance(val, str):
        return val.split()
    return list(val)


def _keys_mapper(val):
    """Extra publisher keys, either a list or a comma/space separated string, upper-cased to match the grammar"""
    if isinstance(val, str):
        val = val.replace(',', ' ').split()
    return [key.upper() for key in val]


_kit_mappers = {
    'signtool_params': _string_list_mapper,
    'publisher_extra_keys': _keys_mapper,
}

_global_mappers = {
    'DEFAULT_SIGNTOOL_PARAMS': _string_list_mapper,
    'DEFAULT_PUBLISHER_EXTRA_KEYS': _keys_mapper,
}


def normalize_global_config_param(key):
    """Normalize a global config key. Does not check validity of the key.

    For example ``publisher_separators`` and ``DEFAULT_PUBLISHER_SEPARATORS`` both name the default RDN separators.

    :param str key: User-supplied global config key
    :return: The normalized key formatted as an attribute of :class:`.WindowsKit`
    :rtype: str
    """
    key = key.upper()
    if not key.startswith('DEFAULT_'):
        key = 'DEFAULT_'+key
    return key


def set_global_config(global_config_dict):
    """Set the global defaults. The dict must be formatted as follows::

        {'global': {
            <config param>: <config value>,
         }
        }

    ``<config param>`` must match one of the ``DEFAULT_`` attributes on :class:`.WindowsKit`. The ``DEFAULT_`` prefix
    is optional and dict keys are case-insensitive. Any parameters not specified will keep the hard-coded default.

    ``SIGNTOOL_PARAMS`` and ``PUBLISHER_EXTRA_KEYS`` also accept a single string, split the same way as in
    :func:`create_windows_kit`, and extra keys are upper-cased. Publisher settings only affect kits created afterwards;
    a kit left on the default length bounds, separators and keys shares the process-wide default
    :class:`.PublisherNameRule`.

    :param dict global_config_dict: See above.
    :rtype: None
    :raises KeyError: if the dict is incorrectly formatted or contains unknown config parameters
    """
    bad = []
    for key, val in global_config_dict['global'].items():
        orig_key = key
        key = normalize_global_config_param(key)
        if hasattr(WindowsKit, key):
            val = _global_mappers.get(key, _default_mapper)(val)
            setattr(WindowsKit, key, val)
        else:
            bad.append(orig_key)
    if bad:
        raise KeyError('Unknown global config keys: {0}'.format(', '.join(bad)))


def create_windows_kit(config_dict):
    """Create a new :class:`.WindowsKit` from a config dict formatted as follows::

        {'windows_kit': {
            'windows_kit': <path to the SDK bin directory>,  # optional, default current directory
            'publisher_extra_keys': ['DNQ'],  # optional, list or comma/space separated string
            'signtool_params': ['-tr', 'http://timestamp.example.org'],  # optional, list or space separated string
            <constructor param>: <constructor value>,
         }
        }

    ``<constructor param>`` must be one of the :class:`.WindowsKit` constructor keyword arguments.

    :param config_dict: See above.
    :return: The new WindowsKit instance
    :raises KeyError: if the ``windows_kit`` section is missing
    :raises TypeError: if an unknown constructor parameter is given
    """
    kit_config_dict = dict(config_dict['windows_kit'] or {})
    for key in _kit_mappers:
        if key in kit_config_dict:
            kit_config_dict[key] = _kit_mappers[key](kit_config_dict[key])
    return WindowsKit(**kit_config_dict)


def load_file(path, file_decoder=None):
    """Load a config file. Must decode to dict with all components described on other methods as optional sections/keys.
    A YAML example::

        global:
          PUBLISHER_SEPARATORS: ','
          SIGNTOOL_PARAMS: -tr http://timestamp.digicert.com -td SHA256
        windows_kit:
          windows_kit: C:\\Program Files (x86)\\Windows Kits\\10\\bin\\x64
          cert_file_path: certs
          publisher_extra_keys:
            - DNQ

    :param path: A path to a config file. Provides support for YAML and JSON format, or you can specify your own decoder
                 that returns a dict.
    :param file_decoder: A callable returning a dict when passed a file-like object
    :return: The WindowsKit if one was defined, None otherwise
    :rtype: WindowsKit or None
    :raises ConfigError: if an unsupported file extension was given without the ``file_decoder`` argument, or the file
                         does not decode to a dict
    """
    if file_decoder is None:
        if path.endswith('.yml') or path.endswith('.yaml'):
            file_decoder = yaml.safe_load
        elif path.endswith('.json'):
            file_decoder = json.load
        else:
            raise ConfigError('Unsupported file type, must be YAML or JSON, or specify file_decoder argument')
    with open(path) as f:
        config_dict = file_decoder(f)
    if not isinstance(config_dict, dict):
        raise ConfigError('Config file {0} did not decode to a dict'.format(path))
    return load_config_dict(config_dict)


def load_config_dict(config_dict):
    """Load config parameters from a dictionary. Must be formatted in the same was as ``load_file``

    :param dict config_dict: The config dictionary. See format in ``load_file``.
    :return: The WindowsKit if one was defined, None otherwise
    :rtype: WindowsKit or None
    """
    if 'global' in config_dict:
        set_global_config(config_dict)
    if 'windows_kit' in config_dict:
        return create_windows_kit(config_dict)
