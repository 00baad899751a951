"""Imports and defines the core of the public API"""

from .base import WindowsKit
from .cert import make_cert
from .exceptions import (
    AppxError,
    AppxWarning,
    PublisherNameWarning,
    ConfigError,
    ToolError,
    ToolNotFoundError,
    SigningError,
    InvalidSyntaxError,
)
from .publisher import (
    PublisherNameRule,
    get_publisher_name_rule,
    is_valid_publisher_name,
    normalize_publisher_name,
)
from .sign import sign_appx

__all__ = [
    'WindowsKit',
    'make_cert',
    'AppxError',
    'AppxWarning',
    'PublisherNameWarning',
    'ConfigError',
    'ToolError',
    'ToolNotFoundError',
    'SigningError',
    'InvalidSyntaxError',
    'PublisherNameRule',
    'get_publisher_name_rule',
    'is_valid_publisher_name',
    'normalize_publisher_name',
    'sign_appx',
]
