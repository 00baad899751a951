"""Validation of publisher names before they are handed to makecert.exe as a certificate subject"""

import logging
import re
import threading
from warnings import warn

from . import rfc1779
from .exceptions import InvalidSyntaxError, PublisherNameWarning
from .rules import RegexSyntaxRule
from .utils import re_anchor, unique_upper

logger = logging.getLogger(__name__)

MIN_LENGTH = 1
MAX_LENGTH = 8192


class PublisherNameRule(RegexSyntaxRule):
    """A distinguished name as accepted by makecert.exe for its ``-n`` argument.

    Instances are immutable once constructed and safe to share between threads.

    :param int min_length: Shortest accepted string. The default of 1 rejects the empty string.
    :param int max_length: Longest accepted string.
    :param str separators: Characters separating RDNs. Any non-empty subset of ``,;``.
    :param extra_keys: Additional attribute keys to accept, e.g. ``('DNQ',)`` for tool versions that take it.
    """

    DESC = 'Publisher Name'
    flags = re.IGNORECASE

    def __init__(self, min_length=MIN_LENGTH, max_length=MAX_LENGTH, separators=rfc1779.SEPARATORS, extra_keys=()):
        if not separators:
            raise ValueError('At least one RDN separator is required')
        bad = [c for c in separators if c not in rfc1779.SEPARATORS]
        if bad:
            raise ValueError('Unsupported RDN separators: {0}'.format(''.join(bad)))
        if min_length < 0 or max_length < min_length:
            raise ValueError('Invalid length bounds {0}-{1}'.format(min_length, max_length))

        self.min_length = min_length
        self.max_length = max_length
        self.separators = ''.join(sorted(set(separators), key=separators.index))
        self.keys = tuple(unique_upper(rfc1779.KEYS + tuple(extra_keys)))

        RegexSyntaxRule.__init__(self, re_anchor(rfc1779.distinguished_name(self.keys, self.separators)))

    def validate(self, s):
        """Validate a publisher name.

        :param s: Candidate publisher name
        :return: The regex match object
        :rtype: MatchObject
        :raises InvalidSyntaxError: if the name is not a str, is out of bounds, or does not match the grammar
        """
        if isinstance(s, str) and not (self.min_length <= len(s) <= self.max_length):
            raise InvalidSyntaxError('Not a valid {0}: length must be between {1} and {2}'.format(
                self.DESC, self.min_length, self.max_length))
        return RegexSyntaxRule.validate(self, s)

    def __repr__(self):
        return '{0}(min_length={1}, max_length={2}, separators={3!r}, keys={4!r})'.format(
            self.__class__.__name__, self.min_length, self.max_length, self.separators, self.keys)


_default_rule = None
_default_rule_lock = threading.Lock()


def get_publisher_name_rule():
    """Obtain the process-wide default :class:`PublisherNameRule`, compiling it on first use"""
    global _default_rule
    if _default_rule is None:
        with _default_rule_lock:
            if _default_rule is None:
                _default_rule = PublisherNameRule()
    return _default_rule


def is_valid_publisher_name(candidate):
    """Check whether makecert.exe will accept ``candidate`` as a subject name.

    Never raises; anything that is not a str is simply invalid.

    :param candidate: The publisher name
    :rtype: bool
    """
    return get_publisher_name_rule().is_valid(candidate)


def normalize_publisher_name(name, rule=None):
    """Make a best effort to turn ``name`` into a publisher name makecert.exe accepts.

    Valid names are returned unchanged. Anything else is assumed to be a bare common name and prefixed with ``CN=``.
    If even that does not validate, a :class:`.PublisherNameWarning` is issued and the prefixed name is returned so
    the tool itself gets the final say.

    :param str name: User-supplied publisher name
    :param PublisherNameRule rule: The rule to check against; defaults to :func:`get_publisher_name_rule`
    :rtype: str
    :raises TypeError: if name is not a string
    :raises ValueError: if name is empty
    """
    if not isinstance(name, str):
        raise TypeError('publisher name must be a string')
    if not name:
        raise ValueError('publisher name must be a non-empty string')
    if rule is None:
        rule = get_publisher_name_rule()
    if rule.is_valid(name):
        return name
    prefixed = 'CN=' + name
    logger.debug('Publisher name is not a distinguished name, trying {0!r}'.format(prefixed))
    if not rule.is_valid(prefixed):
        warn('Publisher name did not appear valid even after prepending CN=: {0!r}'.format(prefixed),
             PublisherNameWarning)
    return prefixed
