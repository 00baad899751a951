"""Base classes for syntax rules"""

from .exceptions import InvalidSyntaxError
import re


class SyntaxRule(object):
    """Base class for all syntax rules"""

    DESC = ''
    """Short text description of the rule. Must be defined by subclasses."""

    def validate(self, s):
        """Validate a string. Must be implemented by subclasses.

        :param s: Candidate string
        :return: Any useful value for the rule
        :raises InvalidSyntaxError: if the string is invalid
        """
        raise NotImplementedError()

    def is_valid(self, s):
        """Check a candidate without raising.

        :param s: Candidate value of any type
        :return: True if :meth:`validate` accepts the value
        :rtype: bool
        """
        try:
            self.validate(s)
            return True
        except InvalidSyntaxError:
            return False


class RegexSyntaxRule(SyntaxRule):
    """For validating rules based on a regular expression. Most syntax rules can inherit from this."""

    regex = r''
    """The regular expression defining the rule. Subclasses must define this attribute or pass one to the
    constructor."""

    flags = 0
    """Flags passed to :func:`re.compile`"""

    def __init__(self, regex=None):
        if regex is not None:
            self.regex = regex
        self.compiled_re = re.compile(self.regex, self.flags)

    def validate(self, s):
        """Validate a string against the regular expression.

        :param s: Candidate string
        :return: The regex match object
        :rtype: MatchObject
        :raises InvalidSyntaxError: if the string does not match
        """
        if not isinstance(s, str):
            raise InvalidSyntaxError('Not a valid {0}: expected str, got {1}'.format(self.DESC, type(s).__name__))
        m = self.compiled_re.match(s)
        if m:
            return m
        else:
            raise InvalidSyntaxError('Not a valid {0}: {1!r}'.format(self.DESC, s))
