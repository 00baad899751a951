"""RFC 1779: A String Representation of Distinguished Names, as accepted by makecert.exe

https://tools.ietf.org/html/rfc1779

MakeCert claims to support publisher strings matching RFC 1779 / X.500 distinguished names as long as the length of
the string is between 1 and 8192. In practice the tool departs from the RFC in several places, e.g. comma escaping is
not supported and some keys listed by the RFC are refused, so the fragments here follow the observed behavior of
makecert.exe rather than the RFC text.

See https://msdn.microsoft.com/en-us/library/windows/apps/br211441.aspx
    https://msdn.microsoft.com/en-us/library/aa366101
    http://www.itu.int/rec/T-REC-X.520-198811-S/en
"""

import re

from .utils import char_class_escape, re_alternation, unique_upper

KEYS = (
    'DC',            # domainComponent
    'CN',            # commonName
    'OU',            # organizationalUnitName
    'O',             # organizationName
    'STREET',        # streetAddress
    'L',             # localityName
    'ST',            # stateOrProvinceName
    'C',             # countryName
    'SN',            # surname
    'GN',            # givenName
    'E',             # email
    'S',             # (non-standard) "State" used by MS Identity objects
    'T',             # title
    'G',             # generationQualifier
    'I',             # IP address
    'SERIALNUMBER',  # serialNumber
)

# listed in reference material but refused by makecert.exe
REJECTED_KEYS = (
    'DNQ',           # dnQualifier (OID.2.5.4.46)
    'UID',           # userid
)

SEPARATORS = ',;'

DIGIT = r'[0-9]'
WSP = r'\s*'

number = r'(?:0|[1-9]' + DIGIT + r'*)'
numericoid = r'OID\.' + number + r'(?:\.' + number + r')+'

# no quote may appear inside the quotes, escaped or not
quoted = r'"[^"]*"'


def key_pattern(keys=KEYS):
    """Alternation of the explicit OID form and the given key tokens"""
    return re_alternation([numericoid] + [re.escape(key) for key in unique_upper(keys)])


def separator_pattern(separators=SEPARATORS):
    return r'[' + char_class_escape(separators) + r']'


def unquoted_pattern(keys=KEYS, separators=SEPARATORS):
    """A run of characters free of separators and quotes.

    A plus sign belongs to the value unless it introduces another ``key=`` assertion, so multi-valued RDNs always split
    in exactly one place.
    """
    run = r'[^' + char_class_escape(separators + '"+') + r']*'
    plus = r'\+(?!' + key_pattern(keys) + r'=)'
    return run + r'(?:' + plus + run + r')*'


def attribute_type_and_value(keys=KEYS, separators=SEPARATORS):
    """A single ``key=value`` assertion with an unquoted value"""
    return key_pattern(keys) + r'=' + unquoted_pattern(keys, separators)


def relative_distinguished_name(keys=KEYS, separators=SEPARATORS):
    """Either one quoted assertion, or one or more ``+``-joined unquoted assertions.

    makecert.exe only takes a quoted value as a whole RDN: the closing quote must be followed by a separator or the end
    of the string, so ``CN="x"+O=y``, ``CN=a+O="y"`` and ``CN="x" `` are all refused.
    """
    atv = attribute_type_and_value(keys, separators)
    return r'(?:' + key_pattern(keys) + r'=' + quoted + r'|' + atv + r'(?:\+' + atv + r')*)'


def distinguished_name(keys=KEYS, separators=SEPARATORS):
    """RDNs joined by separators, each optionally followed by whitespace, with an optional bare trailing separator"""
    rdn = relative_distinguished_name(keys, separators)
    sep = separator_pattern(separators)
    return rdn + r'(?:' + sep + WSP + rdn + r')*' + sep + r'?'
