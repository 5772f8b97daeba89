"""
mediawikibot.codec - turning parameters into request bodies and response
bodies into Python values.

What a decoded response looks like depends on the format it was
requested in, so ``decode`` returns one of a few small wrapper classes
instead of a bare value:

* ``Mapping`` - a JSON object (the default format)
* ``JsonValue`` - any other JSON document
* ``XmlDocument`` - the root ``Element`` of an XML response
* ``Text`` - the raw text of ``yaml``, ``txt``, ``dbg``, ``dump``
  and the HTML ``*fm`` formats

All of them expose ``value``, ``format`` and ``raw``, and pass ``[]``
lookups through to ``value``:

.. code-block:: python

    >>> result = decode(b'{"login": {"result": "Success"}}', 'json')
    >>> result
    <Mapping (json): {'login': {'result': 'Success'}}>
    >>> result['login']['result']
    'Success'
"""
import json
import xml.etree.ElementTree as ET
from urllib.parse import quote_plus

from .excs import DecodeError, UnsupportedFormatError

__all__ = [
    'DEFAULT_FORMAT',
    'TEXT_FORMATS',
    'UNSUPPORTED_FORMATS',
    'URLENCODED',
    'MULTIPART',
    'DecodedValue',
    'Mapping',
    'JsonValue',
    'XmlDocument',
    'Text',
    'check_format',
    'clean_params',
    'urlize',
    'encode_body',
    'decode',
]

DEFAULT_FORMAT = 'json'
TEXT_FORMATS = frozenset(('yaml', 'txt', 'dbg', 'dump'))
UNSUPPORTED_FORMATS = frozenset(('php', 'wddx'))

URLENCODED = 'application/x-www-form-urlencoded'
MULTIPART = 'multipart/form-data'

class DecodedValue(object):
    """A decoded API response. Use one of the subclasses."""
    kind = None

    def __init__(self, value, fmt, raw):
        """Wrap ``value``, decoded from ``raw`` in format ``fmt``."""
        self.value = value
        self.format = fmt
        self.raw = raw

    def __repr__(self):
        """Represent a decoded response."""
        return '<{kind} ({fmt}): {val!r}>'.format(
            kind=type(self).__name__, fmt=self.format, val=self.value)

    __str__ = __repr__

    def __getitem__(self, key):
        """Look ``key`` up in the wrapped value."""
        return self.value[key]

    def __contains__(self, key):
        """Check ``key`` against the wrapped value."""
        return key in self.value

    def get(self, key, default=None):
        """dict.get, if the wrapped value supports it."""
        try:
            return self.value[key]
        except (KeyError, IndexError, TypeError):
            return default

class Mapping(DecodedValue):
    """A JSON object."""
    kind = 'mapping'

class JsonValue(DecodedValue):
    """A JSON document whose top level isn't an object."""
    kind = 'json'

class XmlDocument(DecodedValue):
    """The root Element of an XML response."""
    kind = 'xml'

class Text(DecodedValue):
    """Response text returned as-is."""
    kind = 'text'

def _is_text_format(fmt):
    # jsonfm, xmlfm etc. are HTML pages meant for humans
    return fmt in TEXT_FORMATS or fmt.endswith('fm')

def check_format(fmt):
    """Raise UnsupportedFormatError if responses in ``fmt`` can't be
    decoded.
    """
    if str(fmt).lower() in UNSUPPORTED_FORMATS:
        raise UnsupportedFormatError(fmt)

def clean_params(params):
    """Drop None and False values and turn True into 1.

    MediaWiki treats any boolean parameter that is present as true, so
    false flags must be left out entirely.
    """
    cleaned = {}
    for key, value in params.items():
        if value is None or value is False:
            continue
        if value is True:
            value = 1
        cleaned[key] = value
    return cleaned

def urlize(params):
    """Build an x-www-form-urlencoded string out of ``params``."""
    return '&'.join(
        quote_plus(str(key)) + '=' + quote_plus(str(value))
        for key, value in clean_params(params).items()
    )

def encode_body(params, multipart=False):
    """Encode ``params`` as a request body.

    Returns a ``(body, content_type)`` pair. For ordinary requests the
    body is the urlized string. For multipart requests it is a field
    mapping meant for the ``files`` argument of ``requests``: scalars
    become ``(None, text)`` pairs and file objects or
    ``(filename, fileobj[, content_type])`` tuples are passed through.
    """
    if not multipart:
        return urlize(params), URLENCODED
    fields = {}
    for key, value in clean_params(params).items():
        if isinstance(value, (str, bytes, int, float)):
            fields[key] = (None, value if isinstance(value, bytes)
                           else str(value))
        else:
            fields[key] = value
    return fields, MULTIPART

def decode(raw, fmt=DEFAULT_FORMAT):
    """Decode the response body ``raw`` requested in format ``fmt``.

    ``raw`` may be bytes or text; surrounding whitespace is stripped
    first since it trips up the strict parsers. Unknown formats are
    decoded like the default format. XML bytes are handed to the parser
    as they are, so the document's own encoding declaration is honoured.
    """
    body = raw.strip()
    if isinstance(body, bytes):
        text = body.decode('utf-8', 'replace')
    else:
        text = body
    fmt = (fmt or DEFAULT_FORMAT).lower()

    check_format(fmt)
    if _is_text_format(fmt):
        return Text(text, fmt, text)
    if fmt == 'xml':
        try:
            return XmlDocument(ET.fromstring(body), fmt, text)
        except ET.ParseError as exc:
            raise DecodeError('Failed to decode XML response: '
                              + str(exc), text, fmt) from exc
    try:
        data = json.loads(text)
    except ValueError as exc:
        raise DecodeError('Failed to decode server response. Please make '
                          'sure that the API is enabled on the wiki and '
                          'that the API URL is correct.', text, fmt) from exc
    if isinstance(data, dict):
        return Mapping(data, fmt, text)
    return JsonValue(data, fmt, text)
