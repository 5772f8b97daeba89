"""Test encoding requests and decoding responses."""
from unittest import TestCase
from urllib.parse import parse_qs
import mediawikibot as mw
from mediawikibot import codec

class TestEncode(TestCase):
    """Test urlize and encode_body."""
    def test_urlize(self):
        """Assert keys and values are percent-encoded and &-joined."""
        body = codec.urlize({'text': '==Heading 2==', 'title': 'A&B'})
        self.assertEqual(body, 'text=%3D%3DHeading+2%3D%3D&title=A%26B')
        self.assertFalse(body.endswith('&'))

    def test_urlize_round_trip(self):
        """Assert a urlized body parses back to what went in."""
        params = {'text': '==Heading 2==', 'summary': 'café 50%'}
        parsed = parse_qs(codec.urlize(params))
        self.assertEqual({k: v[0] for k, v in parsed.items()}, params)

    def test_flags(self):
        """Assert True becomes 1 and None/False are left out."""
        body = codec.urlize({'bot': True, 'minor': False,
                             'section': None, 'nocreate': 1})
        self.assertEqual(body, 'bot=1&nocreate=1')

    def test_empty(self):
        """Assert no parameters make an empty body."""
        self.assertEqual(codec.urlize({}), '')

    def test_encode_plain(self):
        """Assert ordinary bodies are URL-encoded strings."""
        body, ctype = codec.encode_body({'a': 'b c'})
        self.assertEqual(body, 'a=b+c')
        self.assertEqual(ctype, codec.URLENCODED)

    def test_encode_multipart(self):
        """Assert multipart fields are passed through for requests."""
        fobj = object()
        body, ctype = codec.encode_body(
            {'filename': 'a.png', 'file': fobj, 'ignorewarnings': True,
             'chunk': b'\x89PNG'}, multipart=True)
        self.assertEqual(ctype, codec.MULTIPART)
        self.assertEqual(body['filename'], (None, 'a.png'))
        self.assertEqual(body['ignorewarnings'], (None, '1'))
        self.assertEqual(body['chunk'], (None, b'\x89PNG'))
        self.assertTrue(body['file'] is fobj)

class TestDecode(TestCase):
    """Test decode."""
    def test_json_mapping(self):
        """Assert JSON objects decode to a Mapping."""
        result = codec.decode(b'{"login": {"result": "Success"}}', 'json')
        self.assertTrue(isinstance(result, mw.Mapping))
        self.assertEqual(result['login']['result'], 'Success')
        self.assertIn('login', result)
        self.assertEqual(result.format, 'json')

    def test_json_value(self):
        """Assert other JSON documents decode to a JsonValue."""
        result = codec.decode('["Pyth", ["Python"]]', 'json')
        self.assertTrue(isinstance(result, mw.JsonValue))
        self.assertEqual(result[1], ['Python'])
        self.assertIsNone(result.get('missing'))

    def test_whitespace_trimmed(self):
        """Assert surrounding whitespace doesn't break parsing."""
        result = codec.decode(b'\n\n  {"a": 1}\r\n', 'json')
        self.assertEqual(result.value, {'a': 1})
        self.assertEqual(result.raw, '{"a": 1}')

    def test_xml(self):
        """Assert XML decodes to its root element."""
        result = codec.decode(' <api><query><page title="Main Page"/>'
                              '</query></api>\n', 'xml')
        self.assertTrue(isinstance(result, mw.XmlDocument))
        self.assertEqual(result.value.tag, 'api')
        self.assertEqual(result.value.find('query/page').get('title'),
                         'Main Page')

    def test_xml_declared_encoding(self):
        """Assert XML bodies are parsed in their declared encoding."""
        body = (b'\n<?xml version="1.0" encoding="ISO-8859-1"?>'
                b'<api><page title="caf\xe9"/></api>\n')
        result = codec.decode(body, 'xml')
        self.assertEqual(result.value.find('page').get('title'), 'caf\xe9')
        self.assertTrue(result.raw.startswith('<?xml'))

    def test_text_formats(self):
        """Assert text formats come back untouched."""
        for fmt in ('yaml', 'txt', 'dbg', 'dump', 'jsonfm'):
            result = codec.decode(b'  Array ( [a] => 1 )  ', fmt)
            self.assertTrue(isinstance(result, mw.Text))
            self.assertEqual(result.value, 'Array ( [a] => 1 )')

    def test_unknown_format(self):
        """Assert unknown formats are decoded like the default."""
        result = codec.decode(b'{"a": 1}', 'rawfm2')
        self.assertTrue(isinstance(result, mw.Mapping))
        self.assertTrue(isinstance(codec.decode(b'{}', None), mw.Mapping))

    def test_decode_error(self):
        """Assert bad bodies raise DecodeError with the body attached."""
        with self.assertRaises(mw.DecodeError) as ctx:
            codec.decode(b' <html>Not the API</html> ', 'json')
        self.assertEqual(ctx.exception.raw, '<html>Not the API</html>')
        self.assertEqual(ctx.exception.format, 'json')
        with self.assertRaises(mw.DecodeError):
            codec.decode(b'<api>', 'xml')

    def test_unsupported(self):
        """Assert php and wddx have no decoder."""
        for fmt in ('php', 'wddx'):
            with self.assertRaises(mw.UnsupportedFormatError):
                codec.decode(b'a:0:{}', fmt)
