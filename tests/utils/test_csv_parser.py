"""
Unit tests for CSV parsing of contact exports.
"""
import unittest

from utils.csv_parser import parse_csv_records, decode_csv_content
from utils.errors import MalformedTabularDataError


class TestCsvParser(unittest.TestCase):

    def test_parse_two_rows(self):
        """Test that each data row becomes one record keyed by the header."""
        content = b'email,name\na@x.com,Ann\nb@x.com,Bob'

        records = parse_csv_records(content)

        self.assertEqual(records, [
            {'email': 'a@x.com', 'name': 'Ann'},
            {'email': 'b@x.com', 'name': 'Bob'},
        ])

    def test_header_only(self):
        """Test that a header-only file yields no records."""
        self.assertEqual(parse_csv_records(b'email,name\n'), [])

    def test_empty_file(self):
        """Test that an empty file yields no records."""
        self.assertEqual(parse_csv_records(b''), [])

    def test_blank_lines_skipped(self):
        """Test that blank lines do not produce records."""
        content = b'email,name\n\na@x.com,Ann\n\n\nb@x.com,Bob\n'

        records = parse_csv_records(content)

        self.assertEqual([r['email'] for r in records], ['a@x.com', 'b@x.com'])

    def test_quoted_fields(self):
        """Test standard CSV quoting with embedded commas, quotes and newlines."""
        content = b'email,company,notes\na@x.com,"Acme, Inc.","said ""hi""\nthen left"\n'

        records = parse_csv_records(content)

        self.assertEqual(records, [{
            'email': 'a@x.com',
            'company': 'Acme, Inc.',
            'notes': 'said "hi"\nthen left',
        }])

    def test_crlf_line_endings(self):
        """Test files exported with Windows line endings."""
        records = parse_csv_records(b'email,name\r\na@x.com,Ann\r\n')

        self.assertEqual(records, [{'email': 'a@x.com', 'name': 'Ann'}])

    def test_utf8_bom_stripped(self):
        """Test that a leading byte order mark does not end up in the first column name."""
        records = parse_csv_records('\ufeffemail,name\na@x.com,Zoë\n'.encode('utf-8'))

        self.assertEqual(records, [{'email': 'a@x.com', 'name': 'Zoë'}])

    def test_row_order_preserved(self):
        """Test that records come back in file order."""
        rows = '\n'.join(f'user{i}@x.com,{i}' for i in range(50))
        records = parse_csv_records(f'email,rank\n{rows}\n'.encode('utf-8'))

        self.assertEqual([r['rank'] for r in records], [str(i) for i in range(50)])

    def test_too_many_fields(self):
        """Test that a row with more fields than the header is rejected."""
        with self.assertRaises(MalformedTabularDataError) as cm:
            parse_csv_records(b'email,name\na@x.com,Ann,extra\n')
        self.assertIn('line 2', str(cm.exception))

    def test_too_few_fields(self):
        """Test that a row with fewer fields than the header is rejected."""
        with self.assertRaises(MalformedTabularDataError):
            parse_csv_records(b'email,name\na@x.com\n')

    def test_unterminated_quote(self):
        """Test that broken quoting is rejected."""
        with self.assertRaises(MalformedTabularDataError):
            parse_csv_records(b'email,name\n"a@x.com,Ann\n')

    def test_invalid_utf8(self):
        """Test that content that is not UTF-8 is rejected."""
        with self.assertRaises(MalformedTabularDataError):
            decode_csv_content(b'email,name\n\xff\xfe,Ann\n')


if __name__ == '__main__':
    unittest.main()
