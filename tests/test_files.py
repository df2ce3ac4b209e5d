"""
bmfconv test suite
file loading and saving tests
"""

import unittest
from unittest import mock

import bmfconv
from bmfconv import InvalidDocument, FileFormatError
from .base import BaseTester


class TestOutputName(unittest.TestCase):
    """Test output filename derivation."""

    def test_xml_suffix(self):
        self.assertEqual(bmfconv.output_name('myfont.xml'), 'myfont.fnt')

    def test_xml_suffix_case(self):
        self.assertEqual(bmfconv.output_name('MyFont.XML'), 'MyFont.fnt')

    def test_only_final_suffix(self):
        self.assertEqual(bmfconv.output_name('a.xml.xml'), 'a.xml.fnt')

    def test_other_suffix(self):
        self.assertEqual(bmfconv.output_name('myfont.txt'), 'myfont.txt.fnt')

    def test_no_name(self):
        self.assertEqual(bmfconv.output_name(None), 'font.fnt')
        self.assertEqual(bmfconv.output_name(''), 'font.fnt')

    def test_variant_template(self):
        self.assertEqual(bmfconv.output_name('a.xml', 'text'), 'a.fnt')
        with mock.patch.object(bmfconv.text.write_text, 'template', '{name}.txt'):
            self.assertEqual(bmfconv.output_name('a.xml', 'text'), 'a.txt')
            self.assertEqual(bmfconv.output_name(None, 'text'), 'font.txt')
            # other variants keep their own template
            self.assertEqual(bmfconv.output_name('a.xml', 'laya'), 'a.fnt')

    def test_unknown_variant(self):
        with self.assertRaises(FileFormatError):
            bmfconv.output_name('a.xml', 'json')


class TestFiles(BaseTester):
    """Test file conversion."""

    def test_convert_file_default_name(self):
        infile = self.temp_path / 'sample.xml'
        infile.write_text(self.sample_xml)
        outfile = bmfconv.convert_file(infile)
        self.assertEqual(outfile, self.temp_path / 'sample.fnt')
        self.assertEqual(
            outfile.read_text(encoding='utf-8'),
            bmfconv.convert(self.sample_xml, 'laya')
        )

    def test_convert_file_text(self):
        outfile = self.temp_path / 'out.fnt'
        bmfconv.convert_file(
            self.font_path / 'sample.xml', outfile, variant='text'
        )
        text = outfile.read_text(encoding='utf-8')
        self.assertTrue(text.startswith('info face="Sample Sans" size=24'))

    def test_declared_encoding_written_as_utf8(self):
        outfile = self.temp_path / 'latin1.fnt'
        bmfconv.convert_file(
            self.font_path / 'latin1.xml', outfile, variant='text'
        )
        self.assertIn(
            'info face="Café" size=16\n', outfile.read_text(encoding='utf-8')
        )

    def test_convert_file_variant_template(self):
        infile = self.temp_path / 'sample.xml'
        infile.write_text(self.sample_xml)
        with mock.patch.object(bmfconv.text.write_text, 'template', '{name}.txt'):
            outfile = bmfconv.convert_file(infile, variant='text')
        self.assertEqual(outfile, self.temp_path / 'sample.txt')
        self.assertIn('chars count=3\n', outfile.read_text(encoding='utf-8'))

    def test_failure_keeps_previous_output(self):
        outfile = self.temp_path / 'out.fnt'
        outfile.write_text('previous')
        with self.assertRaises(InvalidDocument):
            bmfconv.convert_file(self.font_path / 'broken.xml', outfile)
        self.assertEqual(outfile.read_text(), 'previous')

    def test_failure_writes_nothing(self):
        outfile = self.temp_path / 'out.fnt'
        with self.assertRaises(InvalidDocument):
            bmfconv.convert_file(self.font_path / 'broken.xml', outfile)
        self.assertFalse(outfile.exists())

    def test_not_xml_warning(self):
        infile = self.temp_path / 'font.fnt'
        infile.write_text('info face="x" size=8\n')
        with self.assertLogs(level='WARNING'):
            data = bmfconv.load_descriptor(infile)
        with self.assertRaises(InvalidDocument):
            bmfconv.convert(data)

    def test_line_endings_kept(self):
        outfile = bmfconv.save_descriptor(self.temp_path / 'x.fnt', 'a\nb\n')
        self.assertEqual(outfile.read_bytes(), b'a\nb\n')


if __name__ == '__main__':
    unittest.main()
