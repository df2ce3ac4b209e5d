"""
bmfconv test suite
command-line script tests
"""

import io
import unittest
from unittest import mock
from contextlib import redirect_stdout

from PIL import Image

from bmfconv.scripts.convert import main
from .base import BaseTester


class TestConvertScript(BaseTester):
    """Test the bmfconv script."""

    def setUp(self):
        super().setUp()
        self.infile = self.temp_path / 'sample.xml'
        self.infile.write_text(self.sample_xml)

    def test_default(self):
        self.assertEqual(main([str(self.infile)]), 0)
        outfile = self.temp_path / 'sample.fnt'
        self.assertTrue(outfile.read_text().startswith('<?xml'))

    def test_text_variant(self):
        outfile = self.temp_path / 'out.fnt'
        status = main([str(self.infile), str(outfile), '--variant', 'text'])
        self.assertEqual(status, 0)
        self.assertIn('chars count=3\n', outfile.read_text())

    def test_stdout(self):
        stream = io.StringIO()
        with redirect_stdout(stream):
            status = main([str(self.infile), '--stdout', '--variant=text'])
        self.assertEqual(status, 0)
        self.assertIn('kernings count=1\n', stream.getvalue())
        self.assertFalse((self.temp_path / 'sample.fnt').exists())

    def test_invalid_input(self):
        status = main([str(self.font_path / 'broken.xml'), str(self.temp_path / 'x.fnt')])
        self.assertEqual(status, 1)
        self.assertFalse((self.temp_path / 'x.fnt').exists())

    def test_missing_input(self):
        status = main([str(self.temp_path / 'nothere.xml')])
        self.assertEqual(status, 1)

    def test_unknown_variant(self):
        with self.assertRaises(SystemExit):
            with redirect_stdout(io.StringIO()):
                main([str(self.infile), '--variant', 'json'])

    def test_overlay_out_without_overlay(self):
        # keep the log capture in place while the script sets up logging
        with mock.patch('logging.basicConfig'):
            with self.assertLogs(level='WARNING') as cm:
                status = main([str(self.infile), '--overlay-out', str(self.temp_path / 'o.png')])
        self.assertEqual(status, 0)
        self.assertIn('--overlay-out', cm.output[0])
        self.assertFalse((self.temp_path / 'o.png').exists())
        self.assertTrue((self.temp_path / 'sample.fnt').exists())

    def test_overlay(self):
        image = self.temp_path / 'sample_0.png'
        Image.new('L', (32, 16), 0).save(image)
        status = main([str(self.infile), '--overlay', str(image)])
        self.assertEqual(status, 0)
        with Image.open(self.temp_path / 'sample_0_overlay.png') as overlay:
            self.assertEqual(overlay.getpixel((1, 1)), (255, 0, 0, 255))


if __name__ == '__main__':
    unittest.main()
