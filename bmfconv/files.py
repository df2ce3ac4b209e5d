"""
bmfconv.files - load and save descriptor files

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import re
import logging
from pathlib import Path

from .constants import DEFAULT_STEM
from .base import transcoders
from .magic import looks_like_xml
from .transcoder import convert


_XML_SUFFIX = re.compile(r'\.xml$', re.IGNORECASE)


def output_name(source_name=None, variant:str=''):
    """
    Output filename from the variant's template.

    source_name: input filename; a trailing `.xml` is dropped (default: `font`)
    variant: output dialect (default: `laya`)
    """
    template = transcoders.get_for(variant).template
    if not source_name:
        return template.format(name=DEFAULT_STEM)
    return template.format(name=_XML_SUFFIX.sub('', str(source_name)))


def load_descriptor(infile):
    """Read descriptor file as bytes, leaving decoding to the XML parser."""
    infile = Path(infile)
    logging.info("Reading descriptor '%s'", infile)
    data = infile.read_bytes()
    if not looks_like_xml(data):
        logging.warning("'%s' does not look like an XML descriptor.", infile)
    return data


def save_descriptor(outfile, text):
    """Write converted descriptor as utf-8 text."""
    outfile = Path(outfile)
    logging.info("Writing descriptor '%s'", outfile)
    # keep line endings as produced
    with open(outfile, 'w', encoding='utf-8', newline='') as f:
        f.write(text)
    return outfile


def convert_file(infile, outfile=None, *, variant:str=''):
    """
    Convert a descriptor file and write the result.

    infile: path to the XML descriptor
    outfile: output path (default: input name in the variant's template, same directory)
    variant: output dialect, one of `laya`, `text` (default: `laya`)
    Returns the output path. On failure, no output file is written.
    """
    infile = Path(infile)
    if outfile is None:
        outfile = infile.parent / output_name(infile.name, variant)
    # convert fully before touching the output file
    text = convert(load_descriptor(infile), variant)
    return save_descriptor(outfile, text)
