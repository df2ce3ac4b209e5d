"""
bmfconv.transcoder - convert BMFont XML descriptors

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import logging

from .base import transcoders
from .reader import parse_xml

# ensure serialisers get registered
from . import laya as _laya
from . import text as _text


def convert(data, variant:str=''):
    """
    Convert an XML descriptor to another descriptor dialect.

    data: XML descriptor as str, or bytes in the declared encoding
    variant: output dialect, one of `laya`, `text` (default: `laya`)
    """
    # look up first so that an unknown variant fails before parsing
    writer = transcoders.get_for(variant)
    logging.debug('Converting descriptor to `%s` variant.', writer.format)
    descriptor = parse_xml(data)
    return writer(descriptor)


def get_variants():
    """Names and descriptions of the output variants."""
    return {_writer.format: _writer.description for _writer in transcoders}
