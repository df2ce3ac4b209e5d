"""
bmfconv - convert AngelCode BMFont XML descriptors

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import sys as _sys
assert _sys.version_info >= (3, 9)

from .constants import VERSION as __version__
from .constants import CONVERTER_NAME, DEFAULT_VARIANT
from .magic import FileFormatError, InvalidDocument
from .records import AttributeRecord, FontDescriptor
from .reader import parse_xml
from .base import transcoders
from .transcoder import convert, get_variants
from .preview import CharBox, char_boxes, draw_overlay
from .files import output_name, load_descriptor, save_descriptor, convert_file
