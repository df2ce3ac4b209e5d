"""
bmfconv.preview - char boxes for spritesheet previews

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import re
import logging
from collections import namedtuple
from pathlib import Path

from PIL import Image, ImageDraw

from .records import FontDescriptor
from .reader import parse_xml


_INTEGER = re.compile(r'-?[0-9]+')


class CharBox(namedtuple('CharBox', 'id x y width height')):
    """Location of a char image on the spritesheet."""

    @property
    def box(self):
        """Inclusive left, top, right, bottom pixel coordinates."""
        return (
            self.x, self.y,
            self.x + self.width - 1, self.y + self.height - 1
        )


def _to_int(value, name):
    """Convert attribute value to int; missing or unreadable values become 0."""
    if value is None:
        return 0
    # plain decimal digits only
    if not _INTEGER.fullmatch(value):
        logging.warning('Non-integer value %r for `%s` taken as 0.', value, name)
        return 0
    return int(value)


def char_boxes(source):
    """
    Extract the spritesheet boxes of all chars.

    source: FontDescriptor, or XML descriptor as str or bytes
    """
    if not isinstance(source, FontDescriptor):
        source = parse_xml(source)
    return [
        CharBox(*(
            _to_int(_char.get(_name), _name)
            for _name in CharBox._fields
        ))
        for _char in source.chars
    ]


def draw_overlay(image, boxes, *, outline=(255, 0, 0, 255), width:int=1):
    """
    Draw char boxes over a spritesheet.

    image: PIL image or path to an image file
    boxes: iterable of CharBox
    outline: RGBA colour of the box outlines (default: opaque red)
    width: line width in pixels (default: 1)
    Returns an RGBA copy; the input image is not changed.
    """
    if isinstance(image, (str, Path)):
        with Image.open(image) as sheet:
            canvas = sheet.convert('RGBA')
    else:
        canvas = image.convert('RGBA')
    draw = ImageDraw.Draw(canvas)
    count = 0
    for charbox in boxes:
        # nothing to show for empty glyphs such as space
        if charbox.width <= 0 or charbox.height <= 0:
            continue
        draw.rectangle(charbox.box, outline=tuple(outline), width=width)
        count += 1
    logging.debug('Drew %d char boxes.', count)
    return canvas
