"""
bmfconv.laya - Laya engine XML font descriptor

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

from xml.sax.saxutils import escape

from .base import transcoders
from .constants import (
    DEFAULT_SIZE, DEFAULT_LINE_HEIGHT,
    LAYA_CHAR_ATTRIBS, LAYA_KERNING_ATTRIBS,
)


_XML_DECLARATION = '<?xml version="1.0" encoding="utf-8"?>'
_INDENT = '  '


def _attr_value(record, name, default):
    """Attribute value, or default if the record or value is missing."""
    if record is None:
        return default
    # empty values count as missing
    return record.get(name) or default


def _create_tag(name, attribs, level):
    """Create an empty-element tag line."""
    attrstr = ''.join(
        ' {}="{}"'.format(_k, escape(_v, {'"': '&quot;'}))
        for _k, _v in attribs
    )
    return f'{_INDENT * level}<{name}{attrstr}/>'


@transcoders.register(name='laya', template='{name}.fnt')
def write_laya(descriptor):
    """Laya engine XML descriptor with auto-scaling info."""
    lines = [_XML_DECLARATION, '<font>']
    # Laya keeps lineHeight in the info tag
    lines.append(_create_tag('info', (
        ('autoScaleSize', 'true'),
        ('size', _attr_value(descriptor.info, 'size', DEFAULT_SIZE)),
        (
            'lineHeight',
            _attr_value(descriptor.common, 'lineHeight', DEFAULT_LINE_HEIGHT)
        ),
    ), level=1))
    lines.append(f'{_INDENT}<chars>')
    lines.extend(
        # attributes missing on the source char are left out, not defaulted
        _create_tag('char', _char.subset(LAYA_CHAR_ATTRIBS), level=2)
        for _char in descriptor.chars
    )
    lines.append(f'{_INDENT}</chars>')
    if descriptor.kernings:
        lines.append(f'{_INDENT}<kernings>')
        lines.extend(
            _create_tag('kerning', _kern.subset(LAYA_KERNING_ATTRIBS), level=2)
            for _kern in descriptor.kernings
        )
        lines.append(f'{_INDENT}</kernings>')
    lines.append('</font>')
    # no newline after the closing tag
    return '\n'.join(lines)
