"""
bmfconv.text - classic BMFont text descriptor

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

from .base import transcoders
from .constants import QUOTED_ATTRIBS


@transcoders.register(name='text', template='{name}.fnt')
def write_text(descriptor):
    """Classic line-based key=value FNT descriptor."""
    lines = []
    if descriptor.info is not None:
        lines.append(_create_textdict('info', descriptor.info))
    if descriptor.common is not None:
        lines.append(_create_textdict('common', descriptor.common))
    for page in descriptor.pages:
        lines.append(_create_textdict('page', page))
    # a count given in the source is kept, even if it is wrong
    chars_count = descriptor.chars_count
    if chars_count is None:
        chars_count = len(descriptor.chars)
    lines.append(f'chars count={chars_count}')
    for char in descriptor.chars:
        lines.append(_create_textdict('char', char))
    if descriptor.has_kernings_block or descriptor.kernings:
        kernings_count = descriptor.kernings_count
        if kernings_count is None:
            kernings_count = len(descriptor.kernings)
        lines.append(f'kernings count={kernings_count}')
        for kern in descriptor.kernings:
            lines.append(_create_textdict('kerning', kern))
    return ''.join(f'{_line}\n' for _line in lines)


def _create_textdict(name, record):
    """Create a text-dictionary line for bmfont file."""
    quoted = QUOTED_ATTRIBS.get(name, ())
    return ' '.join((name, *(
        '{}={}'.format(_k, _to_str(_v, _k in quoted))
        for _k, _v in record.items()
    )))


def _to_str(value, always_quote=False):
    """Convert value to str for bmfont file."""
    if always_quote or ' ' in value or not value:
        return f'"{value}"'
    return value
