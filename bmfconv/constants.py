"""
bmfconv.constants - version and default values

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

VERSION = '0.3.0'
CONVERTER_NAME = f'bmfconv v{VERSION}'

# output serialiser used when none is requested
DEFAULT_VARIANT = 'laya'

# output name stem when the source name is unknown
DEFAULT_STEM = 'font'


##############################################################################
# Laya dialect

# values used when info/@size or common/@lineHeight are missing
DEFAULT_SIZE = '32'
DEFAULT_LINE_HEIGHT = '32'

# attributes kept on <char> and <kerning>, in output order
LAYA_CHAR_ATTRIBS = (
    'id', 'x', 'y', 'width', 'height', 'xoffset', 'yoffset', 'xadvance',
)
LAYA_KERNING_ATTRIBS = ('first', 'second', 'amount')


##############################################################################
# classic text dialect

# attributes that are always written as quoted strings, per tag
QUOTED_ATTRIBS = {
    'info': ('face', 'charset'),
    'common': (),
    'page': ('file',),
    'char': (),
    'kerning': (),
}
