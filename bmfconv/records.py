"""
bmfconv.records - attribute records and font descriptor

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

from dataclasses import dataclass, field
from typing import Optional


class AttributeRecord:
    """Element tag with an ordered list of (name, value) attribute pairs."""

    def __init__(self, tag, attribs=()):
        """Create record from tag and iterable or dict of attribute pairs."""
        if isinstance(attribs, dict):
            attribs = attribs.items()
        self.tag = tag
        self._attribs = tuple((str(_k), str(_v)) for _k, _v in attribs)
        names = tuple(_k for _k, _ in self._attribs)
        if len(set(names)) != len(names):
            raise ValueError(f'Duplicate attribute name on <{tag}>: {names}')

    def __repr__(self):
        return f'{type(self).__name__}({self.tag!r}, {self._attribs!r})'

    def __eq__(self, other):
        if not isinstance(other, AttributeRecord):
            return NotImplemented
        return self.tag == other.tag and self._attribs == other._attribs

    def __contains__(self, name):
        return any(_k == name for _k, _ in self._attribs)

    def __iter__(self):
        """Iterate over (name, value) pairs in document order."""
        return iter(self._attribs)

    def get(self, name, default=None):
        """Get attribute value by name."""
        for key, value in self._attribs:
            if key == name:
                return value
        return default

    def names(self):
        """Attribute names in document order."""
        return tuple(_k for _k, _ in self._attribs)

    def items(self):
        """Attribute pairs in document order."""
        return self._attribs

    def subset(self, names):
        """
        Pairs for the given names, in the order given.
        Names not present on the record are left out.
        """
        attribs = dict(self._attribs)
        return tuple((_n, attribs[_n]) for _n in names if _n in attribs)


@dataclass
class FontDescriptor:
    """Records extracted from one BMFont descriptor."""
    info: Optional[AttributeRecord] = None
    common: Optional[AttributeRecord] = None
    pages: list = field(default_factory=list)
    chars: list = field(default_factory=list)
    kernings: list = field(default_factory=list)
    # raw count attributes on <chars> and <kernings>, None if not given
    chars_count: Optional[str] = None
    kernings_count: Optional[str] = None
    # a <kernings> element was found, even if it holds no <kerning>
    has_kernings_block: bool = False
