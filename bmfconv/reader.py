"""
bmfconv.reader - read AngelCode BMFont XML descriptors

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import io
import logging
import xml.etree.ElementTree as etree

from .magic import InvalidDocument
from .records import AttributeRecord, FontDescriptor


# text/xml/binary format: https://www.angelcode.com/products/bmfont/doc/file_format.html

# bound to the `xml` prefix without a declaration
_XML_NAMESPACE = 'http://www.w3.org/XML/1998/namespace'


def _local_name(tag):
    """Strip namespace from element tag."""
    return tag.rpartition('}')[2]


def _find_all(root, name):
    """All elements with this tag, in document order, including the root."""
    return [
        _elem for _elem in root.iter()
        if isinstance(_elem.tag, str) and _local_name(_elem.tag) == name
    ]


def _find(root, name):
    """First element with this tag in document order, or None."""
    for elem in root.iter():
        if isinstance(elem.tag, str) and _local_name(elem.tag) == name:
            return elem
    return None


def _prefixed_name(key, prefixes):
    """Attribute name with its namespace uri replaced by the document prefix."""
    if not key.startswith('{'):
        return key
    uri, _, local = key[1:].partition('}')
    prefix = prefixes.get(uri)
    if not prefix:
        return local
    return f'{prefix}:{local}'


def _to_record(elem, prefixes):
    """Convert element to attribute record, keeping document order."""
    if elem is None:
        return None
    return AttributeRecord(_local_name(elem.tag), (
        (_prefixed_name(_k, prefixes), _v) for _k, _v in elem.attrib.items()
    ))


def _parse_tree(data):
    """Parse XML; return root element and namespace prefixes by uri."""
    if isinstance(data, bytes):
        source = io.BytesIO(data)
    else:
        source = io.StringIO(data)
    prefixes = {_XML_NAMESPACE: 'xml'}
    events = etree.iterparse(source, events=('start-ns',))
    for _, (prefix, uri) in events:
        # the default namespace does not apply to attributes
        if prefix:
            prefixes.setdefault(uri, prefix)
    return events.root, prefixes


def parse_xml(data):
    """
    Parse XML bmfont description into a FontDescriptor.

    data: str, or bytes in the encoding given by the XML declaration
    """
    try:
        root, prefixes = _parse_tree(data)
    except etree.ParseError as e:
        raise InvalidDocument(f'Invalid XML document: {e}') from e
    if _local_name(root.tag) != 'font':
        logging.warning(
            'Root element should be <font>, not <%s>.', _local_name(root.tag)
        )
    chars_elem = _find(root, 'chars')
    kernings_elem = _find(root, 'kernings')
    descriptor = FontDescriptor(
        info=_to_record(_find(root, 'info'), prefixes),
        common=_to_record(_find(root, 'common'), prefixes),
        pages=[_to_record(_elem, prefixes) for _elem in _find_all(root, 'page')],
        chars=[_to_record(_elem, prefixes) for _elem in _find_all(root, 'char')],
        kernings=[_to_record(_elem, prefixes) for _elem in _find_all(root, 'kerning')],
        chars_count=None if chars_elem is None else chars_elem.get('count'),
        kernings_count=(
            None if kernings_elem is None else kernings_elem.get('count')
        ),
        has_kernings_block=kernings_elem is not None,
    )
    logging.debug(
        'Found %d pages, %d chars, %d kernings.',
        len(descriptor.pages), len(descriptor.chars), len(descriptor.kernings)
    )
    return descriptor
