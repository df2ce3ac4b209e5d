"""
bmfconv.magic - error types, descriptor recognition and variant registry

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import logging


class FileFormatError(Exception):
    """Incorrect file format."""


class InvalidDocument(FileFormatError):
    """Descriptor could not be parsed as XML."""


# number of characters to check when sniffing a descriptor
_SAMPLE_SIZE = 256


def looks_like_xml(data):
    """Check if a str or bytes sample looks like an XML descriptor."""
    sample = data[:_SAMPLE_SIZE]
    if isinstance(sample, bytes):
        # drop utf-8 byte order mark
        sample = sample.removeprefix(b'\xef\xbb\xbf')
        return sample.lstrip().startswith(b'<')
    return sample.lstrip('\ufeff').lstrip().startswith('<')


class VariantRegistry:
    """Retrieve descriptor serialisers by name."""

    def __init__(self, default=''):
        """Set up registry."""
        self._names = {}
        self._default = default

    def get_formats(self):
        """Get tuple of all registered variant names."""
        return tuple(self._names.keys())

    def get_for(self, format=''):
        """Get serialiser function for this variant."""
        format = format or self._default
        try:
            return self._names[format]
        except KeyError:
            raise FileFormatError(
                f'Variant `{format}` not recognised; '
                'use one of ' + ', '.join(f'`{_n}`' for _n in self._names)
            ) from None

    def register(self, name='', template='{name}.fnt', description=''):
        """
        Decorator to register serialiser for output variant.

        name: unique name of the variant
        template: template to generate output filenames
        description: one-line description for help texts
        """

        def _decorator(converter):
            converter.format = name
            converter.template = template
            converter.description = description or (
                converter.__doc__ or ''
            ).strip().partition('\n')[0]
            if not converter.format:
                raise ValueError('No registration name given')
            if converter.format in self._names:
                raise ValueError(
                    f'Registration name `{converter.format}` '
                    f'already in use for {self._names[converter.format]}'
                )
            logging.debug('Registered variant `%s`.', name)
            self._names[converter.format] = converter
            return converter

        return _decorator

    def __iter__(self):
        """Iterate over registered serialisers."""
        return iter(self._names.values())
