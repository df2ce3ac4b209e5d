"""
bmfconv.base - serialiser registry

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

from .constants import DEFAULT_VARIANT
from .magic import VariantRegistry

transcoders = VariantRegistry(DEFAULT_VARIANT)
