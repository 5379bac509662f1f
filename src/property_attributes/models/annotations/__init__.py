from .base import PropertyAnnotation
from .read_only import ReadOnlyProp, READ_ONLY
from .category import Category
from .display_name import Name, DisplayName
from .hint import Hint
from .strip_prefix import StripPrefix

__all__ = [
    "PropertyAnnotation",
    "ReadOnlyProp",
    "READ_ONLY",
    "Category",
    "Name",
    "DisplayName",
    "Hint",
    "StripPrefix",
]
