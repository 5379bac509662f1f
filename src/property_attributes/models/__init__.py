from .annotation_kinds import AnnotationKind
from .annotations import (
    PropertyAnnotation,
    ReadOnlyProp,
    READ_ONLY,
    Category,
    Name,
    DisplayName,
    Hint,
    StripPrefix,
)
from .metadata_record import MetadataRecord
from .property_handle import AnnotatedProperty, PropertyHandle

__all__ = [
    "AnnotationKind",
    "PropertyAnnotation",
    "ReadOnlyProp",
    "READ_ONLY",
    "Category",
    "Name",
    "DisplayName",
    "Hint",
    "StripPrefix",
    "MetadataRecord",
    "AnnotatedProperty",
    "PropertyHandle",
]
