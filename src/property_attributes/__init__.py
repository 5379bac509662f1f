from .errors import PropertyAnnotationsError, ContractViolation
from .models import (
    AnnotationKind,
    PropertyAnnotation,
    ReadOnlyProp,
    READ_ONLY,
    Category,
    Name,
    DisplayName,
    Hint,
    StripPrefix,
    MetadataRecord,
    AnnotatedProperty,
    PropertyHandle,
)
from .reflection import get_properties, get_property, annotate
from .extractors import extract_metadata, extract_model_metadata
from .cache import MetadataCache

__all__ = [
    "PropertyAnnotationsError",
    "ContractViolation",
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
    "get_properties",
    "get_property",
    "annotate",
    "extract_metadata",
    "extract_model_metadata",
    "MetadataCache",
]
