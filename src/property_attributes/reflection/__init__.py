from .inspector import get_properties, get_property
from .sidecar import annotate, sidecar_annotations

__all__ = [
    "get_properties",
    "get_property",
    "annotate",
    "sidecar_annotations",
]
