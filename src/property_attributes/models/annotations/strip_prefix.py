from dataclasses import dataclass
from typing import ClassVar

from .base import PropertyAnnotation
from ..annotation_kinds import AnnotationKind


@dataclass(frozen=True)
class StripPrefix(PropertyAnnotation):
    """Prefix removed from enumeration value names before display."""

    kind: ClassVar[AnnotationKind] = AnnotationKind.STRIP_PREFIX
    prefix: str
