from dataclasses import dataclass
from typing import ClassVar

from .base import PropertyAnnotation
from ..annotation_kinds import AnnotationKind


@dataclass(frozen=True)
class Name(PropertyAnnotation):
    """Friendly label shown instead of the raw property identifier."""

    kind: ClassVar[AnnotationKind] = AnnotationKind.DISPLAY_NAME
    name: str


DisplayName = Name
