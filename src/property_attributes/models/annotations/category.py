from dataclasses import dataclass
from typing import ClassVar

from .base import PropertyAnnotation
from ..annotation_kinds import AnnotationKind


@dataclass(frozen=True)
class Category(PropertyAnnotation):
    """Groups properties by category name in the inspector."""

    kind: ClassVar[AnnotationKind] = AnnotationKind.CATEGORY
    name: str
