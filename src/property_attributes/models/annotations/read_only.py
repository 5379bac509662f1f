from dataclasses import dataclass
from typing import ClassVar

from .base import PropertyAnnotation
from ..annotation_kinds import AnnotationKind


# [ReadOnlyProp] (a setter may exist for serialization, the UI still must not edit)
@dataclass(frozen=True)
class ReadOnlyProp(PropertyAnnotation):
    kind: ClassVar[AnnotationKind] = AnnotationKind.READ_ONLY


READ_ONLY = ReadOnlyProp()
