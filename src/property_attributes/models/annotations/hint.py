from dataclasses import dataclass
from typing import ClassVar

from .base import PropertyAnnotation
from ..annotation_kinds import AnnotationKind


# not a tooltip by itself, the consumer decides where to show it
@dataclass(frozen=True)
class Hint(PropertyAnnotation):
    kind: ClassVar[AnnotationKind] = AnnotationKind.HINT
    hint_text: str
