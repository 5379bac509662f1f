from dataclasses import dataclass
from typing import ClassVar

from ..annotation_kinds import AnnotationKind


@dataclass(frozen=True)
class PropertyAnnotation:
    """Declarative marker attached to a property declaration.

    Subclasses carry at most one string payload and are never mutated.
    """

    kind: ClassVar[AnnotationKind]
