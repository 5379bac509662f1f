from collections.abc import Iterable
from typing import Any, Callable, TypeVar

from ..models.annotations import PropertyAnnotation

SIDECAR_ATTRIBUTE = "__property_annotations__"

T = TypeVar("T", bound=type)


def annotate(**annotations_by_property: PropertyAnnotation | Iterable[Any]) -> Callable[[T], T]:
    """Attach annotations to properties without touching their declarations.

    Useful for classes you do not own, or when inline ``Annotated[...]``
    would clutter the model. Each keyword is a property name mapped to one
    annotation or a sequence of them. A bare string counts as one
    (non-catalog) annotation, not as a sequence of characters. Entries
    accumulate across repeated decoration and are inherited by subclasses.

    Example:
        @annotate(color=[Category("Appearance"), Name("Background Color")])
        class Panel: ...
    """

    def decorator(cls: T) -> T:
        merged: dict[str, list[Any]] = {
            name: list(annotations)
            for name, annotations in getattr(cls, SIDECAR_ATTRIBUTE, {}).items()
        }
        for name, annotations in annotations_by_property.items():
            if isinstance(annotations, (PropertyAnnotation, str)):
                annotations = [annotations]
            merged.setdefault(name, []).extend(annotations)

        setattr(cls, SIDECAR_ATTRIBUTE, {name: tuple(annotations) for name, annotations in merged.items()})
        return cls

    return decorator


def sidecar_annotations(cls: type) -> dict[str, tuple[Any, ...]]:
    return dict(getattr(cls, SIDECAR_ATTRIBUTE, {}))
