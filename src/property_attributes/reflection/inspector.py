import logging
from typing import Annotated, Any, ClassVar, get_origin, get_type_hints

from pydantic import BaseModel

from .sidecar import sidecar_annotations
from ..models.property_handle import PropertyHandle

logger = logging.getLogger(__name__)

# BaseModel ships its own properties (model_extra, ...) that are not model properties
_FRAMEWORK_BASES = frozenset(BaseModel.__mro__)


def _annotated_metadata(hint: Any) -> tuple[Any, ...]:
    if get_origin(hint) is Annotated:
        return tuple(hint.__metadata__)
    return ()


def _owner_name(model: Any) -> str:
    cls = model if isinstance(model, type) else type(model)
    return f"{cls.__module__}.{cls.__qualname__}"


def _declared_properties(cls: type) -> dict[str, property]:
    props: dict[str, property] = {}
    for klass in reversed(cls.__mro__):
        if klass in _FRAMEWORK_BASES:
            continue
        for name, attr in vars(klass).items():
            if isinstance(attr, property):
                props[name] = attr
    return props


def get_properties(model: Any) -> list[PropertyHandle]:
    """Enumerate the properties of a class (or instance) with their annotations.

    Order: declared fields (pydantic ``model_fields`` or type hints of
    dataclasses and plain classes), then ``property`` getters, then names that
    only appear in the ``annotate`` sidecar. Within one property, inline
    ``Annotated[...]`` metadata comes before sidecar annotations.
    """
    cls = model if isinstance(model, type) else type(model)
    owner = _owner_name(model)
    found: dict[str, list[Any]] = {}

    if issubclass(cls, BaseModel):
        for name, field in cls.model_fields.items():
            found[name] = list(field.metadata)
    else:
        for name, hint in get_type_hints(cls, include_extras=True).items():
            if get_origin(hint) is ClassVar:
                continue
            found[name] = list(_annotated_metadata(hint))

    for name, prop in _declared_properties(cls).items():
        if prop.fget is None:
            continue
        return_hint = get_type_hints(prop.fget, include_extras=True).get("return")
        found.setdefault(name, []).extend(_annotated_metadata(return_hint))

    for name, annotations in sidecar_annotations(cls).items():
        found.setdefault(name, []).extend(annotations)

    logger.debug(f"Reflected {len(found)} properties on {owner}")
    return [
        PropertyHandle(owner=owner, name=name, annotations=tuple(annotations))
        for name, annotations in found.items()
    ]


def get_property(model: Any, name: str) -> PropertyHandle:
    for handle in get_properties(model):
        if handle.name == name:
            return handle

    raise KeyError(f"Property {name} not found on {_owner_name(model)}")
