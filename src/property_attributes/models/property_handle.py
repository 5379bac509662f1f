from typing import Any, Protocol

from pydantic import BaseModel, ConfigDict


class AnnotatedProperty(Protocol):
    """Anything that can list the annotations attached to one property."""

    def get_annotations(self) -> tuple[Any, ...]:
        """Return attached annotations in attachment order."""
        ...


class PropertyHandle(BaseModel):
    owner: str
    name: str
    annotations: tuple[Any, ...] = ()

    model_config = ConfigDict(frozen=True)

    def get_annotations(self) -> tuple[Any, ...]:
        return self.annotations
