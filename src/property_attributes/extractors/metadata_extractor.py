import logging
from typing import Any

from ..config.settings import settings
from ..errors import ContractViolation
from ..models.annotation_kinds import AnnotationKind
from ..models.annotations import PropertyAnnotation
from ..models.metadata_record import MetadataRecord
from ..models.property_handle import AnnotatedProperty
from ..reflection import get_properties

logger = logging.getLogger(__name__)


def extract_metadata(prop: AnnotatedProperty | None) -> MetadataRecord:
    """Fold the annotations attached to one property into a MetadataRecord.

    Annotations are applied in attachment order and each one overwrites its
    field, so when a kind is attached twice the last occurrence wins.
    Objects that are not catalog annotations are skipped.

    Raises:
        ContractViolation: prop is None
    """
    if prop is None:
        raise ContractViolation("Attempted to get property attributes of a None property")

    fields: dict[str, Any] = {"loaded": True}

    for annotation in prop.get_annotations():
        if not isinstance(annotation, PropertyAnnotation):
            continue

        kind = annotation.kind

        if kind == AnnotationKind.READ_ONLY:
            fields["read_only"] = True

        elif kind == AnnotationKind.CATEGORY:
            fields["category"] = annotation.name

        elif kind == AnnotationKind.HINT:
            fields["hint"] = annotation.hint_text

        elif kind == AnnotationKind.DISPLAY_NAME:
            fields["display_name"] = annotation.name

        elif kind == AnnotationKind.STRIP_PREFIX:
            fields["strip_prefix"] = annotation.prefix

    # payloads were stored verbatim by the annotations, do not re-validate them
    record = MetadataRecord.model_construct(**fields)

    if settings.log_extractions:
        logger.debug(f"Extracted attributes for {getattr(prop, 'name', prop)}: {record}")

    return record


def extract_model_metadata(model: Any) -> dict[str, MetadataRecord]:
    """Extract a MetadataRecord for every property of a class, in reflection order."""
    return {handle.name: extract_metadata(handle) for handle in get_properties(model)}
