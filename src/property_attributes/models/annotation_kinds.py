from enum import Enum


class AnnotationKind(str, Enum):
    READ_ONLY = "read_only"
    CATEGORY = "category"
    DISPLAY_NAME = "display_name"
    HINT = "hint"
    STRIP_PREFIX = "strip_prefix"
