from .metadata_extractor import extract_metadata, extract_model_metadata

__all__ = [
    "extract_metadata",
    "extract_model_metadata",
]
