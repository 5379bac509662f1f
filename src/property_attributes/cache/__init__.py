from .metadata_cache import MetadataCache

__all__ = ["MetadataCache"]
