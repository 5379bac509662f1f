from pydantic import BaseModel, ConfigDict


class MetadataRecord(BaseModel):
    """Presentation metadata aggregated from the annotations of one property.

    ``loaded`` is only set by the extractor, so a record built by hand can be
    told apart from one that was actually computed.
    """

    loaded: bool = False
    read_only: bool = False
    category: str = ""
    display_name: str = ""
    hint: str = ""
    strip_prefix: str = ""

    model_config = ConfigDict(frozen=True)

    def label_for(self, raw_name: str) -> str:
        """Friendly name if one was declared, otherwise the raw identifier."""
        return self.display_name or raw_name

    def strip_value_name(self, value_name: str) -> str:
        """Remove the declared prefix from an enumeration value name.

        Value names that do not start with the prefix are returned as-is.
        """
        if self.strip_prefix and value_name.startswith(self.strip_prefix):
            return value_name[len(self.strip_prefix):]
        return value_name
