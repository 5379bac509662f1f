import pytest
from pydantic import ValidationError

from property_attributes.models import MetadataRecord


def test_default_record_is_not_loaded():
    record = MetadataRecord()

    assert record.loaded is False
    assert record.read_only is False
    assert record.category == ""
    assert record.display_name == ""
    assert record.hint == ""
    assert record.strip_prefix == ""


def test_record_is_frozen():
    record = MetadataRecord(loaded=True, category="Appearance")

    with pytest.raises(ValidationError):
        record.category = "Layout"


def test_record_equality_is_field_wise():
    assert MetadataRecord(loaded=True, hint="x") == MetadataRecord(loaded=True, hint="x")
    assert MetadataRecord(loaded=True) != MetadataRecord()


def test_label_for_prefers_display_name():
    record = MetadataRecord(loaded=True, display_name="Background Color")
    assert record.label_for("Color") == "Background Color"


def test_label_for_falls_back_to_raw_name():
    assert MetadataRecord(loaded=True).label_for("Color") == "Color"


def test_strip_value_name():
    """Test enum value names lose the declared prefix"""
    record = MetadataRecord(loaded=True, strip_prefix="cl")

    assert record.strip_value_name("clRed") == "Red"
    assert record.strip_value_name("Red") == "Red"
    assert record.strip_value_name("cl") == ""


def test_strip_value_name_without_prefix():
    assert MetadataRecord(loaded=True).strip_value_name("clRed") == "clRed"
