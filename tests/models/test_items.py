"""Tests for the ItemQuery model."""
import pytest
from pydantic import ValidationError

from delimited_query.models.items import ImageType, ItemFields, ItemQuery


def test_item_query_defaults():
    """Test creating an ItemQuery with no fields set."""
    query = ItemQuery()
    assert query.ids == []
    assert query.fields == []
    assert query.years == []
    assert query.image_types == []
    assert query.limit == 20


def test_item_query_json_dump_uses_enum_values():
    """Enum members are dumped as their display values."""
    query = ItemQuery(fields=[ItemFields.STUDIOS], image_types=[ImageType.BANNER], years=[1984])

    d = query.model_dump(mode="json")
    assert d == {
        "ids": [],
        "fields": ["Studios"],
        "years": [1984],
        "image_types": ["Banner"],
        "limit": 20,
    }


def test_item_query_limit_bounds():
    """Test that an out-of-range limit raises ValidationError."""
    with pytest.raises(ValidationError):
        ItemQuery(limit=101)
