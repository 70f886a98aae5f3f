"""Tests for the Jekyll/Zola front-matter models."""

from datetime import date

import pytest
from pydantic import ValidationError

from j2z.core.schema import JekyllFront, ZolaFront

BASE = {"title": "T", "date": "2023-05-01", "subtitle": "S", "author": "A"}


class TestJekyllFront:
    def test_named_fields_only(self):
        front = JekyllFront.model_validate(BASE)
        assert front.title == "T"
        assert front.date == "2023-05-01"
        assert front.extra is None

    def test_unknown_keys_collected(self):
        front = JekyllFront.model_validate({**BASE, "tags": ["a", "b"], "draft": True})
        assert front.extra == {"tags": ["a", "b"], "draft": True}

    def test_extra_value_shapes_preserved(self):
        extra = {
            "count": 3,
            "ratio": 0.5,
            "draft": False,
            "nested": {"inner": [1, "two", {"three": True}]},
        }
        front = JekyllFront.model_validate({**BASE, **extra})
        assert front.extra == extra
        assert type(front.extra["count"]) is int
        assert type(front.extra["draft"]) is bool
        assert type(front.extra["ratio"]) is float

    def test_literal_extra_key_nests(self):
        front = JekyllFront.model_validate({**BASE, "extra": {"comments": True}})
        assert front.extra == {"extra": {"comments": True}}

    def test_extra_order_preserved(self):
        front = JekyllFront.model_validate({**BASE, "z": 1, "a": 2, "m": 3})
        assert list(front.extra) == ["z", "a", "m"]

    @pytest.mark.parametrize("missing", ["title", "date", "subtitle", "author"])
    def test_required_field(self, missing):
        data = {k: v for k, v in BASE.items() if k != missing}
        with pytest.raises(ValidationError):
            JekyllFront.model_validate(data)

    def test_required_field_must_be_text(self):
        with pytest.raises(ValidationError):
            JekyllFront.model_validate({**BASE, "title": 1984})

    def test_non_string_nested_key_rejected(self):
        with pytest.raises(ValidationError):
            JekyllFront.model_validate({**BASE, "nested": {1: "one"}})


class TestZolaFront:
    def test_toml_dict_order(self):
        front = ZolaFront(
            title="T",
            date=date(2023, 5, 1),
            description="S",
            author="A",
            extra={"tags": ["x"], "draft": True},
        )
        assert list(front.to_toml_dict()) == ["title", "date", "description", "author", "tags", "draft"]

    def test_date_keeps_its_type(self):
        front = ZolaFront(title="T", date=date(2023, 5, 1), description="S", author="A")
        assert type(front.date) is date

    def test_named_field_wins_over_extra(self):
        front = ZolaFront(
            title="T",
            date=date(2023, 5, 1),
            description="from subtitle",
            author="A",
            extra={"description": "from extra"},
        )
        assert front.to_toml_dict()["description"] == "from subtitle"
