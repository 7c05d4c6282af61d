import pytest
from pydantic import ValidationError
from feedpoll.schemas import ColumnSummary, Summary

class TestSchemaValidation:
    """Unit tests for Pydantic summary models"""

    def test_numeric_column_summary(self):
        col = ColumnSummary(name="mag", kind="numeric", count=3, min=0.5, q1=0.75, median=1.0,
                            mean=1.1, q3=1.4, max=1.8)
        assert col.missing == 0
        assert col.unique is None
        assert col.top is None

    def test_categorical_optional_fields(self):
        col = ColumnSummary(name="type", kind="categorical", count=2, unique=1, top="earthquake", top_count=2)
        assert col.min is None
        assert col.median is None

    def test_invalid_kind(self):
        with pytest.raises(ValidationError):
            ColumnSummary(name="x", kind="boolean", count=1)

    def test_missing_count(self):
        with pytest.raises(ValidationError):
            ColumnSummary(name="x", kind="empty")

    def test_column_lookup(self):
        summary = Summary(row_count=1, column_count=2, columns=[
            ColumnSummary(name="a", kind="numeric", count=1, min=1, q1=1, median=1, mean=1, q3=1, max=1),
            ColumnSummary(name="b", kind="empty", count=0, missing=1),
        ])
        assert summary.column_names == ["a", "b"]
        assert summary.column("b").kind == "empty"
        with pytest.raises(KeyError):
            summary.column("c")

    def test_model_dump_round_trip(self):
        summary = Summary(row_count=0, column_count=0, columns=[])
        assert Summary(**summary.model_dump()) == summary
