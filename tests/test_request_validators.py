"""
Unit tests for the order-id and sales-query request validators.
"""

import pytest
from pydantic import field_validator

from pos_api.common.errors import FieldIssue, InternalError, ValidationError
from pos_api.common.schemas import RequestModel
from pos_api.common.validation import validate
from pos_api.orders.schemas import OrderIdRequest
from pos_api.sales.schemas import SaleSource, SalesPeriod, SalesQueryRequest


class TestOrderIdValidator:
    """Test validation of the order id path parameter."""

    @pytest.mark.parametrize("raw, expected", [("1", 1), ("42", 42), ("1000000", 1000000)])
    def test_positive_integer_strings_are_coerced(self, raw, expected):
        """Test that positive integer strings become integers of the same value."""
        request = validate(OrderIdRequest, params={"id": raw})
        assert request.params.id == expected
        assert isinstance(request.params.id, int)

    @pytest.mark.parametrize("raw", ["0", "-5", "abc", "", "1.5"])
    def test_invalid_ids_are_rejected(self, raw):
        """Test that zero, negatives, non-numbers, empty and fractional values fail."""
        with pytest.raises(ValidationError) as exc_info:
            validate(OrderIdRequest, params={"id": raw})
        assert exc_info.value.paths == ["params.id"]
        assert exc_info.value.issues[0].message

    def test_missing_id_is_rejected(self):
        """Test that a missing id is reported against params.id."""
        with pytest.raises(ValidationError) as exc_info:
            validate(OrderIdRequest, params={})
        assert exc_info.value.paths == ["params.id"]
        assert "required" in exc_info.value.issues[0].message.lower()

    def test_zero_reports_range_message(self):
        """Test that the message for zero explains the lower bound."""
        with pytest.raises(ValidationError) as exc_info:
            validate(OrderIdRequest, params={"id": "0"})
        assert "greater than 0" in exc_info.value.issues[0].message

    def test_revalidating_normalized_output(self):
        """Test that feeding the normalized output back in yields the same result."""
        first = validate(OrderIdRequest, params={"id": "7"})
        second = validate(OrderIdRequest, params=first.params.model_dump())
        assert second == first

    def test_unrelated_fragments_are_ignored(self):
        """Test that query and body content do not affect path validation."""
        request = validate(OrderIdRequest, params={"id": "3"}, query={"x": "y"}, body={"z": 1})
        assert request.params.id == 3


class TestSalesQueryValidator:
    """Test validation of the sales report query string."""

    @pytest.mark.parametrize("period", ["day", "week", "month"])
    def test_accepts_known_periods(self, period):
        """Test that each supported period is accepted."""
        request = validate(SalesQueryRequest, query={"type": period})
        assert request.query.type == SalesPeriod(period)
        assert request.query.type == period

    @pytest.mark.parametrize("period", ["year", "DAY", "", "custom"])
    def test_rejects_unknown_periods(self, period):
        """Test that any other period value fails on query.type."""
        with pytest.raises(ValidationError) as exc_info:
            validate(SalesQueryRequest, query={"type": period})
        assert exc_info.value.paths == ["query.type"]

    def test_missing_type_is_rejected(self):
        """Test that type is required."""
        with pytest.raises(ValidationError) as exc_info:
            validate(SalesQueryRequest, query={"date": "2025-01-01"})
        assert exc_info.value.paths == ["query.type"]

    def test_optional_fields_stay_absent(self):
        """Test that absent date and source are not filled with placeholders."""
        request = validate(SalesQueryRequest, query={"type": "day"})
        assert request.query.model_dump(mode="json", exclude_unset=True) == {"type": "day"}
        assert "date" not in request.query.model_fields_set
        assert "source" not in request.query.model_fields_set

    def test_date_is_passed_through_unmodified(self):
        """Test that date is not parsed or reformatted at this layer."""
        request = validate(SalesQueryRequest, query={"type": "week", "date": "next tuesday"})
        assert request.query.date == "next tuesday"

    def test_empty_date_is_kept_as_supplied(self):
        """Test that an empty date is distinguishable from a missing one."""
        request = validate(SalesQueryRequest, query={"type": "week", "date": ""})
        assert request.query.date == ""
        assert "date" in request.query.model_fields_set

    @pytest.mark.parametrize("source", ["ORDER", "MANUAL"])
    def test_accepts_known_sources(self, source):
        """Test that both sale sources are accepted."""
        request = validate(SalesQueryRequest, query={"type": "month", "source": source})
        assert request.query.source == SaleSource(source)

    def test_rejects_unknown_source(self):
        """Test that an unknown source fails on query.source."""
        with pytest.raises(ValidationError) as exc_info:
            validate(SalesQueryRequest, query={"type": "month", "source": "OTHER"})
        assert exc_info.value.paths == ["query.source"]

    def test_reports_every_violation(self):
        """Test that an invalid type and an invalid source are reported together."""
        with pytest.raises(ValidationError) as exc_info:
            validate(SalesQueryRequest, query={"type": "year", "source": "OTHER"})
        assert sorted(exc_info.value.paths) == ["query.source", "query.type"]

    def test_missing_query_reports_type(self):
        """Test that validating with no query string at all reports the required type."""
        with pytest.raises(ValidationError) as exc_info:
            validate(SalesQueryRequest)
        assert exc_info.value.paths == ["query.type"]

    def test_revalidating_normalized_output(self):
        """Test that the normalized output validates to itself."""
        first = validate(SalesQueryRequest, query={"type": "day", "source": "ORDER"})
        second = validate(SalesQueryRequest, query=first.query.model_dump(exclude_unset=True))
        assert second == first
        assert second.query.model_dump(mode="json", exclude_unset=True) == {"type": "day", "source": "ORDER"}


class TestValidationErrorShape:
    """Test the structured error reported by validators."""

    def test_to_list_lists_path_and_message(self):
        """Test that issues serialize as path/message pairs."""
        with pytest.raises(ValidationError) as exc_info:
            validate(SalesQueryRequest, query={"type": "year", "source": "OTHER"})
        entries = exc_info.value.to_list()
        assert len(entries) == 2
        for entry in entries:
            assert set(entry) == {"path", "message"}
            assert entry["message"]

    def test_empty_issue_list_is_not_allowed(self):
        """Test that a ValidationError must carry at least one issue."""
        with pytest.raises(ValueError):
            ValidationError([])

    def test_string_form_mentions_each_path(self):
        """Test the human-readable form of the error."""
        error = ValidationError([FieldIssue("params.id", "bad"), FieldIssue("query.type", "worse")])
        assert str(error) == "params.id: bad; query.type: worse"


class TestInternalErrors:
    """Test that faults unrelated to the input are not reported as validation errors."""

    def test_unexpected_exception_becomes_internal_error(self):
        """Test that a crash inside a validator surfaces as InternalError."""

        class ExplodingQuery(RequestModel):
            value: str

            @field_validator("value")
            @classmethod
            def explode(cls, value):
                raise RuntimeError("boom")

        class ExplodingRequest(RequestModel):
            query: ExplodingQuery

        with pytest.raises(InternalError):
            validate(ExplodingRequest, query={"value": "x"})

    def test_non_mapping_fragment_becomes_internal_error(self):
        """Test that a caller passing a non-mapping fragment gets InternalError, not a raw TypeError."""
        with pytest.raises(InternalError):
            validate(OrderIdRequest, params=42)
