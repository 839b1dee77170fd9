"""
Tests for query filters.
"""

import pytest
from pydantic import ValidationError

from stormpath_client.client.filters import CriteriaFilter, DefaultFilter, Filter


class TestDefaultFilter:
    """Tests for the no-op filter."""

    def test_renders_nothing(self):
        assert DefaultFilter().to_query_params() == {}

    def test_satisfies_filter_protocol(self):
        assert isinstance(DefaultFilter(), Filter)

    def test_equality(self):
        assert DefaultFilter() == DefaultFilter()


class TestCriteriaFilter:
    """Tests for CriteriaFilter."""

    def test_empty_filter_renders_nothing(self):
        assert CriteriaFilter().to_query_params() == {}

    def test_satisfies_filter_protocol(self):
        assert isinstance(CriteriaFilter(), Filter)

    def test_single_field(self, email_filter):
        assert email_filter.to_query_params() == {"email": ["jean@example.com"]}

    def test_aliases_used_as_parameter_names(self):
        """Fields render under their wire names."""
        f = CriteriaFilter(given_name="Jean", order_by="surname asc")
        assert f.to_query_params() == {"givenName": ["Jean"], "orderBy": ["surname asc"]}

    def test_populate_by_alias(self):
        f = CriteriaFilter(givenName="Jean")
        assert f.given_name == "Jean"

    def test_several_fields(self):
        f = CriteriaFilter(q="jean", status="ENABLED", expand="customData")
        assert f.to_query_params() == {
            "q": ["jean"],
            "status": ["ENABLED"],
            "expand": ["customData"],
        }

    def test_deterministic(self):
        f = CriteriaFilter(username="jdoe", surname="Doe")
        assert f.to_query_params() == f.to_query_params()

    def test_frozen(self):
        f = CriteriaFilter(username="jdoe")
        with pytest.raises(ValidationError):
            f.username = "other"
