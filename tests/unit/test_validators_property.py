"""Property-based tests for the validation contracts using hypothesis."""

from datetime import UTC, date, datetime, timedelta, timezone
from decimal import Decimal

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from src.accounting.core.validators import coerce_utc_date
from src.accounting.schemas.investment import (
    MAX_PAGE_SIZE,
    validate_investment_create,
    validate_investment_filters,
    validate_investment_update,
)

pytestmark = pytest.mark.unit

positive_amounts = st.decimals(
    min_value=Decimal("0.01"), max_value=Decimal("1000000000"), places=2, allow_nan=False
)
non_positive_amounts = st.decimals(
    max_value=Decimal("0"), min_value=Decimal("-1000000000"), places=2, allow_nan=False
)
dates = st.dates(min_value=date(1970, 1, 2), max_value=date(2999, 12, 30))

# Arbitrary JSON-ish values, the shape of anything a client can send
json_values = st.recursive(
    st.none() | st.booleans() | st.integers() | st.floats() | st.text(max_size=20),
    lambda children: st.lists(children, max_size=3)
    | st.dictionaries(st.text(max_size=10), children, max_size=3),
    max_leaves=10,
)


@given(amount=positive_amounts, day=dates)
@settings(max_examples=100)
def test_positive_amounts_accepted(amount: Decimal, day: date):
    """Any positive two-place amount with a valid date passes."""
    result = validate_investment_create(
        {"projectId": "p1", "date": day.isoformat(), "amount": str(amount)}
    )
    assert result.ok
    assert result.value.amount == amount
    assert result.value.date == day


@given(amount=non_positive_amounts)
def test_non_positive_amounts_rejected(amount: Decimal):
    """Zero and negative amounts are reported on amount, for create and update alike."""
    created = validate_investment_create(
        {"projectId": "p1", "date": "2024-01-01", "amount": str(amount)}
    )
    updated = validate_investment_update({"amount": str(amount)})

    assert created.errors_for("amount") == ["Amount must be positive"]
    assert updated.errors_for("amount") == ["Amount must be positive"]


@given(payload=json_values)
def test_contracts_never_raise(payload):
    """Every contract answers with a result for any input value."""
    for validate in (
        validate_investment_create,
        validate_investment_update,
        validate_investment_filters,
    ):
        result = validate(payload)
        assert result.ok != bool(result.errors)


@given(page_size=st.integers(min_value=MAX_PAGE_SIZE + 1, max_value=10**6))
def test_oversized_pages_rejected(page_size: int):
    result = validate_investment_filters({"pageSize": page_size})
    assert len(result.errors_for("pageSize")) == 1


@given(page=st.integers(min_value=1, max_value=10**6))
def test_numeric_page_strings_coerced(page: int):
    result = validate_investment_filters({"page": str(page)})
    assert result.value.page == page


@given(
    moment=st.datetimes(
        min_value=datetime(1971, 1, 1),
        max_value=datetime(2999, 1, 1),
        timezones=st.sampled_from(
            [UTC, timezone(timedelta(hours=-11)), timezone(timedelta(hours=14))]
        ),
    )
)
def test_aware_datetimes_reduce_to_utc_calendar_date(moment: datetime):
    """Every accepted representation of one instant lands on the same UTC date."""
    expected = moment.astimezone(UTC).date()

    assert coerce_utc_date(moment) == expected
    assert coerce_utc_date(moment.isoformat()) == expected
    epoch_ms = (moment - datetime(1970, 1, 1, tzinfo=UTC)) // timedelta(milliseconds=1)
    assert coerce_utc_date(epoch_ms) == expected
