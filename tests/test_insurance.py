"""Tests for the fire-insurance rate table."""

from decimal import Decimal

import pytest

from lease_intake.models.lease import PropertyType
from lease_intake.rules.insurance import (
    INSURANCE_TABLE,
    coverage_tiers,
    quote_for,
    resolve_insurance,
)
from lease_intake.store import operations as ops


class TestInsuranceTable:
    """Tests for the rate table itself."""

    def test_every_property_type_has_tiers(self) -> None:
        assert set(INSURANCE_TABLE) == set(PropertyType)
        assert all(INSURANCE_TABLE[t] for t in PropertyType)

    def test_rows_keyed_by_coverage(self) -> None:
        for rows in INSURANCE_TABLE.values():
            for coverage, quote in rows.items():
                assert quote.coverage == coverage

    def test_coverage_tiers_sorted(self) -> None:
        tiers = coverage_tiers(PropertyType.APARTMENT)
        assert tiers == sorted(tiers)
        assert tiers[0] == Decimal("100000")

    def test_coverage_tiers_unknown_type(self) -> None:
        assert coverage_tiers(None) == []
        assert coverage_tiers("Galpão") == []


class TestResolveInsurance:
    """Tests for resolve_insurance."""

    def test_known_tier(self) -> None:
        quote = resolve_insurance("Apartamento", 100000)

        assert quote is not None
        assert quote.fire == Decimal("100000")
        assert quote.monthly_premium == Decimal("9.90")
        assert quote.annual_premium == Decimal("118.00")

    @pytest.mark.parametrize("coverage", [Decimal("100000"), "100000", "100000.00", 100000])
    def test_coverage_forms(self, coverage: Decimal | int | str) -> None:
        assert resolve_insurance(PropertyType.APARTMENT, coverage) is not None

    def test_tier_not_offered_is_no_quote(self) -> None:
        """A tier missing from the table is "no quote", not a zero quote."""
        assert Decimal("250000") not in INSURANCE_TABLE[PropertyType.APARTMENT]
        assert resolve_insurance("Apartamento", 250000) is None

    def test_tier_from_other_property_type(self) -> None:
        assert resolve_insurance(PropertyType.OFFICE, 250000) is not None
        assert resolve_insurance(PropertyType.MASONRY_HOUSE, 250000) is None

    @pytest.mark.parametrize(
        "property_type,coverage",
        [(None, 100000), ("Apartamento", None), ("", ""), ("Galpão", 100000), ("Apartamento", "abc")],
    )
    def test_missing_or_unknown_keys(self, property_type: str | None, coverage: object) -> None:
        assert resolve_insurance(property_type, coverage) is None  # type: ignore[arg-type]


class TestQuoteFor:
    """Tests for quote_for."""

    def test_uses_contract_selection(self) -> None:
        contract = ops.set_insurance_selection(
            ops.new_contract(), PropertyType.COMMERCE_SERVICES, 200000
        )

        quote = quote_for(contract)

        assert quote == INSURANCE_TABLE[PropertyType.COMMERCE_SERVICES][Decimal("200000")]

    def test_no_selection(self) -> None:
        assert quote_for(ops.new_contract()) is None
