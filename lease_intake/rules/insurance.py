"""Fire-insurance rate table and quote lookup."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

from lease_intake.models.lease.contract import LeaseContract
from lease_intake.models.lease.enums import PropertyType
from lease_intake.models.lease.insurance import InsuranceQuote


def _row(
    coverage: str,
    fire: str,
    rent_loss: str,
    civil_liability: str,
    windstorm_or_impact: str,
    monthly_premium: str,
    annual_premium: str,
) -> tuple[Decimal, InsuranceQuote]:
    quote = InsuranceQuote(
        coverage=Decimal(coverage),
        fire=Decimal(fire),
        rent_loss=Decimal(rent_loss),
        civil_liability=Decimal(civil_liability),
        windstorm_or_impact=Decimal(windstorm_or_impact),
        monthly_premium=Decimal(monthly_premium),
        annual_premium=Decimal(annual_premium),
    )
    return quote.coverage, quote


# Insurer's published table; premiums are copied as published, annual
# premiums include the insurer's own rounding and fees.
INSURANCE_TABLE: dict[PropertyType, dict[Decimal, InsuranceQuote]] = {
    PropertyType.APARTMENT: dict(
        [
            _row("100000", "100000", "6000", "10000", "10000", "9.90", "118.00"),
            _row("150000", "150000", "9000", "15000", "15000", "13.90", "166.00"),
            _row("200000", "200000", "12000", "20000", "20000", "17.90", "214.00"),
            _row("300000", "300000", "18000", "30000", "30000", "25.50", "305.00"),
            _row("400000", "400000", "24000", "40000", "40000", "33.20", "397.00"),
            _row("500000", "500000", "30000", "50000", "50000", "40.90", "489.00"),
        ]
    ),
    PropertyType.MASONRY_HOUSE: dict(
        [
            _row("100000", "100000", "8000", "10000", "15000", "12.40", "148.00"),
            _row("150000", "150000", "12000", "15000", "20000", "17.60", "210.00"),
            _row("200000", "200000", "16000", "20000", "25000", "22.90", "274.00"),
            _row("300000", "300000", "24000", "30000", "35000", "33.10", "396.00"),
            _row("400000", "400000", "32000", "40000", "45000", "43.50", "521.00"),
        ]
    ),
    PropertyType.COMMERCE_SERVICES: dict(
        [
            _row("100000", "100000", "12000", "20000", "20000", "21.30", "255.00"),
            _row("200000", "200000", "24000", "40000", "40000", "39.80", "477.00"),
            _row("300000", "300000", "36000", "60000", "60000", "58.20", "698.00"),
            _row("500000", "500000", "60000", "100000", "100000", "94.70", "1136.00"),
        ]
    ),
    PropertyType.OFFICE: dict(
        [
            _row("100000", "100000", "10000", "15000", "15000", "16.80", "201.00"),
            _row("150000", "150000", "15000", "20000", "20000", "24.10", "289.00"),
            _row("250000", "250000", "25000", "30000", "30000", "38.60", "463.00"),
            _row("400000", "400000", "40000", "50000", "50000", "60.30", "723.00"),
        ]
    ),
}


def _property_type(value: PropertyType | str | None) -> PropertyType | None:
    if not value:
        return None
    try:
        return PropertyType(value)
    except ValueError:
        return None


def _coverage(value: Decimal | int | str | None) -> Decimal | None:
    if value is None or value == "":
        return None
    try:
        return Decimal(str(value))
    except InvalidOperation:
        return None


def coverage_tiers(property_type: PropertyType | str | None) -> list[Decimal]:
    """Coverage tiers offered for a property type, ascending."""
    selected = _property_type(property_type)
    if selected is None:
        return []
    return sorted(INSURANCE_TABLE[selected])


def resolve_insurance(
    property_type: PropertyType | str | None,
    coverage: Decimal | int | str | None,
) -> InsuranceQuote | None:
    """Look up the quote for a property type and coverage tier.

    Returns ``None`` when either key is unset or unknown, or when the tier
    is not offered for that property type (e.g. a selection left over from
    another property type). ``None`` means "no quote", never a zero quote.
    """
    selected_type = _property_type(property_type)
    selected_coverage = _coverage(coverage)
    if selected_type is None or selected_coverage is None:
        return None
    return INSURANCE_TABLE[selected_type].get(selected_coverage)


def quote_for(contract: LeaseContract) -> InsuranceQuote | None:
    """Resolve the insurance selection stored in a contract."""
    return resolve_insurance(contract.insurance.property_type, contract.insurance.coverage)
