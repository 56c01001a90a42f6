"""Fire-insurance quote model."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class InsuranceQuote:
    """Row of the fire-insurance rate table.

    ``annual_premium`` comes from the insurer's table and is not required to
    equal ``monthly_premium * 12``.
    """

    coverage: Decimal
    fire: Decimal
    rent_loss: Decimal
    civil_liability: Decimal
    windstorm_or_impact: Decimal
    monthly_premium: Decimal
    annual_premium: Decimal
