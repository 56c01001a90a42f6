"""Lease contract aggregate and its term records."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any

from lease_intake.exceptions import InvariantViolationError
from lease_intake.models.base import Address
from lease_intake.models.lease.enums import (
    ExpenseStatus,
    GuaranteeType,
    PartyRole,
    PropertyType,
    ReadjustmentIndex,
)
from lease_intake.models.lease.person import Person

ZERO = Decimal("0")


def _coerce_enum(record: Any, name: str, enum_type: type[Enum], optional: bool = False) -> None:
    """Store a label given for an enum field as its member.

    A blank label clears an optional field; unknown labels raise ``ValueError``.
    """
    value = getattr(record, name)
    if isinstance(value, enum_type) or (optional and value is None):
        return
    object.__setattr__(record, name, None if optional and value == "" else enum_type(value))


def _coerce_money(record: Any, name: str, optional: bool = False) -> None:
    """Store an amount given as int, float or string as a ``Decimal``."""
    value = getattr(record, name)
    if isinstance(value, Decimal) or (optional and value is None):
        return
    if optional and value == "":
        object.__setattr__(record, name, None)
        return
    try:
        amount = Decimal(str(value))
    except InvalidOperation as e:
        raise InvariantViolationError(f"{name} is not a valid amount: {value!r}") from e
    if not amount.is_finite():
        raise InvariantViolationError(f"{name} is not a valid amount: {value!r}")
    object.__setattr__(record, name, amount)


@dataclass(frozen=True)
class GuaranteeTerms:
    """Selected guarantee mechanism and the payload of every mechanism.

    All payload fields are kept when the type changes; only the ones that
    belong to ``guarantee_type`` are read.
    """

    guarantee_type: GuaranteeType | None = None
    deposit_amount: Decimal = ZERO  # Caução
    insurer_name: str = ""  # Seguro Fiança
    policy_number: str = ""
    capitalization_amount: Decimal = ZERO  # Título de Capitalização

    def __post_init__(self) -> None:
        _coerce_enum(self, "guarantee_type", GuaranteeType, optional=True)
        _coerce_money(self, "deposit_amount")
        _coerce_money(self, "capitalization_amount")

    def active_payload(self) -> dict[str, Any]:
        """Return only the payload fields relevant to the selected type."""
        if self.guarantee_type == GuaranteeType.DEPOSIT:
            return {"deposit_amount": self.deposit_amount}
        if self.guarantee_type == GuaranteeType.SURETY_INSURANCE:
            return {"insurer_name": self.insurer_name, "policy_number": self.policy_number}
        if self.guarantee_type == GuaranteeType.CAPITALIZATION_TITLE:
            return {"capitalization_amount": self.capitalization_amount}
        return {}


@dataclass(frozen=True)
class Brokerage:
    """Brokerage, partnership and administration terms."""

    realtor_name: str = ""
    captor_name: str = ""
    internal_partnership: bool = False
    internal_partner_name: str = ""
    external_partnership: bool = False
    external_partner_name: str = ""
    admin_fee: Decimal = Decimal("5")  # percent of rent
    no_admin: bool = False
    declares_income_tax: bool = False

    def __post_init__(self) -> None:
        _coerce_money(self, "admin_fee")


@dataclass(frozen=True)
class FinancialTerms:
    """Monthly amounts owed by the tenant (BRL)."""

    rent: Decimal = ZERO
    condo_fee: Decimal = ZERO
    property_tax: Decimal = ZERO  # IPTU

    def __post_init__(self) -> None:
        for name in ("rent", "condo_fee", "property_tax"):
            _coerce_money(self, name)
            if getattr(self, name) < 0:
                raise InvariantViolationError(f"{name} must be non-negative")

    @property
    def monthly_total(self) -> Decimal:
        """Rent plus condo fee plus property tax."""
        return self.rent + self.condo_fee + self.property_tax


@dataclass(frozen=True)
class ExpenseSharing:
    """How each utility or fee is handled between the parties."""

    water: ExpenseStatus = ExpenseStatus.BILLED_SEPARATELY
    electricity: ExpenseStatus = ExpenseStatus.BILLED_SEPARATELY
    gas: ExpenseStatus = ExpenseStatus.BILLED_SEPARATELY
    property_tax: ExpenseStatus = ExpenseStatus.BILLED_SEPARATELY
    condo: ExpenseStatus = ExpenseStatus.BILLED_SEPARATELY
    cleaning: ExpenseStatus = ExpenseStatus.NOT_APPLICABLE
    other: ExpenseStatus = ExpenseStatus.NOT_APPLICABLE
    other_description: str = ""

    def __post_init__(self) -> None:
        for name in ("water", "electricity", "gas", "property_tax", "condo", "cleaning", "other"):
            _coerce_enum(self, name, ExpenseStatus)


@dataclass(frozen=True)
class InsuranceSelection:
    """Fire-insurance selection driving the rate-table lookup."""

    property_type: PropertyType | None = None
    coverage: Decimal | None = None

    def __post_init__(self) -> None:
        _coerce_enum(self, "property_type", PropertyType, optional=True)
        _coerce_money(self, "coverage", optional=True)


@dataclass(frozen=True)
class LeaseContract:
    """Complete state of a lease being drafted.

    Party lists are ordered by insertion. ``guarantors`` is only read when
    the guarantee type is ``GuaranteeType.GUARANTOR`` but is never cleared
    when the type changes.
    """

    landlords: tuple[Person, ...] = ()
    tenants: tuple[Person, ...] = ()
    guarantors: tuple[Person, ...] = ()
    guarantee: GuaranteeTerms = field(default_factory=GuaranteeTerms)
    brokerage: Brokerage = field(default_factory=Brokerage)
    property_address: Address = field(default_factory=Address)
    financials: FinancialTerms = field(default_factory=FinancialTerms)
    start_date: date | None = None
    rent_due_day: int | None = None
    readjustment_index: ReadjustmentIndex | None = None
    expenses: ExpenseSharing = field(default_factory=ExpenseSharing)
    insurance: InsuranceSelection = field(default_factory=InsuranceSelection)
    observations: str = ""
    property_files: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        _coerce_enum(self, "readjustment_index", ReadjustmentIndex, optional=True)
        if self.rent_due_day is not None and not 1 <= self.rent_due_day <= 31:
            raise InvariantViolationError(
                f"rent_due_day must be between 1 and 31, got {self.rent_due_day}"
            )

    @property
    def guarantee_type(self) -> GuaranteeType | None:
        return self.guarantee.guarantee_type

    def parties(self, role: PartyRole) -> tuple[Person, ...]:
        """Get the stored parties of a role, active or not."""
        return getattr(self, role.collection)

    def active_guarantors(self) -> tuple[Person, ...]:
        """Guarantors that take part in the contract under the current guarantee."""
        if self.guarantee.guarantee_type == GuaranteeType.GUARANTOR:
            return self.guarantors
        return ()
