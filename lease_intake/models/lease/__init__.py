"""Lease domain models."""

from lease_intake.models.lease.contract import (
    Brokerage,
    ExpenseSharing,
    FinancialTerms,
    GuaranteeTerms,
    InsuranceSelection,
    LeaseContract,
)
from lease_intake.models.lease.enums import (
    CivilStatus,
    ExpenseStatus,
    GuaranteeType,
    PartyRole,
    PersonKind,
    PropertyType,
    ReadjustmentIndex,
)
from lease_intake.models.lease.insurance import InsuranceQuote
from lease_intake.models.lease.person import (
    BankDetails,
    GuaranteeProperty,
    Person,
    Representative,
    Spouse,
)

__all__ = [
    "BankDetails",
    "Brokerage",
    "CivilStatus",
    "ExpenseSharing",
    "ExpenseStatus",
    "FinancialTerms",
    "GuaranteeProperty",
    "GuaranteeTerms",
    "GuaranteeType",
    "InsuranceQuote",
    "InsuranceSelection",
    "LeaseContract",
    "PartyRole",
    "Person",
    "PersonKind",
    "PropertyType",
    "ReadjustmentIndex",
    "Representative",
    "Spouse",
]
