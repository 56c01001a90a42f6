"""Submission checks for a lease contract.

A contract is always editable; these rules are only consulted when the
contract is submitted. Each rule has a stable name so callers can match
on it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from lease_intake.models.lease.contract import ZERO, LeaseContract
from lease_intake.models.lease.enums import GuaranteeType, PartyRole, PersonKind
from lease_intake.rules.insurance import quote_for

LANDLORD_REQUIRED = "landlord_required"
TENANT_REQUIRED = "tenant_required"
GUARANTEE_TYPE_REQUIRED = "guarantee_type_required"
GUARANTOR_REQUIRED = "guarantor_required"
GUARANTEE_PAYLOAD_MISSING = "guarantee_payload_missing"
REPRESENTATIVE_REQUIRED = "representative_required"
RENT_REQUIRED = "rent_required"
RENT_DUE_DAY_REQUIRED = "rent_due_day_required"
INSURANCE_QUOTE_UNAVAILABLE = "insurance_quote_unavailable"


class Severity(str, Enum):
    ERROR = "ERROR"
    WARNING = "WARNING"


@dataclass(frozen=True)
class ValidationIssue:
    """A rule that the contract does not satisfy."""

    rule: str
    severity: Severity
    message: str
    role: PartyRole | None = None
    party_id: str | None = None


def _check_parties(contract: LeaseContract) -> list[ValidationIssue]:
    issues = []
    if not contract.landlords:
        issues.append(
            ValidationIssue(LANDLORD_REQUIRED, Severity.ERROR, "Informe ao menos um locador.")
        )
    if not contract.tenants:
        issues.append(
            ValidationIssue(TENANT_REQUIRED, Severity.ERROR, "Informe ao menos um locatário.")
        )

    for role in PartyRole:
        parties = contract.active_guarantors() if role == PartyRole.GUARANTOR else contract.parties(role)
        for person in parties:
            if person.kind == PersonKind.LEGAL and not person.representatives:
                issues.append(
                    ValidationIssue(
                        REPRESENTATIVE_REQUIRED,
                        Severity.ERROR,
                        "Pessoa jurídica sem representante legal.",
                        role=role,
                        party_id=person.id,
                    )
                )
    return issues


def _check_guarantee(contract: LeaseContract) -> list[ValidationIssue]:
    guarantee = contract.guarantee
    if guarantee.guarantee_type is None:
        return [
            ValidationIssue(
                GUARANTEE_TYPE_REQUIRED, Severity.ERROR, "Selecione o tipo de garantia."
            )
        ]

    if guarantee.guarantee_type == GuaranteeType.GUARANTOR and not contract.guarantors:
        return [
            ValidationIssue(
                GUARANTOR_REQUIRED,
                Severity.ERROR,
                "Garantia por fiador sem nenhum fiador cadastrado.",
                role=PartyRole.GUARANTOR,
            )
        ]

    missing = False
    if guarantee.guarantee_type == GuaranteeType.DEPOSIT:
        missing = guarantee.deposit_amount <= ZERO
    elif guarantee.guarantee_type == GuaranteeType.CAPITALIZATION_TITLE:
        missing = guarantee.capitalization_amount <= ZERO
    elif guarantee.guarantee_type == GuaranteeType.SURETY_INSURANCE:
        missing = not (guarantee.insurer_name and guarantee.policy_number)

    if missing:
        return [
            ValidationIssue(
                GUARANTEE_PAYLOAD_MISSING,
                Severity.WARNING,
                f"Dados da garantia '{guarantee.guarantee_type.value}' incompletos.",
            )
        ]
    return []


def _check_terms(contract: LeaseContract) -> list[ValidationIssue]:
    issues = []
    if contract.financials.rent <= ZERO:
        issues.append(
            ValidationIssue(RENT_REQUIRED, Severity.WARNING, "Valor do aluguel não informado.")
        )
    if contract.rent_due_day is None:
        issues.append(
            ValidationIssue(
                RENT_DUE_DAY_REQUIRED, Severity.WARNING, "Dia de vencimento não informado."
            )
        )

    selection = contract.insurance
    if (selection.property_type or selection.coverage is not None) and quote_for(contract) is None:
        issues.append(
            ValidationIssue(
                INSURANCE_QUOTE_UNAVAILABLE,
                Severity.WARNING,
                "Seguro incêndio sem cotação para a seleção atual.",
            )
        )
    return issues


def validate_contract(contract: LeaseContract) -> tuple[ValidationIssue, ...]:
    """Run every submission rule, in a fixed order."""
    return tuple(_check_parties(contract) + _check_guarantee(contract) + _check_terms(contract))


def is_submittable(contract: LeaseContract) -> bool:
    """True when no rule of severity ERROR fails."""
    return not any(issue.severity == Severity.ERROR for issue in validate_contract(contract))
