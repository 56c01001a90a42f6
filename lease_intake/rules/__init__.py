"""Derivation rules: document checklists, insurance quotes and submission checks."""

from lease_intake.rules.documents import (
    GUARANTOR_SECTION_HEADER,
    SECTION_PREFIX,
    documents_for_person,
    format_checklist,
    is_section_header,
    property_documents,
    required_documents,
)
from lease_intake.rules.insurance import (
    INSURANCE_TABLE,
    coverage_tiers,
    quote_for,
    resolve_insurance,
)
from lease_intake.rules.validation import (
    Severity,
    ValidationIssue,
    is_submittable,
    validate_contract,
)

__all__ = [
    "GUARANTOR_SECTION_HEADER",
    "INSURANCE_TABLE",
    "SECTION_PREFIX",
    "Severity",
    "ValidationIssue",
    "coverage_tiers",
    "documents_for_person",
    "format_checklist",
    "is_section_header",
    "is_submittable",
    "property_documents",
    "quote_for",
    "required_documents",
    "resolve_insurance",
    "validate_contract",
]
