"""Serialization of the contract state for export and narrative generation."""

from dataclasses import asdict, fields, is_dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any

from lease_intake.models.lease.contract import LeaseContract
from lease_intake.models.lease.enums import PartyRole
from lease_intake.models.lease.insurance import InsuranceQuote
from lease_intake.models.lease.person import Person, Representative
from lease_intake.parties import (
    active_spouse,
    is_legal_entity,
    shows_bank_details,
    shows_guarantee_property,
    shows_secondary_files,
)


def to_dict(obj: Any) -> dict:
    """Convert object to dictionary."""
    if is_dataclass(obj):
        return dataclass_to_dict(obj)
    elif isinstance(obj, dict):
        return obj
    else:
        return {"value": str(obj)}


def dataclass_to_dict(obj: Any) -> dict:
    """Convert dataclass to dict with proper serialization."""
    result = {}
    for key, value in asdict(obj).items():
        result[key] = serialize_value(value)
    return result


def to_dict_fast(obj: Any) -> dict:
    """Convert a flat dataclass without the deep copy done by ``asdict``."""
    return {f.name: serialize_value(getattr(obj, f.name)) for f in fields(obj)}


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output."""
    if isinstance(value, Decimal):
        return str(value)
    elif isinstance(value, Enum):
        return value.value
    elif isinstance(value, datetime):
        return value.isoformat()
    elif isinstance(value, date):
        return value.isoformat()
    elif isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}
    elif isinstance(value, (list, tuple)):
        return [serialize_value(v) for v in value]
    return value


def representative_to_dict(rep: Representative) -> dict[str, Any]:
    """Representative with the spouse only when married."""
    spouse = active_spouse(rep)
    return {
        "id": rep.id,
        "name": rep.name,
        "tax_id": rep.tax_id,
        "registration_id": rep.registration_id,
        "profession": rep.profession,
        "civil_status": rep.civil_status,
        "address": to_dict_fast(rep.address),
        "is_married": rep.is_married,
        "spouse": to_dict_fast(spouse) if spouse is not None else None,
    }


def person_to_dict(person: Person, role: PartyRole | str) -> dict[str, Any]:
    """Effective view of a party.

    Only the active variant's fields are emitted, and role-specific records
    (bank details, collateral property) only for the role they belong to.
    """
    result: dict[str, Any] = {
        "id": person.id,
        "kind": person.kind.value,
        "name": person.name,
        "email": person.email,
        "phone": person.phone,
        "tax_id": person.tax_id,
        "registration_id": person.registration_id,
        "profession": person.profession,
        "date_of_birth": serialize_value(person.date_of_birth),
        "address": to_dict_fast(person.address),
    }

    if is_legal_entity(person):
        result["representatives"] = [representative_to_dict(r) for r in person.representatives]
    else:
        spouse = active_spouse(person)
        result["civil_status"] = person.civil_status
        result["dependents"] = person.dependents
        result["is_married"] = person.is_married
        result["spouse"] = to_dict_fast(spouse) if spouse is not None else None

    if shows_bank_details(role):
        result["bank"] = to_dict_fast(person.bank)
    if shows_guarantee_property(role):
        result["guarantee_property"] = to_dict_fast(person.guarantee_property)

    result["uploaded_files"] = list(person.uploaded_files)
    if shows_secondary_files(person):
        result["secondary_files"] = list(person.secondary_files)
    return result


def quote_to_dict(quote: InsuranceQuote | None) -> dict[str, Any] | None:
    if quote is None:
        return None
    return to_dict_fast(quote)


def contract_to_dict(contract: LeaseContract) -> dict[str, Any]:
    """Effective, JSON-ready view of a contract.

    Data kept only for non-destructive switching (the inactive variant of
    a party, an unmarried spouse, other guarantee payloads, guarantors when
    the guarantee is not guarantor-backed) is left out.
    """
    guarantee = contract.guarantee
    return {
        "landlords": [person_to_dict(p, PartyRole.LANDLORD) for p in contract.landlords],
        "tenants": [person_to_dict(p, PartyRole.TENANT) for p in contract.tenants],
        "guarantors": [person_to_dict(p, PartyRole.GUARANTOR) for p in contract.active_guarantors()],
        "guarantee": {
            "guarantee_type": serialize_value(guarantee.guarantee_type),
            **serialize_value(guarantee.active_payload()),
        },
        "brokerage": to_dict_fast(contract.brokerage),
        "property_address": to_dict_fast(contract.property_address),
        "financials": to_dict_fast(contract.financials),
        "start_date": serialize_value(contract.start_date),
        "rent_due_day": contract.rent_due_day,
        "readjustment_index": serialize_value(contract.readjustment_index),
        "expenses": to_dict_fast(contract.expenses),
        "insurance": to_dict_fast(contract.insurance),
        "observations": contract.observations,
        "property_files": list(contract.property_files),
    }
