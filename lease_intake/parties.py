"""Party variant operations and field-visibility predicates.

Every function here is total: it never raises and never mutates its
argument, returning a new record instead.
"""

from __future__ import annotations

from dataclasses import replace
from typing import TypeVar

from lease_intake.models.lease.enums import PartyRole, PersonKind
from lease_intake.models.lease.person import Person, Representative, Spouse

MaritalRecord = TypeVar("MaritalRecord", Person, Representative)


def create_representative() -> Representative:
    """Create a blank representative with a fresh identifier."""
    return Representative()


def create_person(kind: PersonKind | str = PersonKind.NATURAL) -> Person:
    """Create a blank party of the given kind.

    Every party starts with one blank representative, so switching it to a
    legal entity later yields a valid record without further repair.
    """
    return Person(kind=PersonKind(kind))


def set_person_kind(person: Person, kind: PersonKind | str) -> Person:
    """Select the variant, keeping the data entered for the other one."""
    kind = PersonKind(kind)
    if kind == person.kind:
        return person
    representatives = person.representatives
    if kind == PersonKind.LEGAL and not representatives:
        representatives = (create_representative(),)
    return replace(person, kind=kind, representatives=representatives)


def toggle_person_kind(person: Person) -> Person:
    """Flip between natural person and legal entity."""
    if person.kind == PersonKind.NATURAL:
        return set_person_kind(person, PersonKind.LEGAL)
    return set_person_kind(person, PersonKind.NATURAL)


def set_marital_status(record: MaritalRecord, is_married: bool) -> MaritalRecord:
    """Set the married flag on a person or representative.

    The spouse sub-record is kept as entered when the flag is cleared; it is
    only hidden from derived output (see :func:`active_spouse`).
    """
    return replace(record, is_married=is_married)


def is_legal_entity(person: Person) -> bool:
    return person.kind == PersonKind.LEGAL


def active_spouse(record: Person | Representative) -> Spouse | None:
    """Return the spouse when it is part of the record's effective data.

    A legal entity never has a spouse of its own; its representatives may.
    """
    if isinstance(record, Person) and is_legal_entity(record):
        return None
    return record.spouse if record.is_married else None


def is_effectively_married(person: Person) -> bool:
    return active_spouse(person) is not None


def shows_bank_details(role: PartyRole | str) -> bool:
    """Banking details and beneficiary only apply to landlords."""
    return PartyRole(role) == PartyRole.LANDLORD


def shows_guarantee_property(role: PartyRole | str) -> bool:
    """Collateral property only applies to guarantors."""
    return PartyRole(role) == PartyRole.GUARANTOR


def shows_secondary_files(person: Person) -> bool:
    """Whether the spouse/representative attachment bucket is in use."""
    return is_legal_entity(person) or person.is_married
