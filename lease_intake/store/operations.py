"""Collection operations over the lease contract aggregate.

Every operation takes a ``LeaseContract`` snapshot and returns a new one;
inputs are never mutated. A stale identifier makes an operation a no-op
(the same snapshot is returned). Only invariant violations raise, and they
leave the caller's snapshot as it was.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import is_dataclass, replace
from decimal import Decimal
from typing import Any, TypeVar

from lease_intake.exceptions import EntityNotFoundError, InvariantViolationError
from lease_intake.models.lease.contract import LeaseContract
from lease_intake.models.lease.enums import GuaranteeType, PartyRole, PersonKind, PropertyType
from lease_intake.models.lease.person import Person, Representative
from lease_intake.parties import create_person, create_representative, set_person_kind

logger = logging.getLogger(__name__)

Record = TypeVar("Record")

PARTY_COLLECTIONS = frozenset(role.collection for role in PartyRole)


def new_contract() -> LeaseContract:
    """Initial editing state: one blank landlord and one blank tenant."""
    return LeaseContract(
        landlords=(create_person(PersonKind.NATURAL),),
        tenants=(create_person(PersonKind.NATURAL),),
    )


def merge_patch(record: Record, patch: Mapping[str, Any]) -> Record:
    """Return ``record`` with ``patch`` applied.

    A dict given for a field that holds a dataclass (an address, a spouse,
    bank details...) is merged into the current value instead of replacing it.
    """
    changes: dict[str, Any] = {}
    for key, value in patch.items():
        current = getattr(record, key, None)
        if isinstance(value, Mapping) and is_dataclass(current):
            value = replace(current, **value)
        changes[key] = value
    return replace(record, **changes)


# --- Parties ---


def find_party(contract: LeaseContract, role: PartyRole | str, party_id: str) -> Person | None:
    """Return the party with ``party_id`` in the role's list, if any."""
    for person in contract.parties(PartyRole(role)):
        if person.id == party_id:
            return person
    return None


def get_party(contract: LeaseContract, role: PartyRole | str, party_id: str) -> Person:
    """Return the party with ``party_id`` or raise ``EntityNotFoundError``."""
    person = find_party(contract, role, party_id)
    if person is None:
        raise EntityNotFoundError(f"{PartyRole(role).value} {party_id} not found")
    return person


def _with_parties(
    contract: LeaseContract, role: PartyRole, parties: tuple[Person, ...]
) -> LeaseContract:
    return replace(contract, **{role.collection: parties})


def _map_party(
    contract: LeaseContract,
    role: PartyRole | str,
    party_id: str,
    transform: Callable[[Person], Person],
) -> LeaseContract:
    role = PartyRole(role)
    parties = contract.parties(role)
    for index, person in enumerate(parties):
        if person.id == party_id:
            updated = transform(person)
            if updated is person:
                return contract
            return _with_parties(
                contract, role, parties[:index] + (updated,) + parties[index + 1 :]
            )
    logger.debug(
        "No %s with id %s; nothing to change",
        role.value,
        party_id,
        extra={"role": role, "party_id": party_id},
    )
    return contract


def add_party(
    contract: LeaseContract,
    role: PartyRole | str,
    kind: PersonKind | str = PersonKind.NATURAL,
) -> tuple[LeaseContract, str]:
    """Append a blank party to the role's list.

    Returns
    -------
    tuple[LeaseContract, str]
        The new contract and the new party's identifier.
    """
    role = PartyRole(role)
    person = create_person(kind)
    return _with_parties(contract, role, contract.parties(role) + (person,)), person.id


def remove_party(contract: LeaseContract, role: PartyRole | str, party_id: str) -> LeaseContract:
    """Remove a party by identifier; unknown identifiers are ignored."""
    role = PartyRole(role)
    parties = contract.parties(role)
    remaining = tuple(p for p in parties if p.id != party_id)
    if len(remaining) == len(parties):
        logger.debug("No %s with id %s to remove", role.value, party_id)
        return contract
    return _with_parties(contract, role, remaining)


def update_party(
    contract: LeaseContract,
    role: PartyRole | str,
    party_id: str,
    patch: Mapping[str, Any],
) -> LeaseContract:
    """Merge ``patch`` into a party.

    A ``kind`` entry goes through :func:`set_person_kind`, so the other
    variant's data is kept.

    Raises
    ------
    InvariantViolationError
        When the patch changes the identifier or leaves a legal entity
        without representatives.
    """
    if "id" in patch and patch["id"] != party_id:
        raise InvariantViolationError("Party identifiers cannot be reassigned")

    def transform(person: Person) -> Person:
        changes = {k: v for k, v in patch.items() if k not in ("id", "kind")}
        if "kind" in patch:
            person = set_person_kind(person, patch["kind"])
        if "representatives" in changes:
            changes["representatives"] = tuple(changes["representatives"])
        for bucket in ("uploaded_files", "secondary_files"):
            if bucket in changes:
                changes[bucket] = tuple(changes[bucket])
        updated = merge_patch(person, changes)
        if updated.kind == PersonKind.LEGAL and not updated.representatives:
            logger.warning(
                "Rejected update leaving legal entity %s without representatives",
                party_id,
                extra={"role": PartyRole(role), "party_id": party_id},
            )
            raise InvariantViolationError("A legal entity must keep at least one representative")
        return updated

    return _map_party(contract, role, party_id, transform)


# --- Representatives ---


def add_representative(
    contract: LeaseContract, role: PartyRole | str, person_id: str
) -> tuple[LeaseContract, str | None]:
    """Append a blank representative to a party.

    Returns
    -------
    tuple[LeaseContract, str | None]
        The new contract and the new representative's identifier, or the
        unchanged contract and ``None`` when the party does not exist.
    """
    if find_party(contract, role, person_id) is None:
        logger.debug("No %s with id %s to add a representative to", PartyRole(role).value, person_id)
        return contract, None
    representative = create_representative()
    updated = _map_party(
        contract,
        role,
        person_id,
        lambda p: replace(p, representatives=p.representatives + (representative,)),
    )
    return updated, representative.id


def update_representative(
    contract: LeaseContract,
    role: PartyRole | str,
    person_id: str,
    representative_id: str,
    patch: Mapping[str, Any],
) -> LeaseContract:
    """Merge ``patch`` into one representative of a party."""
    if "id" in patch and patch["id"] != representative_id:
        raise InvariantViolationError("Representative identifiers cannot be reassigned")

    def transform(person: Person) -> Person:
        reps = person.representatives
        for index, rep in enumerate(reps):
            if rep.id == representative_id:
                updated = merge_patch(rep, patch)
                return replace(person, representatives=reps[:index] + (updated,) + reps[index + 1 :])
        logger.debug("No representative %s on party %s", representative_id, person_id)
        return person

    return _map_party(contract, role, person_id, transform)


def remove_representative(
    contract: LeaseContract,
    role: PartyRole | str,
    person_id: str,
    representative_id: str,
) -> LeaseContract:
    """Remove one representative from a party.

    Raises
    ------
    InvariantViolationError
        When ``representative_id`` is the party's only representative.
    """

    def transform(person: Person) -> Person:
        reps = person.representatives
        remaining = tuple(r for r in reps if r.id != representative_id)
        if len(remaining) == len(reps):
            logger.debug("No representative %s on party %s", representative_id, person_id)
            return person
        if not remaining:
            logger.warning(
                "Rejected removal of the last representative of party %s",
                person_id,
                extra={"party_id": person_id, "representative_id": representative_id},
            )
            raise InvariantViolationError("A legal entity must keep at least one representative")
        return replace(person, representatives=remaining)

    return _map_party(contract, role, person_id, transform)


def find_representative(person: Person, representative_id: str) -> Representative | None:
    for rep in person.representatives:
        if rep.id == representative_id:
            return rep
    return None


# --- Attachments ---


def _bucket(secondary: bool) -> str:
    return "secondary_files" if secondary else "uploaded_files"


def attach_files(
    contract: LeaseContract,
    role: PartyRole | str,
    party_id: str,
    filenames: Iterable[str],
    secondary: bool = False,
) -> LeaseContract:
    """Append filenames to a party's principal or secondary bucket.

    ``secondary`` selects the spouse bucket for a natural person and the
    representatives' bucket for a legal entity. Duplicates are kept.
    """
    names = tuple(filenames)
    if not names:
        return contract
    bucket = _bucket(secondary)
    return _map_party(
        contract, role, party_id, lambda p: replace(p, **{bucket: getattr(p, bucket) + names})
    )


def detach_file(
    contract: LeaseContract,
    role: PartyRole | str,
    party_id: str,
    filename: str,
    secondary: bool = False,
) -> LeaseContract:
    """Remove every occurrence of ``filename`` from a party's bucket."""
    bucket = _bucket(secondary)

    def transform(person: Person) -> Person:
        current = getattr(person, bucket)
        remaining = tuple(f for f in current if f != filename)
        if len(remaining) == len(current):
            return person
        return replace(person, **{bucket: remaining})

    return _map_party(contract, role, party_id, transform)


def attach_property_files(contract: LeaseContract, filenames: Iterable[str]) -> LeaseContract:
    names = tuple(filenames)
    if not names:
        return contract
    return replace(contract, property_files=contract.property_files + names)


def detach_property_file(contract: LeaseContract, filename: str) -> LeaseContract:
    remaining = tuple(f for f in contract.property_files if f != filename)
    if len(remaining) == len(contract.property_files):
        return contract
    return replace(contract, property_files=remaining)


# --- Contract-level terms ---


def update_contract(contract: LeaseContract, patch: Mapping[str, Any]) -> LeaseContract:
    """Merge ``patch`` into contract-level fields.

    Party lists are edited through the party operations only.
    """
    blocked = PARTY_COLLECTIONS.intersection(patch)
    if blocked:
        raise InvariantViolationError(
            f"Party lists cannot be patched directly: {', '.join(sorted(blocked))}"
        )
    if "property_files" in patch:
        patch = {**patch, "property_files": tuple(patch["property_files"])}
    return merge_patch(contract, patch)


def set_guarantee_type(
    contract: LeaseContract, guarantee_type: GuaranteeType | str | None
) -> LeaseContract:
    """Select the guarantee mechanism.

    Payload fields of other mechanisms and the guarantor list are kept, so
    switching away and back restores what was entered.
    """
    selected = GuaranteeType(guarantee_type) if guarantee_type else None
    if selected == contract.guarantee.guarantee_type:
        return contract
    return replace(contract, guarantee=replace(contract.guarantee, guarantee_type=selected))


def set_insurance_selection(
    contract: LeaseContract,
    property_type: PropertyType | str | None,
    coverage: Decimal | int | str | None,
) -> LeaseContract:
    """Select the property type and coverage tier used for the insurance quote.

    The coverage is kept even when it is not offered for the property type;
    the quote lookup then reports that no quote is available.
    """
    selected_type = PropertyType(property_type) if property_type else None
    selected_coverage = Decimal(str(coverage)) if coverage not in (None, "") else None
    return replace(
        contract,
        insurance=replace(
            contract.insurance, property_type=selected_type, coverage=selected_coverage
        ),
    )
