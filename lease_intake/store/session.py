"""In-memory editing session over contract snapshots, with undo/redo."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field, replace
from decimal import Decimal
from typing import Any

from lease_intake.integrations.cep import CepClient, apply_resolved_address
from lease_intake.models.lease.contract import LeaseContract
from lease_intake.models.lease.enums import GuaranteeType, PartyRole, PersonKind, PropertyType
from lease_intake.models.lease.insurance import InsuranceQuote
from lease_intake.rules.documents import documents_for_person
from lease_intake.rules.insurance import quote_for
from lease_intake.rules.validation import ValidationIssue, is_submittable, validate_contract
from lease_intake.store import operations as ops

logger = logging.getLogger(__name__)


@dataclass
class ContractSession:
    """Single-editor session holding the current contract snapshot.

    Every edit goes through a pure operation from
    :mod:`lease_intake.store.operations`; the previous snapshot is pushed on
    the undo stack only when the operation succeeds and changes something.
    A failed operation leaves the session untouched.
    """

    contract: LeaseContract = field(default_factory=ops.new_contract)
    history_limit: int = 100
    _undo: list[LeaseContract] = field(default_factory=list)
    _redo: list[LeaseContract] = field(default_factory=list)

    def apply(self, operation: Callable[[LeaseContract], LeaseContract]) -> LeaseContract:
        """Run ``operation`` on the current snapshot and commit the result."""
        updated = operation(self.contract)
        self._commit(updated)
        return updated

    def _commit(self, updated: LeaseContract) -> None:
        if updated is self.contract:
            return
        self._undo.append(self.contract)
        if len(self._undo) > self.history_limit:
            del self._undo[0]
        self._redo.clear()
        self.contract = updated

    # History

    @property
    def can_undo(self) -> bool:
        return bool(self._undo)

    @property
    def can_redo(self) -> bool:
        return bool(self._redo)

    def undo(self) -> bool:
        """Restore the previous snapshot. Returns False when there is none."""
        if not self._undo:
            return False
        self._redo.append(self.contract)
        self.contract = self._undo.pop()
        return True

    def redo(self) -> bool:
        """Re-apply the last undone snapshot. Returns False when there is none."""
        if not self._redo:
            return False
        self._undo.append(self.contract)
        self.contract = self._redo.pop()
        return True

    # Parties

    def add_party(self, role: PartyRole | str, kind: PersonKind | str = PersonKind.NATURAL) -> str:
        """Add a blank party and return its identifier."""
        updated, party_id = ops.add_party(self.contract, role, kind)
        self._commit(updated)
        return party_id

    def remove_party(self, role: PartyRole | str, party_id: str) -> None:
        self.apply(lambda c: ops.remove_party(c, role, party_id))

    def update_party(self, role: PartyRole | str, party_id: str, patch: Mapping[str, Any]) -> None:
        self.apply(lambda c: ops.update_party(c, role, party_id, patch))

    def add_representative(self, role: PartyRole | str, person_id: str) -> str | None:
        updated, rep_id = ops.add_representative(self.contract, role, person_id)
        self._commit(updated)
        return rep_id

    def update_representative(
        self,
        role: PartyRole | str,
        person_id: str,
        representative_id: str,
        patch: Mapping[str, Any],
    ) -> None:
        self.apply(
            lambda c: ops.update_representative(c, role, person_id, representative_id, patch)
        )

    def remove_representative(
        self, role: PartyRole | str, person_id: str, representative_id: str
    ) -> None:
        self.apply(lambda c: ops.remove_representative(c, role, person_id, representative_id))

    def attach_files(
        self,
        role: PartyRole | str,
        party_id: str,
        filenames: Iterable[str],
        secondary: bool = False,
    ) -> None:
        names = tuple(filenames)
        self.apply(lambda c: ops.attach_files(c, role, party_id, names, secondary))

    def detach_file(
        self, role: PartyRole | str, party_id: str, filename: str, secondary: bool = False
    ) -> None:
        self.apply(lambda c: ops.detach_file(c, role, party_id, filename, secondary))

    def attach_property_files(self, filenames: Iterable[str]) -> None:
        names = tuple(filenames)
        self.apply(lambda c: ops.attach_property_files(c, names))

    def detach_property_file(self, filename: str) -> None:
        self.apply(lambda c: ops.detach_property_file(c, filename))

    # Contract terms

    def update_contract(self, patch: Mapping[str, Any]) -> None:
        self.apply(lambda c: ops.update_contract(c, patch))

    def set_guarantee_type(self, guarantee_type: GuaranteeType | str | None) -> None:
        self.apply(lambda c: ops.set_guarantee_type(c, guarantee_type))

    def set_insurance_selection(
        self,
        property_type: PropertyType | str | None,
        coverage: Decimal | int | str | None,
    ) -> None:
        self.apply(lambda c: ops.set_insurance_selection(c, property_type, coverage))

    # Address resolution

    def fill_property_address(self, lookup: CepClient, postal_code: str) -> bool:
        """Fill the property address from a CEP.

        Returns False, leaving the contract as it was, when the CEP is not
        found. Lookup errors propagate without touching the contract.
        """
        resolved = lookup.lookup(postal_code)
        if resolved is None:
            return False
        address = apply_resolved_address(self.contract.property_address, resolved)
        self.apply(lambda c: replace(c, property_address=address))
        return True

    def fill_party_address(
        self, lookup: CepClient, role: PartyRole | str, party_id: str, postal_code: str
    ) -> bool:
        """Fill a party's address from a CEP; see :meth:`fill_property_address`."""
        person = ops.find_party(self.contract, role, party_id)
        if person is None:
            return False
        resolved = lookup.lookup(postal_code)
        if resolved is None:
            return False
        address = apply_resolved_address(person.address, resolved)
        self.update_party(role, party_id, {"address": address})
        return True

    # Derived data

    def required_documents(self, role: PartyRole | str, party_id: str) -> tuple[str, ...]:
        """Checklist for a stored party; raises ``EntityNotFoundError`` for stale ids."""
        person = ops.get_party(self.contract, role, party_id)
        return documents_for_person(person, role, self.contract.guarantee.guarantee_type)

    def insurance_quote(self) -> InsuranceQuote | None:
        return quote_for(self.contract)

    def validate(self) -> tuple[ValidationIssue, ...]:
        return validate_contract(self.contract)

    def is_submittable(self) -> bool:
        submittable = is_submittable(self.contract)
        if not submittable:
            logger.info("Contract is not ready for submission")
        return submittable
