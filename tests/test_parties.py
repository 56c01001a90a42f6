"""Tests for party variant operations and visibility predicates."""

from datetime import date

import pytest

from lease_intake.models.base import Address
from lease_intake.models.lease import PartyRole, Person, PersonKind, Representative, Spouse
from lease_intake.parties import (
    active_spouse,
    create_person,
    create_representative,
    is_effectively_married,
    is_legal_entity,
    set_marital_status,
    set_person_kind,
    shows_bank_details,
    shows_guarantee_property,
    shows_secondary_files,
    toggle_person_kind,
)


@pytest.fixture
def filled_person() -> Person:
    """Natural person with data entered in both variant branches."""
    return Person(
        kind=PersonKind.NATURAL,
        name="Ana Pereira",
        tax_id="123.456.789-09",
        date_of_birth=date(1985, 3, 2),
        address=Address(street="Rua A", number="1"),
        civil_status="Casado",
        is_married=True,
        spouse=Spouse(name="Carlos Pereira"),
        dependents=2,
        representatives=(Representative(name="Sócio 1"), Representative(name="Sócio 2")),
        uploaded_files=("rg.pdf",),
    )


class TestCreate:
    """Tests for record factories."""

    def test_create_person_defaults(self) -> None:
        person = create_person()

        assert person.kind == PersonKind.NATURAL
        assert len(person.representatives) == 1

    def test_create_legal_entity_has_representative(self) -> None:
        person = create_person(PersonKind.LEGAL)

        assert is_legal_entity(person)
        assert len(person.representatives) == 1

    def test_create_person_from_label(self) -> None:
        assert create_person("Pessoa Jurídica").kind == PersonKind.LEGAL

    def test_create_representative_fresh_ids(self) -> None:
        assert create_representative().id != create_representative().id


class TestSetPersonKind:
    """Tests for non-destructive variant switching."""

    def test_toggle_twice_restores_everything(self, filled_person: Person) -> None:
        """A→B→A keeps every field of both branches."""
        result = toggle_person_kind(toggle_person_kind(filled_person))
        assert result == filled_person

    def test_switch_keeps_other_branch(self, filled_person: Person) -> None:
        legal = set_person_kind(filled_person, PersonKind.LEGAL)

        assert legal.kind == PersonKind.LEGAL
        assert legal.spouse == filled_person.spouse
        assert legal.dependents == 2
        assert legal.representatives == filled_person.representatives

    def test_same_kind_returns_same_object(self, filled_person: Person) -> None:
        assert set_person_kind(filled_person, PersonKind.NATURAL) is filled_person

    def test_toggle_twice_restores_default_person(self) -> None:
        person = Person(name="Ana")

        assert len(person.representatives) == 1
        assert toggle_person_kind(toggle_person_kind(person)) == person

    def test_switch_to_legal_repairs_empty_representatives(self) -> None:
        person = Person(kind=PersonKind.NATURAL, representatives=())
        legal = set_person_kind(person, PersonKind.LEGAL)
        assert len(legal.representatives) == 1

    def test_input_not_mutated(self, filled_person: Person) -> None:
        set_person_kind(filled_person, PersonKind.LEGAL)
        assert filled_person.kind == PersonKind.NATURAL


class TestMaritalStatus:
    """Tests for marital status and spouse visibility."""

    def test_unmarried_keeps_spouse_but_hides_it(self, filled_person: Person) -> None:
        single = set_marital_status(filled_person, False)

        assert single.spouse.name == "Carlos Pereira"
        assert active_spouse(single) is None
        assert not is_effectively_married(single)

    def test_remarried_restores_spouse(self, filled_person: Person) -> None:
        again = set_marital_status(set_marital_status(filled_person, False), True)
        assert active_spouse(again) == Spouse(name="Carlos Pereira")

    def test_representative_marital_status(self) -> None:
        rep = Representative(spouse=Spouse(name="Beatriz"))

        married = set_marital_status(rep, True)

        assert isinstance(married, Representative)
        assert active_spouse(married) == Spouse(name="Beatriz")

    def test_legal_entity_has_no_spouse(self, filled_person: Person) -> None:
        legal = set_person_kind(filled_person, PersonKind.LEGAL)
        assert active_spouse(legal) is None


class TestVisibility:
    """Tests for role- and status-keyed visibility predicates."""

    @pytest.mark.parametrize(
        "role,expected",
        [(PartyRole.LANDLORD, True), (PartyRole.TENANT, False), (PartyRole.GUARANTOR, False)],
    )
    def test_bank_details(self, role: PartyRole, expected: bool) -> None:
        assert shows_bank_details(role) is expected

    @pytest.mark.parametrize(
        "role,expected",
        [(PartyRole.LANDLORD, False), (PartyRole.TENANT, False), (PartyRole.GUARANTOR, True)],
    )
    def test_guarantee_property(self, role: PartyRole, expected: bool) -> None:
        assert shows_guarantee_property(role) is expected

    def test_bank_details_accepts_label(self) -> None:
        assert shows_bank_details("Locador")

    def test_secondary_files(self) -> None:
        assert not shows_secondary_files(Person())
        assert shows_secondary_files(Person(is_married=True))
        assert shows_secondary_files(Person(kind=PersonKind.LEGAL))
