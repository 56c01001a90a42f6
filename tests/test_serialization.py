"""Tests for contract serialization."""

import json
from datetime import date, datetime
from decimal import Decimal

from lease_intake.models.base import Address
from lease_intake.models.lease import (
    BankDetails,
    GuaranteeProperty,
    GuaranteeType,
    LeaseContract,
    PartyRole,
    Person,
    PersonKind,
    Representative,
    Spouse,
)
from lease_intake.rules.insurance import quote_for
from lease_intake.sinks.serialization import (
    contract_to_dict,
    person_to_dict,
    quote_to_dict,
    serialize_value,
    to_dict,
)
from lease_intake.store import operations as ops


class TestSerializeValue:
    """Tests for serialize_value."""

    def test_scalars(self) -> None:
        assert serialize_value(Decimal("1500.00")) == "1500.00"
        assert serialize_value(GuaranteeType.DEPOSIT) == "Caução"
        assert serialize_value(date(2025, 1, 31)) == "2025-01-31"
        assert serialize_value(datetime(2025, 1, 31, 10, 30)) == "2025-01-31T10:30:00"
        assert serialize_value("x") == "x"
        assert serialize_value(None) is None

    def test_containers(self) -> None:
        assert serialize_value(("a", Decimal("1"))) == ["a", "1"]
        assert serialize_value({"k": [Decimal("2")]}) == {"k": ["2"]}

    def test_to_dict(self, sample_address: Address) -> None:
        assert to_dict(sample_address)["city"] == "São Paulo"
        assert to_dict({"a": 1}) == {"a": 1}
        assert to_dict(5) == {"value": "5"}


class TestPersonToDict:
    """Tests for the effective view of a party."""

    def test_natural_person_hides_representatives(self) -> None:
        person = Person(name="Ana", representatives=(Representative(name="Sócio"),))

        result = person_to_dict(person, PartyRole.TENANT)

        assert result["kind"] == "Pessoa Física"
        assert "representatives" not in result
        assert result["spouse"] is None
        assert "bank" not in result
        assert "guarantee_property" not in result
        assert "secondary_files" not in result

    def test_married_person_includes_spouse(self) -> None:
        person = Person(is_married=True, spouse=Spouse(name="Carlos", birth_date=date(1980, 5, 1)))

        result = person_to_dict(person, PartyRole.TENANT)

        assert result["spouse"]["name"] == "Carlos"
        assert result["spouse"]["birth_date"] == "1980-05-01"
        assert result["secondary_files"] == []

    def test_unmarried_spouse_hidden(self) -> None:
        person = Person(is_married=False, spouse=Spouse(name="Carlos"))
        assert person_to_dict(person, PartyRole.TENANT)["spouse"] is None

    def test_legal_entity(self) -> None:
        rep = Representative(name="Paulo", spouse=Spouse(name="Lúcia"))
        person = Person(
            kind=PersonKind.LEGAL,
            name="Horizonte Ltda",
            is_married=True,
            spouse=Spouse(name="Hidden"),
            representatives=(rep,),
            secondary_files=("socios.pdf",),
        )

        result = person_to_dict(person, PartyRole.LANDLORD)

        assert result["kind"] == "Pessoa Jurídica"
        assert "spouse" not in result
        assert "civil_status" not in result
        assert result["representatives"][0]["name"] == "Paulo"
        assert result["representatives"][0]["spouse"] is None
        assert result["secondary_files"] == ["socios.pdf"]

    def test_role_specific_records(self) -> None:
        person = Person(
            bank=BankDetails(bank_name="Itaú"),
            guarantee_property=GuaranteeProperty(registration_number="12345"),
        )

        landlord = person_to_dict(person, PartyRole.LANDLORD)
        guarantor = person_to_dict(person, "Fiador")

        assert landlord["bank"]["bank_name"] == "Itaú"
        assert "guarantee_property" not in landlord
        assert guarantor["guarantee_property"]["registration_number"] == "12345"
        assert "bank" not in guarantor


class TestContractToDict:
    """Tests for the effective contract view."""

    def test_json_ready(self, complete_contract: LeaseContract) -> None:
        result = contract_to_dict(complete_contract)

        json.dumps(result)
        assert result["guarantee"] == {"guarantee_type": "Caução", "deposit_amount": "7500.00"}
        assert result["financials"]["rent"] == "2500.00"
        assert result["insurance"] == {"property_type": "Apartamento", "coverage": "100000"}
        assert result["rent_due_day"] == 10
        assert result["start_date"] is None

    def test_inactive_guarantors_left_out(self, complete_contract: LeaseContract) -> None:
        contract, _ = ops.add_party(complete_contract, PartyRole.GUARANTOR)
        assert contract_to_dict(contract)["guarantors"] == []

        contract = ops.set_guarantee_type(contract, GuaranteeType.GUARANTOR)
        result = contract_to_dict(contract)

        assert len(result["guarantors"]) == 1
        assert result["guarantee"] == {"guarantee_type": "Fiador"}

    def test_unselected_guarantee(self, contract: LeaseContract) -> None:
        assert contract_to_dict(contract)["guarantee"] == {"guarantee_type": None}


class TestQuoteToDict:
    """Tests for quote_to_dict."""

    def test_quote(self, complete_contract: LeaseContract) -> None:
        result = quote_to_dict(quote_for(complete_contract))

        assert result is not None
        assert result["monthly_premium"] == "9.90"

    def test_no_quote(self) -> None:
        assert quote_to_dict(None) is None
