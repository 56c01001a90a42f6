"""Pytest configuration and fixtures."""

from decimal import Decimal

import pytest

from lease_intake.models.base import Address
from lease_intake.models.lease import (
    GuaranteeType,
    LeaseContract,
    PartyRole,
    PersonKind,
    PropertyType,
)
from lease_intake.store import operations as ops


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def sample_address() -> Address:
    """Sample address."""
    return Address(
        street="Avenida Paulista",
        number="1000",
        complement="Apto 12",
        neighborhood="Bela Vista",
        city="São Paulo",
        state="SP",
        postal_code="01310-100",
    )


@pytest.fixture
def contract() -> LeaseContract:
    """Fresh editing state: one blank landlord and one blank tenant."""
    return ops.new_contract()


@pytest.fixture
def complete_contract(sample_address: Address) -> LeaseContract:
    """Contract that passes every submission rule."""
    contract = ops.new_contract()
    landlord_id = contract.landlords[0].id
    tenant_id = contract.tenants[0].id
    contract = ops.update_party(contract, PartyRole.LANDLORD, landlord_id, {"name": "Maria Souza"})
    contract = ops.update_party(contract, PartyRole.TENANT, tenant_id, {"name": "João Lima"})
    contract = ops.set_guarantee_type(contract, GuaranteeType.DEPOSIT)
    contract = ops.set_insurance_selection(contract, PropertyType.APARTMENT, 100000)
    return ops.update_contract(
        contract,
        {
            "guarantee": {"deposit_amount": Decimal("7500.00")},
            "financials": {"rent": Decimal("2500.00")},
            "rent_due_day": 10,
            "property_address": sample_address,
        },
    )


@pytest.fixture
def legal_entity_contract() -> tuple[LeaseContract, str]:
    """Contract whose first landlord is a legal entity with one representative."""
    contract = ops.new_contract()
    landlord_id = contract.landlords[0].id
    contract = ops.update_party(
        contract,
        PartyRole.LANDLORD,
        landlord_id,
        {"kind": PersonKind.LEGAL, "name": "Imobiliária Horizonte Ltda"},
    )
    return contract, landlord_id
