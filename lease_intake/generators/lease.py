"""Sample lease contract generators."""

from __future__ import annotations

import random
from datetime import date, timedelta
from decimal import Decimal
from typing import Any, Iterator

from lease_intake.generators.base import BaseGenerator
from lease_intake.generators.pool import FakerPool
from lease_intake.models.lease.contract import LeaseContract
from lease_intake.models.lease.enums import (
    CivilStatus,
    ExpenseStatus,
    GuaranteeType,
    PartyRole,
    PersonKind,
    PropertyType,
    ReadjustmentIndex,
)
from lease_intake.models.lease.person import (
    BankDetails,
    GuaranteeProperty,
    Representative,
    Spouse,
)
from lease_intake.rules.insurance import coverage_tiers
from lease_intake.store import operations as ops


class PartyGenerator(BaseGenerator):
    """Generate field patches describing realistic contract parties."""

    KINDS = list(PersonKind)
    KIND_WEIGHTS = [0.8, 0.2]

    CIVIL_STATUSES = list(CivilStatus)
    CIVIL_STATUS_WEIGHTS = [0.35, 0.35, 0.12, 0.05, 0.10, 0.03]

    DOCUMENT_NAMES = [
        "rg_cpf.pdf",
        "comprovante_residencia.pdf",
        "holerite_1.pdf",
        "holerite_2.pdf",
        "holerite_3.pdf",
        "declaracao_ir.pdf",
    ]

    def generate(
        self, role: PartyRole | str, kind: PersonKind | str | None = None
    ) -> dict[str, Any]:
        """Generate the fields of one party.

        Parameters
        ----------
        role : PartyRole | str
            Role the party will take; drives the role-specific records.
        kind : PersonKind | str | None
            Variant to generate; picked at random when ``None``.

        Returns
        -------
        dict[str, Any]
            Patch suitable for :func:`lease_intake.store.operations.update_party`.
        """
        role = PartyRole(role)
        if kind is None:
            # Guarantors are individuals
            if role == PartyRole.GUARANTOR:
                kind = PersonKind.NATURAL
            else:
                kind = self.weighted(self.KINDS, self.KIND_WEIGHTS)
        kind = PersonKind(kind)

        if kind == PersonKind.LEGAL:
            patch = self._legal_entity()
        else:
            patch = self._natural_person()

        if role == PartyRole.LANDLORD:
            patch["bank"] = self._bank_details()
        elif role == PartyRole.GUARANTOR:
            patch["guarantee_property"] = self._guarantee_property()

        patch["uploaded_files"] = tuple(
            random.sample(self.DOCUMENT_NAMES, k=random.randint(0, len(self.DOCUMENT_NAMES)))
        )
        return patch

    def _natural_person(self) -> dict[str, Any]:
        civil_status = self.weighted(self.CIVIL_STATUSES, self.CIVIL_STATUS_WEIGHTS)
        is_married = civil_status in (CivilStatus.MARRIED, CivilStatus.STABLE_UNION)
        patch: dict[str, Any] = {
            "kind": PersonKind.NATURAL,
            "name": self.pool.name(),
            "email": self.pool.email(),
            "phone": self.pool.phone(),
            "tax_id": self.pool.cpf(),
            "registration_id": self.pool.rg(),
            "profession": self.pool.job(),
            "date_of_birth": self._birth_date(),
            "address": self.addresses.generate(),
            "civil_status": civil_status.value,
            "is_married": is_married,
            "dependents": self.weighted([0, 1, 2, 3], [0.45, 0.25, 0.2, 0.1]),
        }
        if is_married:
            patch["spouse"] = self._spouse()
            patch["secondary_files"] = ("rg_cpf_conjuge.pdf", "certidao_casamento.pdf")
        return patch

    def _legal_entity(self) -> dict[str, Any]:
        representatives = tuple(self._representative() for _ in range(random.randint(1, 3)))
        opened = date.today() - timedelta(days=random.randint(365, 30 * 365))
        return {
            "kind": PersonKind.LEGAL,
            "name": self.pool.company(),
            "email": self.pool.email(),
            "phone": self.pool.phone(),
            "tax_id": self.pool.cnpj(),
            "registration_id": str(random.randint(100_000_000, 999_999_999)),
            "profession": random.choice(
                ["Comércio varejista", "Serviços de tecnologia", "Consultoria", "Clínica médica"]
            ),
            "date_of_birth": opened,
            "address": self.addresses.generate(),
            "representatives": representatives,
            "secondary_files": ("rg_cpf_socios.pdf",),
        }

    def _representative(self) -> Representative:
        civil_status = self.weighted(self.CIVIL_STATUSES, self.CIVIL_STATUS_WEIGHTS)
        is_married = civil_status == CivilStatus.MARRIED
        return Representative(
            name=self.pool.name(),
            tax_id=self.pool.cpf(),
            registration_id=self.pool.rg(),
            profession=self.pool.job(),
            civil_status=civil_status.value,
            address=self.addresses.generate(),
            is_married=is_married,
            spouse=self._spouse() if is_married else Spouse(),
        )

    def _spouse(self) -> Spouse:
        return Spouse(
            name=self.pool.name(),
            tax_id=self.pool.cpf(),
            registration_id=self.pool.rg(),
            profession=self.pool.job(),
            phone=self.pool.phone(),
            email=self.pool.email(),
            birth_date=self._birth_date(),
        )

    def _bank_details(self) -> BankDetails:
        beneficiary_is_self = self.chance(0.85)
        return BankDetails(
            bank_name=self.pool.bank(),
            agency=f"{random.randint(1, 9999):04d}",
            account=f"{random.randint(10000, 999999)}-{random.randint(0, 9)}",
            pix_key=self.pool.email() if self.chance(0.5) else self.pool.phone(),
            beneficiary_is_self=beneficiary_is_self,
            beneficiary_name="" if beneficiary_is_self else self.pool.name(),
        )

    def _guarantee_property(self) -> GuaranteeProperty:
        address = self.addresses.generate()
        return GuaranteeProperty(
            address=f"{address.street}, {address.number} - {address.city}/{address.state}",
            registration_number=f"{random.randint(10000, 99999)}",
            property_tax_id=f"{random.randint(100, 999)}.{random.randint(100, 999)}.{random.randint(1000, 9999)}-{random.randint(0, 9)}",
        )

    @staticmethod
    def _birth_date() -> date:
        return date.today() - timedelta(days=random.randint(21 * 365, 75 * 365))


class LeaseContractGenerator(BaseGenerator):
    """Generate complete sample contracts through the collection operations."""

    GUARANTEE_TYPES = list(GuaranteeType)
    GUARANTEE_WEIGHTS = [0.40, 0.20, 0.25, 0.10, 0.05]

    INSURERS = ["Porto Seguro", "Tokio Marine", "Liberty Seguros", "Too Seguros"]

    def __init__(self, seed: int | None = None, pool: FakerPool | None = None) -> None:
        super().__init__(seed, pool=pool)
        self._parties = PartyGenerator(seed=seed, pool=self.pool)

    def generate(self) -> LeaseContract:
        """Generate a single contract.

        Returns
        -------
        LeaseContract
            Generated contract.
        """
        return self._generate_one()

    def generate_batch(self, count: int) -> Iterator[LeaseContract]:
        """Generate multiple contracts.

        Parameters
        ----------
        count : int
            Number of contracts to generate.

        Yields
        ------
        LeaseContract
            Generated contracts.
        """
        for _ in range(count):
            yield self._generate_one()

    def _generate_one(self) -> LeaseContract:
        contract = LeaseContract()
        guarantee_type = self.weighted(self.GUARANTEE_TYPES, self.GUARANTEE_WEIGHTS)

        counts = {
            PartyRole.LANDLORD: self.weighted([1, 2], [0.8, 0.2]),
            PartyRole.TENANT: self.weighted([1, 2], [0.7, 0.3]),
            PartyRole.GUARANTOR: random.randint(1, 2) if guarantee_type == GuaranteeType.GUARANTOR else 0,
        }
        for role, count in counts.items():
            for _ in range(count):
                contract = self._add_party(contract, role)

        rent = Decimal(random.randrange(800, 12000, 50))
        condo_fee = Decimal(random.randrange(0, 2000, 10))
        property_tax = (rent * Decimal("0.08")).quantize(Decimal("0.01"))
        property_type = random.choice(list(PropertyType))

        contract = ops.set_guarantee_type(contract, guarantee_type)
        contract = ops.update_contract(contract, {"guarantee": self._guarantee_payload(guarantee_type, rent)})
        contract = ops.set_insurance_selection(
            contract, property_type, random.choice(coverage_tiers(property_type))
        )
        contract = ops.update_contract(
            contract,
            {
                "property_address": self.addresses.generate(),
                "financials": {
                    "rent": rent,
                    "condo_fee": condo_fee,
                    "property_tax": property_tax,
                },
                "brokerage": {
                    "realtor_name": self.pool.name(),
                    "captor_name": self.pool.name(),
                    "admin_fee": Decimal(random.choice([5, 6, 8, 10])),
                    "declares_income_tax": self.chance(0.5),
                },
                "start_date": date.today() + timedelta(days=random.randint(0, 60)),
                "rent_due_day": random.choice([1, 5, 10, 15, 20]),
                "readjustment_index": random.choice(list(ReadjustmentIndex)),
                "expenses": {
                    "condo": ExpenseStatus.BILLED_SEPARATELY if condo_fee else ExpenseStatus.NOT_APPLICABLE,
                    "gas": random.choice(list(ExpenseStatus)),
                },
                "observations": random.choice(["", "", "Imóvel entregue pintado.", "Aceita pet de pequeno porte."]),
            },
        )
        return ops.attach_property_files(contract, ["matricula.pdf", "iptu.pdf"])

    def _add_party(self, contract: LeaseContract, role: PartyRole) -> LeaseContract:
        contract, party_id = ops.add_party(contract, role)
        return ops.update_party(contract, role, party_id, self._parties.generate(role))

    def _guarantee_payload(self, guarantee_type: GuaranteeType, rent: Decimal) -> dict[str, Any]:
        if guarantee_type == GuaranteeType.DEPOSIT:
            # Deposits are capped at three months of rent
            return {"deposit_amount": rent * 3}
        if guarantee_type == GuaranteeType.SURETY_INSURANCE:
            return {
                "insurer_name": random.choice(self.INSURERS),
                "policy_number": f"{random.randint(10**9, 10**10 - 1)}",
            }
        if guarantee_type == GuaranteeType.CAPITALIZATION_TITLE:
            return {"capitalization_amount": rent * random.choice([6, 10, 12])}
        return {}
