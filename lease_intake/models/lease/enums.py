"""Enumeration types for lease entities.

Values are the labels the business uses on forms and in summaries, so
``GuaranteeType("Caução")`` and ``GuaranteeType.DEPOSIT`` are interchangeable.
"""

from enum import Enum


class PersonKind(str, Enum):
    NATURAL = "Pessoa Física"
    LEGAL = "Pessoa Jurídica"


class PartyRole(str, Enum):
    LANDLORD = "Locador"
    TENANT = "Locatário"
    GUARANTOR = "Fiador"

    @property
    def collection(self) -> str:
        """Name of the contract field holding parties of this role."""
        return _ROLE_COLLECTIONS[self]


_ROLE_COLLECTIONS = {
    PartyRole.LANDLORD: "landlords",
    PartyRole.TENANT: "tenants",
    PartyRole.GUARANTOR: "guarantors",
}


class GuaranteeType(str, Enum):
    GUARANTOR = "Fiador"
    SURETY_INSURANCE = "Seguro Fiança"
    DEPOSIT = "Caução"
    CAPITALIZATION_TITLE = "Título de Capitalização"
    NONE = "Sem Garantia"


class PropertyType(str, Enum):
    APARTMENT = "Apartamento"
    MASONRY_HOUSE = "Residência Alvenaria"
    COMMERCE_SERVICES = "Comércio & Serviços"
    OFFICE = "Consultório & Escritório"


class ExpenseStatus(str, Enum):
    INCLUDED = "Inclusa"
    NOT_APPLICABLE = "Não Aplicável"
    BILLED_SEPARATELY = "A Parte"


class ReadjustmentIndex(str, Enum):
    IGPM = "IGPM"
    IPCA = "IPCA"
    IVAR = "IVAR"
    INPC = "INPC"
    IPC = "IPC"


class CivilStatus(str, Enum):
    SINGLE = "Solteiro"
    MARRIED = "Casado"
    DIVORCED = "Divorciado"
    WIDOWED = "Viúvo"
    STABLE_UNION = "União Estável"
    SEPARATED = "Separado"
