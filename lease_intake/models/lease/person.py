"""Party models: persons, legal-entity representatives and their sub-records."""

from dataclasses import dataclass, field
from datetime import date

from lease_intake.models.base import Address, new_id
from lease_intake.models.lease.enums import PersonKind


@dataclass(frozen=True)
class Spouse:
    """Spouse (cônjuge) of a natural person or of a representative."""

    name: str = ""
    tax_id: str = ""  # CPF
    registration_id: str = ""  # RG
    profession: str = ""
    phone: str = ""
    email: str = ""
    birth_date: date | None = None


@dataclass(frozen=True)
class Representative:
    """Individual empowered to act for a legal-entity party."""

    id: str = field(default_factory=new_id)
    name: str = ""
    tax_id: str = ""  # CPF
    registration_id: str = ""  # RG
    profession: str = ""
    civil_status: str = ""
    address: Address = field(default_factory=Address)
    is_married: bool = False
    spouse: Spouse = field(default_factory=Spouse)


@dataclass(frozen=True)
class BankDetails:
    """Payment details, read only for landlords."""

    bank_name: str = ""
    agency: str = ""
    account: str = ""
    pix_key: str = ""
    beneficiary_is_self: bool = True
    beneficiary_name: str = ""


@dataclass(frozen=True)
class GuaranteeProperty:
    """Property offered as collateral, read only for guarantors."""

    address: str = ""
    registration_number: str = ""  # Matrícula
    property_tax_id: str = ""  # Inscrição de IPTU


@dataclass(frozen=True)
class Person:
    """Contract party, either a natural person or a legal entity.

    Both branches live in the same record. ``kind`` decides which one is
    read: ``civil_status``/``is_married``/``spouse``/``dependents`` for a
    natural person, ``representatives`` for a legal entity. The shared
    identity fields are reinterpreted for a legal entity (``name`` is the
    legal name, ``tax_id`` the CNPJ, ``registration_id`` the state
    registration, ``profession`` the line of business and
    ``date_of_birth`` the incorporation date).

    ``secondary_files`` holds the spouse's attachments for a natural person
    and the representatives' attachments for a legal entity.
    """

    id: str = field(default_factory=new_id)
    kind: PersonKind = PersonKind.NATURAL
    name: str = ""
    email: str = ""
    phone: str = ""
    tax_id: str = ""
    registration_id: str = ""
    profession: str = ""
    date_of_birth: date | None = None
    address: Address = field(default_factory=Address)

    # Natural person
    civil_status: str = ""
    is_married: bool = False
    spouse: Spouse = field(default_factory=Spouse)
    dependents: int = 0

    # Legal entity; one blank representative so a switch to LEGAL needs no repair
    representatives: tuple[Representative, ...] = field(default_factory=lambda: (Representative(),))

    # Role-conditional
    bank: BankDetails = field(default_factory=BankDetails)
    guarantee_property: GuaranteeProperty = field(default_factory=GuaranteeProperty)

    uploaded_files: tuple[str, ...] = ()
    secondary_files: tuple[str, ...] = ()
