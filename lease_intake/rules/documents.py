"""Required-document checklists per party.

Checklists are tuples of labels. Labels starting with :data:`SECTION_PREFIX`
are section headers: they are rendered without a bullet, and downstream
consumers recognise them by that prefix.
"""

from __future__ import annotations

from lease_intake.models.lease.enums import GuaranteeType, PartyRole, PersonKind
from lease_intake.models.lease.person import Person
from lease_intake.parties import active_spouse, is_effectively_married, is_legal_entity

SECTION_PREFIX = "---"
BULLET = "•"

GUARANTOR_SECTION_HEADER = f"{SECTION_PREFIX} Documentos do Fiador {SECTION_PREFIX}"

NATURAL_PERSON_DOCUMENTS: tuple[str, ...] = (
    "RG e CPF (ou CNH válida)",
    "Comprovante de residência atualizado (últimos 90 dias)",
    "Comprovante de renda (3 últimos holerites ou extratos bancários)",
    "Certidão de nascimento ou casamento",
    "Declaração de Imposto de Renda (último exercício, com recibo)",
)

LEGAL_ENTITY_DOCUMENTS: tuple[str, ...] = (
    "Contrato Social consolidado e última alteração contratual",
    "Cartão CNPJ atualizado",
    "Comprovante de endereço da empresa",
    "Balanço patrimonial e DRE do último exercício",
    "Declaração de Imposto de Renda Pessoa Jurídica",
    "RG, CPF e comprovante de residência dos sócios/representantes",
)

SPOUSE_DOCUMENTS: tuple[str, ...] = (
    "RG e CPF do cônjuge",
    "Certidão de casamento ou declaração de união estável",
    "Comprovante de renda do cônjuge",
)

GUARANTOR_EXTRA_DOCUMENTS: tuple[str, ...] = (
    "Matrícula atualizada do imóvel dado em garantia (emitida há no máximo 30 dias)",
    "Carnê de IPTU do imóvel dado em garantia",
    "Certidão negativa de ônus reais do imóvel",
)

PROPERTY_DOCUMENTS: tuple[str, ...] = (
    "Matrícula atualizada do imóvel",
    "Carnê de IPTU do ano vigente",
    "Última conta de água",
    "Última conta de luz",
    "Último boleto de condomínio",
    "Laudo de vistoria de entrada",
)


def required_documents(
    kind: PersonKind | str,
    is_married: bool,
    role: PartyRole | str,
    guarantee_type: GuaranteeType | str | None = None,
) -> tuple[str, ...]:
    """Build the document checklist for one party.

    The base list depends on ``kind``; married parties add the spouse list.
    Guarantors additionally get a section with the natural-person list and
    the collateral documents: a guarantor's own identity documents are
    requested as an individual whatever the variant of its record.

    ``guarantee_type`` is part of the checklist context passed by callers;
    the guarantor section itself is keyed on ``role``, since guarantor
    parties only take part in the contract under a guarantor-backed lease.

    Parameters
    ----------
    kind : PersonKind | str
        Party variant.
    is_married : bool
        Effective marital status (see :func:`lease_intake.parties.active_spouse`).
    role : PartyRole | str
        Role of the party in the contract.
    guarantee_type : GuaranteeType | str | None
        Guarantee selected for the contract.

    Returns
    -------
    tuple[str, ...]
        Ordered checklist, section headers included.
    """
    if PersonKind(kind) == PersonKind.LEGAL:
        docs = LEGAL_ENTITY_DOCUMENTS
    else:
        docs = NATURAL_PERSON_DOCUMENTS

    if is_married:
        docs = docs + SPOUSE_DOCUMENTS

    if PartyRole(role) == PartyRole.GUARANTOR:
        docs = (
            docs
            + (GUARANTOR_SECTION_HEADER,)
            + NATURAL_PERSON_DOCUMENTS
            + GUARANTOR_EXTRA_DOCUMENTS
        )

    return docs


def documents_for_person(
    person: Person,
    role: PartyRole | str,
    guarantee_type: GuaranteeType | str | None = None,
) -> tuple[str, ...]:
    """Checklist for a stored party, using its effective marital status.

    A legal entity counts as married when any of its representatives is.
    """
    if is_legal_entity(person):
        married = any(active_spouse(rep) is not None for rep in person.representatives)
    else:
        married = is_effectively_married(person)
    return required_documents(person.kind, married, role, guarantee_type)


def property_documents() -> tuple[str, ...]:
    """Checklist for the leased property's own folder."""
    return PROPERTY_DOCUMENTS


def is_section_header(label: str) -> bool:
    return label.startswith(SECTION_PREFIX)


def format_checklist(labels: tuple[str, ...] | list[str]) -> list[str]:
    """Render checklist lines: headers as-is, documents behind a bullet."""
    return [label if is_section_header(label) else f"{BULLET} {label}" for label in labels]
