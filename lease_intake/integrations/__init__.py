"""Clients for the external collaborators: postal-code lookup and summary generation."""

from lease_intake.integrations.cep import (
    CepClient,
    ResolvedAddress,
    apply_resolved_address,
    clean_postal_code,
)
from lease_intake.integrations.narrative import NarrativeGenerator, build_prompt

__all__ = [
    "CepClient",
    "NarrativeGenerator",
    "ResolvedAddress",
    "apply_resolved_address",
    "build_prompt",
    "clean_postal_code",
]
