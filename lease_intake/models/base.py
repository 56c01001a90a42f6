"""Base models shared across the lease domain."""

import uuid
from dataclasses import dataclass


def new_id() -> str:
    """Return a new opaque entity identifier (UUID4 hex)."""
    return uuid.uuid4().hex


@dataclass(frozen=True)
class Address:
    """Brazilian postal address.

    Every field defaults to an empty string so that a blank address can be
    embedded in a freshly created record and filled in later:
    - street/number/complement: logradouro, número, complemento
    - neighborhood: bairro
    - state: UF abbreviation (e.g. ``"SP"``)
    - postal_code: CEP, as typed by the user (formatted or not)
    """

    street: str = ""
    number: str = ""
    complement: str = ""
    neighborhood: str = ""
    city: str = ""
    state: str = ""
    postal_code: str = ""

    def is_blank(self) -> bool:
        """Return True when no field has been filled in."""
        return not any(
            (
                self.street,
                self.number,
                self.complement,
                self.neighborhood,
                self.city,
                self.state,
                self.postal_code,
            )
        )
