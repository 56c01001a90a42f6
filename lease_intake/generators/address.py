"""Brazilian address generation."""

from __future__ import annotations

import random
from typing import TYPE_CHECKING

from faker import Faker

from lease_intake.models.base import Address

if TYPE_CHECKING:
    from lease_intake.generators.pool import FakerPool

COMPLEMENTS = ["", "", "", "Apto {n}", "Casa {n}", "Sala {n}", "Bloco B Apto {n}"]


class AddressFactory:
    """Generate realistic Brazilian addresses.

    Uses Faker's ``pt_BR`` provider, or a ``FakerPool`` when one is given
    for faster generation of large batches.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility.
    pool : FakerPool | None
        Pre-generated value pool.
    """

    def __init__(
        self,
        seed: int | None = None,
        pool: FakerPool | None = None,
    ) -> None:
        self._pool = pool
        self._fake = Faker("pt_BR")
        if seed is not None:
            self._fake.seed_instance(seed)

    def generate(self) -> Address:
        """Generate an address.

        Returns
        -------
        Address
            Generated address.
        """
        if self._pool is not None:
            return _generate_pooled(self._pool)
        return _generate(self._fake)


def _complement() -> str:
    return random.choice(COMPLEMENTS).format(n=random.randint(1, 500))


def _generate_pooled(pool: FakerPool) -> Address:
    """Generate an address from pre-generated pools (fast path)."""
    return Address(
        street=pool.street(),
        number=str(random.randint(1, 9999)),
        complement=_complement(),
        neighborhood=pool.bairro(),
        city=pool.city(),
        state=pool.estado(),
        postal_code=pool.postcode(),
    )


def _generate(fake: Faker) -> Address:
    """Generate an address using pt_BR-specific Faker methods."""
    return Address(
        street=fake.street_name(),
        number=str(random.randint(1, 9999)),
        complement=_complement(),
        neighborhood=fake.bairro(),
        city=fake.city(),
        state=fake.estado_sigla(),
        postal_code=fake.postcode(),
    )
