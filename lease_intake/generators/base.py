"""Shared plumbing for the sample data generators."""

from __future__ import annotations

import random
from abc import ABC
from collections.abc import Sequence
from typing import TypeVar

from lease_intake.generators.address import AddressFactory
from lease_intake.generators.pool import FakerPool

T = TypeVar("T")


class BaseGenerator(ABC):
    """Base class for the sample data generators.

    Seeds ``random`` for reproducibility and shares one ``FakerPool`` and one
    ``AddressFactory`` between a generator and the generators it delegates to.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility.
    locale : str
        Faker locale (default ``pt_BR``).
    pool : FakerPool | None
        Pre-generated value pool; one is built when omitted.
    """

    def __init__(
        self,
        seed: int | None = None,
        locale: str = "pt_BR",
        pool: FakerPool | None = None,
    ) -> None:
        self.seed = seed
        self.pool = pool or FakerPool(locale=locale, seed=seed)
        self.addresses = AddressFactory(seed=seed, pool=self.pool)
        if seed is not None:
            random.seed(seed)

    @staticmethod
    def weighted(options: Sequence[T], weights: Sequence[float]) -> T:
        """Pick one option with the given relative weights."""
        return random.choices(options, weights=weights, k=1)[0]

    @staticmethod
    def chance(probability: float) -> bool:
        return random.random() < probability
