"""Sample data generators for lease contracts."""

from lease_intake.generators.address import AddressFactory
from lease_intake.generators.base import BaseGenerator
from lease_intake.generators.lease import LeaseContractGenerator, PartyGenerator
from lease_intake.generators.pool import FakerPool

__all__ = [
    "AddressFactory",
    "BaseGenerator",
    "FakerPool",
    "LeaseContractGenerator",
    "PartyGenerator",
]
