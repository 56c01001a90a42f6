"""Domain models for lease intake."""

from lease_intake.models.base import Address, new_id

__all__ = ["Address", "new_id"]
