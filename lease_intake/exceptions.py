"""Custom exception hierarchy for lease-intake."""


class LeaseIntakeError(Exception):
    """Base exception for all lease-intake errors."""


class EntityNotFoundError(LeaseIntakeError):
    """Raised when an explicitly requested entity does not exist."""


class InvariantViolationError(LeaseIntakeError):
    """Raised when an operation would leave the contract in an invalid state."""


class ConfigurationError(LeaseIntakeError):
    """Raised when configuration is invalid or missing."""


class CollaboratorError(LeaseIntakeError):
    """Raised when an external collaborator fails."""


class AddressLookupError(CollaboratorError):
    """Raised when the postal-code service cannot be reached or errors out."""


class NarrativeGenerationError(CollaboratorError):
    """Raised when the narrative generator fails."""
