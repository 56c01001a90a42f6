"""Configuration management for lease-intake."""

from dataclasses import dataclass, field

from lease_intake.exceptions import ConfigurationError


@dataclass
class AddressLookupConfig:
    """Postal-code (CEP) resolution service configuration."""

    base_url: str = "https://viacep.com.br/ws"
    timeout_seconds: float = 5.0

    def url_for(self, cep: str) -> str:
        """Get the lookup URL for an 8-digit CEP."""
        return f"{self.base_url.rstrip('/')}/{cep}/json/"


@dataclass
class NarrativeConfig:
    """Narrative (contract summary) generator configuration."""

    api_key: str | None = None
    model: str = "gemini-2.5-flash"
    temperature: float = 0.3
    max_output_tokens: int = 4096

    def require_api_key(self) -> str:
        """Return the API key or raise when it is not configured."""
        if not self.api_key:
            raise ConfigurationError("GEMINI_API_KEY is not set")
        return self.api_key


@dataclass
class OutputConfig:
    """Output configuration."""

    pretty_json: bool = True


@dataclass
class LeaseIntakeConfig:
    """Main configuration for lease-intake."""

    address_lookup: AddressLookupConfig = field(default_factory=AddressLookupConfig)
    narrative: NarrativeConfig = field(default_factory=NarrativeConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    seed: int | None = None
    log_level: str = "INFO"
    log_format: str = "standard"

    @classmethod
    def from_env(cls) -> "LeaseIntakeConfig":
        """Create config from environment variables."""
        import os

        try:
            address_lookup = AddressLookupConfig(
                base_url=os.getenv("VIACEP_BASE_URL", "https://viacep.com.br/ws"),
                timeout_seconds=float(os.getenv("VIACEP_TIMEOUT", "5")),
            )

            narrative = NarrativeConfig(
                api_key=os.getenv("GEMINI_API_KEY") or None,
                model=os.getenv("GEMINI_MODEL", "gemini-2.5-flash"),
                temperature=float(os.getenv("GEMINI_TEMPERATURE", "0.3")),
            )

            seed = int(os.getenv("SEED")) if os.getenv("SEED") else None
        except ValueError as e:
            raise ConfigurationError(f"Invalid numeric environment value: {e}") from e

        output = OutputConfig(
            pretty_json=os.getenv("PRETTY_JSON", "true").lower() == "true",
        )

        return cls(
            address_lookup=address_lookup,
            narrative=narrative,
            output=output,
            seed=seed,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
        )
