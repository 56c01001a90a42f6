"""Postal-code (CEP) resolution through ViaCEP."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, replace

import httpx

from lease_intake.config import AddressLookupConfig
from lease_intake.exceptions import AddressLookupError
from lease_intake.models.base import Address

logger = logging.getLogger(__name__)

_NON_DIGITS = re.compile(r"\D")

# ViaCEP answers 400 for malformed CEPs; both mean "no such address"
_NOT_FOUND_STATUSES = (400, 404)


@dataclass(frozen=True)
class ResolvedAddress:
    """Address fields the postal service can confirm."""

    street: str
    neighborhood: str
    city: str
    state: str
    postal_code: str


def clean_postal_code(postal_code: str) -> str:
    """Keep only the digits of a CEP."""
    return _NON_DIGITS.sub("", postal_code or "")


def apply_resolved_address(address: Address, resolved: ResolvedAddress) -> Address:
    """Fill an address from a lookup result, keeping number and complement."""
    return replace(
        address,
        street=resolved.street,
        neighborhood=resolved.neighborhood,
        city=resolved.city,
        state=resolved.state,
        postal_code=resolved.postal_code,
    )


class CepClient:
    """Synchronous ViaCEP client.

    Parameters
    ----------
    config : AddressLookupConfig | None
        Service URL and timeout.
    client : httpx.Client | None
        HTTP client to reuse; one is created (and owned) when omitted.
    """

    def __init__(
        self,
        config: AddressLookupConfig | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        self.config = config or AddressLookupConfig()
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=self.config.timeout_seconds)

    def lookup(self, postal_code: str) -> ResolvedAddress | None:
        """Resolve a CEP.

        Returns ``None`` when the CEP is not 8 digits (no request is made)
        or when the service does not know it.

        Raises
        ------
        AddressLookupError
            On transport errors or unexpected HTTP statuses.
        """
        cep = clean_postal_code(postal_code)
        if len(cep) != 8:
            logger.debug("Skipping lookup for malformed CEP %r", postal_code)
            return None

        url = self.config.url_for(cep)
        logger.info("Resolving CEP %s", cep, extra={"cep": cep})
        try:
            response = self._client.get(url)
            if response.status_code in _NOT_FOUND_STATUSES:
                logger.info(
                    "CEP %s not found (HTTP %s)", cep, response.status_code, extra={"cep": cep}
                )
                return None
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            logger.error("CEP service error for %s: HTTP %s", cep, e.response.status_code)
            raise AddressLookupError(f"CEP service returned HTTP {e.response.status_code}") from e
        except httpx.RequestError as e:
            logger.error("Could not reach CEP service for %s: %s", cep, e)
            raise AddressLookupError(f"CEP service unreachable: {e}") from e
        except ValueError as e:
            raise AddressLookupError("CEP service returned invalid JSON") from e

        if not isinstance(data, dict) or data.get("erro"):
            logger.info("CEP %s not found", cep, extra={"cep": cep})
            return None

        return ResolvedAddress(
            street=data.get("logradouro", ""),
            neighborhood=data.get("bairro", ""),
            city=data.get("localidade", ""),
            state=data.get("uf", ""),
            postal_code=data.get("cep") or postal_code,
        )

    def close(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "CepClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
