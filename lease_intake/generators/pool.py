"""Pre-generated value pools for sample lease parties.

Faker is called once per pool entry at construction; afterwards values are
drawn with ``random.choice()``, so generating many parties stays cheap and
reproducible under a seed.

Usage::

    pool = FakerPool(seed=42)
    name = pool.name()
    cpf  = pool.cpf()           # CPF with valid check digits
"""

from __future__ import annotations

import random
from collections.abc import Sequence

from faker import Faker

CPF_WEIGHTS = (tuple(range(10, 1, -1)), tuple(range(11, 1, -1)))
CNPJ_WEIGHTS = ((5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2), (6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2))

# Headquarters branch number in a CNPJ
CNPJ_BRANCH = (0, 0, 0, 1)


def _check_digit(digits: Sequence[int], weights: Sequence[int]) -> int:
    """Mod-11 check digit shared by CPF and CNPJ."""
    remainder = sum(d * w for d, w in zip(digits, weights)) % 11
    return 0 if remainder < 2 else 11 - remainder


def _with_check_digits(digits: list[int], weights: tuple[Sequence[int], ...]) -> str:
    for step in weights:
        digits.append(_check_digit(digits, step))
    return "".join(map(str, digits))


def generate_cpf(formatted: bool = True) -> str:
    """Random CPF with valid check digits, as ``XXX.XXX.XXX-XX`` or 11 digits."""
    raw = _with_check_digits([random.randint(0, 9) for _ in range(9)], CPF_WEIGHTS)
    if not formatted:
        return raw
    return f"{raw[:3]}.{raw[3:6]}.{raw[6:9]}-{raw[9:]}"


def generate_cnpj(formatted: bool = True) -> str:
    """Random headquarters CNPJ with valid check digits."""
    base = [random.randint(0, 9) for _ in range(8)] + list(CNPJ_BRANCH)
    raw = _with_check_digits(base, CNPJ_WEIGHTS)
    if not formatted:
        return raw
    return f"{raw[:2]}.{raw[2:5]}.{raw[5:8]}/{raw[8:12]}-{raw[12:]}"


def generate_rg() -> str:
    """RG in the São Paulo layout (XX.XXX.XXX-X); no check digit is computed."""
    raw = "".join(str(random.randint(0, 9)) for _ in range(9))
    return f"{raw[:2]}.{raw[2:5]}.{raw[5:8]}-{raw[8]}"


class FakerPool:
    """Pools of Faker values and identity documents for lease parties.

    Parameters
    ----------
    locale : str
        Faker locale (default ``pt_BR``).
    seed : int | None
        Random seed for reproducibility.
    pool_sizes : dict[str, int] | None
        Override default pool sizes per field.
    """

    # Pool name -> Faker provider method
    FAKER_PROVIDERS: dict[str, str] = {
        "name": "name",
        "city": "city",
        "street": "street_name",
        "bairro": "bairro",
        "postcode": "postcode",
        "company": "company",
        "job": "job",
        "email_prefix": "user_name",
        "phone": "cellphone_number",
    }

    DEFAULT_SIZES: dict[str, int] = {
        "name": 2000,
        "city": 300,
        "street": 500,
        "bairro": 200,
        "postcode": 300,
        "company": 300,
        "job": 200,
        "email_prefix": 1000,
        "phone": 1000,
        "cpf": 2000,
        "cnpj": 500,
        "rg": 2000,
    }

    EMAIL_DOMAINS = ["gmail.com", "hotmail.com", "outlook.com", "yahoo.com.br", "uol.com.br"]

    BANKS = [
        "001 - Banco do Brasil",
        "033 - Santander",
        "104 - Caixa Econômica Federal",
        "237 - Bradesco",
        "260 - Nu Pagamentos",
        "341 - Itaú Unibanco",
        "756 - Sicoob",
    ]

    STATES = [
        "AC", "AL", "AM", "AP", "BA", "CE", "DF", "ES", "GO", "MA", "MG", "MS", "MT", "PA",
        "PB", "PE", "PI", "PR", "RJ", "RN", "RO", "RR", "RS", "SC", "SE", "SP", "TO",
    ]  # fmt: skip

    def __init__(
        self,
        locale: str = "pt_BR",
        seed: int | None = None,
        pool_sizes: dict[str, int] | None = None,
    ) -> None:
        sizes = {**self.DEFAULT_SIZES, **(pool_sizes or {})}
        fake = Faker(locale)
        if seed is not None:
            fake.seed_instance(seed)
            random.seed(seed)

        self._pools: dict[str, list[str]] = {
            key: [getattr(fake, method)() for _ in range(sizes[key])]
            for key, method in self.FAKER_PROVIDERS.items()
        }
        self._pools["cpf"] = [generate_cpf() for _ in range(sizes["cpf"])]
        self._pools["cnpj"] = [generate_cnpj() for _ in range(sizes["cnpj"])]
        self._pools["rg"] = [generate_rg() for _ in range(sizes["rg"])]

    def _pick(self, key: str) -> str:
        return random.choice(self._pools[key])

    def name(self) -> str:
        """Return a random full name."""
        return self._pick("name")

    def city(self) -> str:
        return self._pick("city")

    def street(self) -> str:
        return self._pick("street")

    def bairro(self) -> str:
        """Return a random neighborhood (bairro)."""
        return self._pick("bairro")

    def postcode(self) -> str:
        """Return a random CEP."""
        return self._pick("postcode")

    def estado(self) -> str:
        """Return a random UF abbreviation."""
        return random.choice(self.STATES)

    def company(self) -> str:
        return self._pick("company")

    def job(self) -> str:
        """Return a random profession."""
        return self._pick("job")

    def email(self) -> str:
        return f"{self._pick('email_prefix')}@{random.choice(self.EMAIL_DOMAINS)}"

    def phone(self) -> str:
        return self._pick("phone")

    def bank(self) -> str:
        return random.choice(self.BANKS)

    def cpf(self) -> str:
        return self._pick("cpf")

    def cnpj(self) -> str:
        return self._pick("cnpj")

    def rg(self) -> str:
        return self._pick("rg")
