"""Ledger identifiers as they appear in URL paths.

Ledger ids are plain strings with a fixed shape:

- domain: ``wonderland``
- account: ``alice@wonderland``
- asset definition: ``rose#wonderland``

Parsing rejects anything else with ``ValueError`` so routers can turn
it into a 400 before any ledger call is made.
"""

import re
from dataclasses import dataclass

_NAME_PATTERN = re.compile(r"[^\s@#]+")


def _validate_name(value: str, label: str) -> str:
    if not _NAME_PATTERN.fullmatch(value):
        raise ValueError(
            f"Invalid {label} '{value}': must be non-empty and must not "
            "contain whitespace, '@' or '#'"
        )
    return value


@dataclass(frozen=True)
class DomainId:
    """Identifier of a ledger domain."""

    name: str

    @classmethod
    def parse(cls, value: str) -> "DomainId":
        return cls(_validate_name(value, "domain id"))

    def __str__(self) -> str:
        return self.name


def _split_once(
    value: str, separator: str, label: str, example: str
) -> tuple[str, DomainId]:
    name, sep, domain = value.partition(separator)
    invalid = f"Invalid {label} '{value}': expected format `{example}`"
    if not sep:
        raise ValueError(invalid)
    try:
        return name, DomainId.parse(domain)
    except ValueError as e:
        raise ValueError(f"{invalid} ({e})") from e


@dataclass(frozen=True)
class AccountId:
    """Identifier of an account, ``name@domain``."""

    name: str
    domain_id: DomainId

    @classmethod
    def parse(cls, value: str) -> "AccountId":
        name, domain_id = _split_once(value, "@", "account id", "alice@wonderland")
        return cls(
            name=_validate_name(name, "account name"),
            domain_id=domain_id,
        )

    def __str__(self) -> str:
        return f"{self.name}@{self.domain_id}"


@dataclass(frozen=True)
class AssetDefinitionId:
    """Identifier of an asset definition, ``name#domain``."""

    name: str
    domain_id: DomainId

    @classmethod
    def parse(cls, value: str) -> "AssetDefinitionId":
        name, domain_id = _split_once(value, "#", "asset definition id", "rose#wonderland")
        return cls(
            name=_validate_name(name, "asset definition name"),
            domain_id=domain_id,
        )

    def __str__(self) -> str:
        return f"{self.name}#{self.domain_id}"


@dataclass(frozen=True)
class AssetId:
    """Identifier of an asset: a definition held by an account."""

    definition_id: AssetDefinitionId
    account_id: AccountId
