"""Registry integrity checks for koneque-contracts library."""

from typing import Any, List, Mapping, Sequence
from urllib.parse import urlparse

from .constants import ADDRESS_PATTERN
from .types import (
    ContractCategory,
    ContractInteraction,
    ContractName,
    ContractRelationship,
    NetworkConfig,
)


def is_valid_address(value: Any) -> bool:
    """
    Check whether a value is a 20-byte hex address string.

    Checksum casing is not verified.

    Args:
        value: Value to check

    Returns:
        True if value matches 0x followed by 40 hex characters
    """
    return isinstance(value, str) and ADDRESS_PATTERN.match(value) is not None


def _is_http_url(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    parsed = urlparse(value)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def _is_integer(value: Any) -> bool:
    # bool is an int subclass
    return isinstance(value, int) and not isinstance(value, bool)


def _check_network(network: NetworkConfig) -> List[str]:
    problems = []

    if not _is_integer(network.chain_id) or network.chain_id <= 0:
        problems.append(f"chain id must be a positive integer, got {network.chain_id!r}")
    if not _is_integer(network.currency.decimals) or network.currency.decimals < 0:
        problems.append(
            f"currency decimals must be a non-negative integer, "
            f"got {network.currency.decimals!r}"
        )
    for field_name in ("rpc_url", "explorer_url"):
        url = getattr(network, field_name)
        if not _is_http_url(url):
            problems.append(f"{field_name} is not an http(s) URL: {url!r}")

    return problems


def find_registry_problems(
    network: NetworkConfig,
    addresses: Mapping[ContractName, str],
    categories: Mapping[ContractCategory, Sequence[ContractName]],
    relationships: Mapping[ContractName, ContractRelationship],
    interactions: Mapping[str, ContractInteraction],
) -> List[str]:
    """
    Collect every integrity problem in a set of registry tables.

    Checks:
    - network: positive chain id, non-negative decimals, http(s) URLs
    - addresses: one well-formed address per ContractName
    - categories: every ContractCategory present, members known and unique
    - relationships and interactions: referenced contracts known

    Args:
        network: Network configuration
        addresses: Contract name -> address table
        categories: Category -> ordered contract names table
        relationships: Contract name -> declared relationship table
        interactions: Interaction key -> interaction table

    Returns:
        List of problem descriptions, empty if the tables are consistent
    """
    problems = _check_network(network)

    for name in ContractName:
        if name not in addresses:
            problems.append(f"missing address for contract {name}")
        elif not is_valid_address(addresses[name]):
            problems.append(f"invalid address for contract {name}: {addresses[name]!r}")

    for category in ContractCategory:
        if category not in categories:
            problems.append(f"missing category {category}")

    for category, members in categories.items():
        seen = set()
        for name in members:
            if name not in addresses:
                problems.append(f"category {category} lists unknown contract {name}")
            if name in seen:
                problems.append(f"category {category} lists contract {name} more than once")
            seen.add(name)

    for name, relationship in relationships.items():
        if name not in addresses:
            problems.append(f"relationship declared for unknown contract {name}")
        for dependency in relationship.dependencies:
            if dependency not in addresses:
                problems.append(f"contract {name} depends on unknown contract {dependency}")

    for key, interaction in interactions.items():
        if interaction.contract not in addresses:
            problems.append(
                f"interaction {key} targets unknown contract {interaction.contract}"
            )

    return problems
