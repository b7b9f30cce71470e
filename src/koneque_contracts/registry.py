"""Main API for koneque-contracts library."""

import json
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union

from .constants import DEFAULT_REGISTRY_DATA
from .exceptions import (
    InvalidRegistryError,
    RegistryFileNotFoundError,
    RelationshipNotFoundError,
    UnknownInteractionError,
    UnknownKeyError,
)
from .names import normalize_category, normalize_contract_name
from .types import (
    ContractCategory,
    ContractInteraction,
    ContractName,
    ContractRelationship,
    Currency,
    DeploymentInfo,
    NetworkConfig,
)
from .validation import find_registry_problems, is_valid_address

logger = logging.getLogger(__name__)

ContractKey = Union[ContractName, str]
CategoryKey = Union[ContractCategory, str]


class ContractRegistry:
    """Read-only registry of deployed contracts on a single network."""

    def __init__(
        self,
        network: NetworkConfig,
        addresses: Mapping[ContractName, str],
        categories: Mapping[ContractCategory, Sequence[ContractName]],
        relationships: Optional[Mapping[ContractName, ContractRelationship]] = None,
        interactions: Optional[Mapping[str, ContractInteraction]] = None,
        deployment: Optional[DeploymentInfo] = None,
    ):
        """
        Initialize the registry.

        Args:
            network: Network the contracts are deployed on
            addresses: Address of every known contract
            categories: Ordered contract names per category
            relationships: Declared dependencies per contract (optional)
            interactions: Common method calls by interaction key (optional)
            deployment: Deployment provenance (optional)

        Raises:
            InvalidRegistryError: If the tables fail integrity checks
        """
        self._network = network
        self._addresses = MappingProxyType(dict(addresses))
        self._categories = MappingProxyType(
            {category: tuple(members) for category, members in categories.items()}
        )
        self._relationships = MappingProxyType(dict(relationships or {}))
        self._interactions = MappingProxyType(dict(interactions or {}))
        self._deployment = deployment

        problems = find_registry_problems(
            self._network,
            self._addresses,
            self._categories,
            self._relationships,
            self._interactions,
        )
        if problems:
            raise InvalidRegistryError("Invalid contract registry: " + "; ".join(problems))

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(network={self._network.name!r}, "
            f"chain_id={self._network.chain_id}, contracts={len(self._addresses)})"
        )

    @property
    def network(self) -> NetworkConfig:
        return self._network

    @property
    def deployment(self) -> Optional[DeploymentInfo]:
        return self._deployment

    @property
    def addresses(self) -> Mapping[ContractName, str]:
        return self._addresses

    @property
    def categories(self) -> Mapping[ContractCategory, Tuple[ContractName, ...]]:
        return self._categories

    @property
    def relationships(self) -> Mapping[ContractName, ContractRelationship]:
        return self._relationships

    @property
    def interactions(self) -> Mapping[str, ContractInteraction]:
        return self._interactions

    def contract_names(self) -> List[ContractName]:
        """Get all contract names, in table order."""
        return list(self._addresses.keys())

    def category_names(self) -> List[ContractCategory]:
        """Get all category names, in table order."""
        return list(self._categories.keys())

    def has_contract(self, contract_name: ContractKey) -> bool:
        """
        Check if a contract is known to the registry.

        Args:
            contract_name: Contract name

        Returns:
            True if contract is known, False otherwise
        """
        try:
            return normalize_contract_name(contract_name) in self._addresses
        except UnknownKeyError:
            return False

    def contract_address(self, contract_name: ContractKey) -> str:
        """
        Get the deployed address of a contract.

        Args:
            contract_name: Contract name (e.g., "NativeToken")

        Returns:
            Address string (0x followed by 40 hex characters)

        Raises:
            UnknownContractError: If contract is not known
        """
        return self._addresses[normalize_contract_name(contract_name)]

    def explorer_url(self, contract_name: ContractKey) -> str:
        """
        Get the block explorer URL of a contract.

        Args:
            contract_name: Contract name

        Returns:
            URL of the form {explorer_url}/address/{address}

        Raises:
            UnknownContractError: If contract is not known
        """
        return self._network.address_url(self.contract_address(contract_name))

    def category_members(self, category: CategoryKey) -> Tuple[ContractName, ...]:
        """
        Get the contract names registered under a category.

        Args:
            category: Category name (e.g., "account")

        Returns:
            Contract names in declared order

        Raises:
            UnknownCategoryError: If category is not known
        """
        return self._categories[normalize_category(category)]

    def contracts_by_category(self, category: CategoryKey) -> List[str]:
        """
        Get the addresses of the contracts registered under a category.

        Args:
            category: Category name (e.g., "account")

        Returns:
            Addresses in the category's declared order

        Raises:
            UnknownCategoryError: If category is not known
        """
        return [self._addresses[name] for name in self.category_members(category)]

    def relationship(self, contract_name: ContractKey) -> ContractRelationship:
        """
        Get the declared relationship of a contract.

        Args:
            contract_name: Contract name

        Returns:
            ContractRelationship object

        Raises:
            UnknownContractError: If contract is not known
            RelationshipNotFoundError: If contract declares no relationship
        """
        name = normalize_contract_name(contract_name)
        if name not in self._relationships:
            raise RelationshipNotFoundError(f"Contract '{name}' declares no relationship")
        return self._relationships[name]

    def dependencies(self, contract_name: ContractKey) -> List[ContractName]:
        """
        Get the declared dependencies of a contract.

        Args:
            contract_name: Contract name

        Returns:
            Dependency names in declared order, empty if none are declared

        Raises:
            UnknownContractError: If contract is not known
        """
        name = normalize_contract_name(contract_name)
        relationship = self._relationships.get(name)
        if relationship is None:
            return []
        return list(relationship.dependencies)

    def dependents(self, contract_name: ContractKey) -> List[ContractName]:
        """
        Get the contracts that declare a dependency on a contract.

        Only direct declarations are considered.

        Args:
            contract_name: Contract name

        Returns:
            Dependent contract names in relationship table order

        Raises:
            UnknownContractError: If contract is not known
        """
        name = normalize_contract_name(contract_name)
        return [
            dependent
            for dependent, relationship in self._relationships.items()
            if name in relationship.dependencies
        ]

    def interaction(self, key: str) -> ContractInteraction:
        """
        Get a common interaction by key.

        Args:
            key: Interaction key (e.g., "mintTokens")

        Returns:
            ContractInteraction object

        Raises:
            UnknownInteractionError: If key is not known
        """
        if not isinstance(key, str) or key not in self._interactions:
            known = ", ".join(self._interactions.keys())
            raise UnknownInteractionError(
                f"Unknown interaction '{key}'. Known interactions: {known}"
            )
        return self._interactions[key]

    def interactions_for(self, contract_name: ContractKey) -> Dict[str, ContractInteraction]:
        """
        Get the common interactions targeting a contract.

        Args:
            contract_name: Contract name

        Returns:
            Dictionary mapping interaction key -> ContractInteraction

        Raises:
            UnknownContractError: If contract is not known
        """
        name = normalize_contract_name(contract_name)
        return {
            key: interaction
            for key, interaction in self._interactions.items()
            if interaction.contract == name
        }

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the registry to a JSON-compatible dictionary.

        Returns:
            Dictionary in registry file format
        """
        network = self._network
        data: Dict[str, Any] = {
            "network": {
                "name": network.name,
                "chain_id": network.chain_id,
                "rpc_url": network.rpc_url,
                "explorer_url": network.explorer_url,
                "currency": {
                    "name": network.currency.name,
                    "symbol": network.currency.symbol,
                    "decimals": network.currency.decimals,
                },
            },
            "contracts": {name.value: address for name, address in self._addresses.items()},
            "categories": {
                category.value: [name.value for name in members]
                for category, members in self._categories.items()
            },
            "relationships": {
                name.value: {
                    "dependencies": [dep.value for dep in relationship.dependencies],
                    "description": relationship.description,
                }
                for name, relationship in self._relationships.items()
            },
            "interactions": {
                key: {
                    "contract": interaction.contract.value,
                    "method": interaction.method,
                    "signature": interaction.signature,
                    "description": interaction.description,
                }
                for key, interaction in self._interactions.items()
            },
        }

        if self._deployment is not None:
            data["deployment"] = {
                "date": self._deployment.date,
                "block_range": self._deployment.block_range,
                "total_cost": self._deployment.total_cost,
                "deployer": self._deployment.deployer,
                "version": self._deployment.version,
            }

        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ContractRegistry":
        """
        Build a registry from a dictionary in registry file format.

        The "relationships", "interactions" and "deployment" sections are optional.

        Args:
            data: Registry data

        Returns:
            ContractRegistry object

        Raises:
            InvalidRegistryError: If data is malformed, names an unknown contract
                                  or category, or fails integrity checks
        """
        try:
            network_data = data["network"]
            currency_data = network_data["currency"]
            network = NetworkConfig(
                name=network_data["name"],
                chain_id=network_data["chain_id"],
                rpc_url=network_data["rpc_url"],
                explorer_url=network_data["explorer_url"],
                currency=Currency(
                    name=currency_data["name"],
                    symbol=currency_data["symbol"],
                    decimals=currency_data["decimals"],
                ),
            )

            addresses = {
                normalize_contract_name(name): address
                for name, address in data["contracts"].items()
            }

            categories = {
                normalize_category(category): [normalize_contract_name(n) for n in members]
                for category, members in data["categories"].items()
            }

            relationships = {
                normalize_contract_name(name): ContractRelationship(
                    dependencies=tuple(
                        normalize_contract_name(dep) for dep in entry["dependencies"]
                    ),
                    description=entry["description"],
                )
                for name, entry in data.get("relationships", {}).items()
            }

            interactions = {
                key: ContractInteraction(
                    contract=normalize_contract_name(entry["contract"]),
                    method=entry["method"],
                    signature=entry["signature"],
                    description=entry["description"],
                )
                for key, entry in data.get("interactions", {}).items()
            }

            deployment = None
            if "deployment" in data:
                deployment_data = data["deployment"]
                deployment = DeploymentInfo(
                    date=deployment_data["date"],
                    block_range=deployment_data["block_range"],
                    total_cost=deployment_data["total_cost"],
                    deployer=deployment_data["deployer"],
                    version=deployment_data["version"],
                )
        except UnknownKeyError as e:
            raise InvalidRegistryError(f"Invalid contract registry: {e}") from e
        except (KeyError, TypeError, AttributeError) as e:
            raise InvalidRegistryError(f"Malformed registry data: {e!r}") from e

        if deployment is not None and not is_valid_address(deployment.deployer):
            logger.info(
                "Deployer of %s deployment is not an address: %r",
                network.name,
                deployment.deployer,
            )

        return cls(
            network=network,
            addresses=addresses,
            categories=categories,
            relationships=relationships,
            interactions=interactions,
            deployment=deployment,
        )

    @classmethod
    def from_json(cls, path: Union[Path, str]) -> "ContractRegistry":
        """
        Load a registry from a JSON file.

        Args:
            path: Path to registry JSON file

        Returns:
            ContractRegistry object

        Raises:
            RegistryFileNotFoundError: If file not found
            InvalidRegistryError: If file content is not a valid registry
        """
        registry_path = Path(path)
        if not registry_path.is_file():
            raise RegistryFileNotFoundError(f"Registry file not found at {registry_path}")

        try:
            with open(registry_path) as f:
                data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise InvalidRegistryError(
                f"Registry file {registry_path} is not valid JSON: {e}"
            ) from e

        logger.debug("Loading contract registry from %s", registry_path)
        return cls.from_dict(data)

    def to_json(self, path: Union[Path, str]) -> str:
        """
        Save the registry to a JSON file.

        Creates parent directories if they don't exist.

        Args:
            path: Where to save the registry

        Returns:
            Path where the registry was saved
        """
        registry_path = Path(path)
        registry_path.parent.mkdir(parents=True, exist_ok=True)
        with open(registry_path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)

        logger.debug("Saved contract registry to %s", registry_path)
        return str(registry_path)


DEFAULT_REGISTRY = ContractRegistry.from_dict(DEFAULT_REGISTRY_DATA)


def get_contract_address(contract_name: ContractKey) -> str:
    """
    Get the deployed address of a contract in the default registry.

    Args:
        contract_name: Contract name (e.g., "NativeToken")

    Returns:
        Address string

    Raises:
        UnknownContractError: If contract is not known
    """
    return DEFAULT_REGISTRY.contract_address(contract_name)


def get_explorer_url(contract_name: ContractKey) -> str:
    """
    Get the block explorer URL of a contract in the default registry.

    Raises:
        UnknownContractError: If contract is not known
    """
    return DEFAULT_REGISTRY.explorer_url(contract_name)


def get_contracts_by_category(category: CategoryKey) -> List[str]:
    """
    Get the addresses of a category's contracts in the default registry.

    Raises:
        UnknownCategoryError: If category is not known
    """
    return DEFAULT_REGISTRY.contracts_by_category(category)
