"""
koneque-contracts: Python registry of the Koneque smart contract deployment
"""

from importlib.metadata import PackageNotFoundError, version

from .exceptions import (
    InvalidRegistryError,
    RegistryError,
    RegistryFileNotFoundError,
    RelationshipNotFoundError,
    UnknownCategoryError,
    UnknownContractError,
    UnknownInteractionError,
    UnknownKeyError,
)
from .registry import (
    DEFAULT_REGISTRY,
    ContractRegistry,
    get_contract_address,
    get_contracts_by_category,
    get_explorer_url,
)
from .types import (
    ContractCategory,
    ContractInteraction,
    ContractName,
    ContractRelationship,
    Currency,
    DeploymentInfo,
    NetworkConfig,
)
from .validation import is_valid_address

try:
    __version__ = version("koneque-contracts")
except PackageNotFoundError:
    __version__ = None

__all__ = [
    "ContractRegistry",
    "DEFAULT_REGISTRY",
    "get_contract_address",
    "get_explorer_url",
    "get_contracts_by_category",
    "is_valid_address",
    "ContractName",
    "ContractCategory",
    "Currency",
    "NetworkConfig",
    "ContractRelationship",
    "ContractInteraction",
    "DeploymentInfo",
    "RegistryError",
    "UnknownKeyError",
    "UnknownContractError",
    "UnknownCategoryError",
    "UnknownInteractionError",
    "RelationshipNotFoundError",
    "InvalidRegistryError",
    "RegistryFileNotFoundError",
]
