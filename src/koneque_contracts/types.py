"""Data types and dataclasses for koneque-contracts library."""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class ContractName(str, Enum):
    """
    Closed set of contract names known to the registry.

    Value strings match the deployed contract names and the keys of
    registry data files.
    """

    NATIVE_TOKEN = "NativeToken"
    SMART_ACCOUNT = "SmartAccount"
    ACCOUNT_FACTORY = "AccountFactory"
    PAYMASTER = "Paymaster"
    MARKETPLACE_CORE = "MarketplaceCore"
    ESCROW = "Escrow"
    FEE_MANAGER = "FeeManager"
    DISPUTE_RESOLUTION = "DisputeResolution"
    ORACLE_REGISTRY = "OracleRegistry"
    REFERRAL_SYSTEM = "ReferralSystem"

    def __str__(self) -> str:
        return self.value


class ContractCategory(str, Enum):
    """Closed set of contract groupings."""

    TOKEN = "token"
    ACCOUNT = "account"
    MARKETPLACE = "marketplace"
    DISPUTE = "dispute"
    INCENTIVES = "incentives"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Currency:
    """Native currency of a network."""

    name: str
    symbol: str
    decimals: int


@dataclass(frozen=True)
class NetworkConfig:
    """Network the contracts are deployed on."""

    name: str  # e.g., "Base Sepolia"
    chain_id: int
    rpc_url: str
    explorer_url: str  # Block explorer base URL, no trailing path
    currency: Currency

    def address_url(self, address: str) -> str:
        """Block explorer URL for an address."""
        return f"{self.explorer_url.rstrip('/')}/address/{address}"


@dataclass(frozen=True)
class ContractRelationship:
    """Declared dependencies of a contract (metadata only)."""

    dependencies: Tuple[ContractName, ...]
    description: str


@dataclass(frozen=True)
class ContractInteraction:
    """Shape of a commonly used contract method call."""

    contract: ContractName
    method: str
    signature: str  # e.g., "mint(address,uint256)"
    description: str


@dataclass(frozen=True)
class DeploymentInfo:
    """Provenance of a deployment. All fields are free-form strings."""

    date: str
    block_range: str  # e.g., "30431731-30431732"
    total_cost: str  # e.g., "0.000015154486445882 ETH"
    deployer: str
    version: str
