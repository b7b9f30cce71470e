"""Shared pytest fixtures for koneque-contracts tests."""

import copy
import json
from pathlib import Path
from typing import Any, Dict

import pytest

from koneque_contracts.constants import DEFAULT_REGISTRY_DATA
from koneque_contracts.registry import ContractRegistry


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def default_registry_data() -> Dict[str, Any]:
    """Return a mutable copy of the bundled registry data."""
    return copy.deepcopy(DEFAULT_REGISTRY_DATA)


@pytest.fixture
def sample_registry_json(fixtures_dir: Path) -> Dict[str, Any]:
    """Load and return the sample_registry.json fixture."""
    with open(fixtures_dir / "sample_registry.json") as f:
        return json.load(f)


@pytest.fixture
def registry(default_registry_data: Dict[str, Any]) -> ContractRegistry:
    """Build a registry from the bundled data."""
    return ContractRegistry.from_dict(default_registry_data)


@pytest.fixture
def temp_registry_file(tmp_path: Path, sample_registry_json: Dict[str, Any]) -> Path:
    """Create a temporary registry JSON file with sample data."""
    registry_path = tmp_path / "registry.json"
    with open(registry_path, "w") as f:
        json.dump(sample_registry_json, f, indent=2)
    return registry_path
