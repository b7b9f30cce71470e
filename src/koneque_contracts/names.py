"""Name normalization for koneque-contracts library."""

from typing import Union

from .exceptions import UnknownCategoryError, UnknownContractError
from .types import ContractCategory, ContractName


def normalize_contract_name(name: Union[ContractName, str]) -> ContractName:
    """
    Convert a contract name to its ContractName member.

    Args:
        name: ContractName member or its string value (e.g., "NativeToken")

    Returns:
        ContractName member

    Raises:
        UnknownContractError: If name is not a known contract
    """
    if isinstance(name, ContractName):
        return name

    try:
        return ContractName(name)
    except ValueError:
        known = ", ".join(member.value for member in ContractName)
        raise UnknownContractError(
            f"Unknown contract '{name}'. Known contracts: {known}"
        ) from None


def normalize_category(category: Union[ContractCategory, str]) -> ContractCategory:
    """
    Convert a category name to its ContractCategory member.

    Args:
        category: ContractCategory member or its string value (e.g., "account")

    Returns:
        ContractCategory member

    Raises:
        UnknownCategoryError: If category is not a known category
    """
    if isinstance(category, ContractCategory):
        return category

    try:
        return ContractCategory(category)
    except ValueError:
        known = ", ".join(member.value for member in ContractCategory)
        raise UnknownCategoryError(
            f"Unknown category '{category}'. Known categories: {known}"
        ) from None
