"""Unit tests for NetworkConfig explorer URLs."""

from koneque_contracts.types import Currency, NetworkConfig

ADDRESS = "0x3422820Ef9FBC8e0206E4CBcB6369dBd14BE18c4"


def _network(explorer_url: str) -> NetworkConfig:
    return NetworkConfig(
        name="Base",
        chain_id=8453,
        rpc_url="https://mainnet.base.org",
        explorer_url=explorer_url,
        currency=Currency(name="ETH", symbol="ETH", decimals=18),
    )


class TestAddressUrl:
    """Test the NetworkConfig.address_url method."""

    def test_joins_base_and_address_path(self):
        network = _network("https://basescan.org")
        assert network.address_url(ADDRESS) == f"https://basescan.org/address/{ADDRESS}"

    def test_trailing_slash_is_not_doubled(self):
        """Test that a trailing slash on the explorer URL is dropped before joining."""
        network = _network("https://basescan.org/")
        assert network.address_url(ADDRESS) == f"https://basescan.org/address/{ADDRESS}"
