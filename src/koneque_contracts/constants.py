"""Default registry data for koneque-contracts library.

Koneque contracts deployed on Base Sepolia (2025-08-31). Values are sample
deployment data; load a registry file to describe another deployment.
"""

import re

# 20-byte hex address
ADDRESS_PATTERN = re.compile(r"^0x[0-9a-fA-F]{40}$")

NETWORK_CONFIG = {
    "name": "Base Sepolia",
    "chain_id": 84532,
    "rpc_url": "https://sepolia.base.org",
    "explorer_url": "https://sepolia.basescan.org",
    "currency": {
        "name": "ETH",
        "symbol": "ETH",
        "decimals": 18,
    },
}

CONTRACT_ADDRESSES = {
    # Token system
    "NativeToken": "0x3422820Ef9FBC8e0206E4CBcB6369dBd14BE18c4",
    # Account system
    "SmartAccount": "0x5B02258b1441F2850a45eb7949d83f6B103e731e",
    "AccountFactory": "0x5f7272c1532b6B05558757AAC74e4D21E58DECAe",
    "Paymaster": "0x5FCA60cbb22e38F8172ae6BA41FFCfad007a41BD",
    # Marketplace system
    "MarketplaceCore": "0xbB4fE95d722457484Bc42453d5346a166C7bCAE9",
    "Escrow": "0xdE0E60DCaf3e8b36F3C92a9Ea6D97C0e9a3ca194",
    "FeeManager": "0x4EF6c34dEEae92d4a6314Ba0C0C76fBe1E8360D0",
    # Dispute system
    "DisputeResolution": "0x4A1E9765473e4E29EB77250360622c6251D2D4e1",
    "OracleRegistry": "0xA6680F13c455655C458807C96AEf1947E87572B2",
    # Incentives system
    "ReferralSystem": "0xB0EBE476289D5070E18Fb7e4C6F44Ce97Be30211",
}

CONTRACT_CATEGORIES = {
    "token": ["NativeToken"],
    "account": ["SmartAccount", "AccountFactory", "Paymaster"],
    "marketplace": ["MarketplaceCore", "Escrow", "FeeManager"],
    "dispute": ["DisputeResolution", "OracleRegistry"],
    "incentives": ["ReferralSystem"],
}

# Descriptive only, nothing resolves or orders these
CONTRACT_RELATIONSHIPS = {
    "MarketplaceCore": {
        "dependencies": ["Escrow", "FeeManager"],
        "description": "Core marketplace functionality with escrow and fee management",
    },
    "Escrow": {
        "dependencies": ["MarketplaceCore", "DisputeResolution"],
        "description": "Secure fund custody with dispute resolution integration",
    },
    "FeeManager": {
        "dependencies": ["MarketplaceCore", "ReferralSystem"],
        "description": "Platform fee management with referral discounts",
    },
    "DisputeResolution": {
        "dependencies": ["OracleRegistry", "Escrow", "MarketplaceCore"],
        "description": "Dispute resolution with oracle integration",
    },
    "ReferralSystem": {
        "dependencies": ["FeeManager", "MarketplaceCore"],
        "description": "Referral tracking and reward distribution",
    },
}

COMMON_INTERACTIONS = {
    "mintTokens": {
        "contract": "NativeToken",
        "method": "mint",
        "signature": "mint(address,uint256)",
        "description": "Mint tokens to a specific address",
    },
    "createAccount": {
        "contract": "AccountFactory",
        "method": "createAccount",
        "signature": "createAccount(address,uint256)",
        "description": "Create a new smart account",
    },
    "createOrder": {
        "contract": "MarketplaceCore",
        "method": "createOrder",
        "signature": "createOrder(...)",
        "description": "Create a new marketplace order",
    },
    "createDispute": {
        "contract": "DisputeResolution",
        "method": "createDispute",
        "signature": "createDispute(uint256,string)",
        "description": "Create a new dispute",
    },
    "createReferralCode": {
        "contract": "ReferralSystem",
        "method": "createReferralCode",
        "signature": "createReferralCode(string)",
        "description": "Create a new referral code",
    },
}

DEPLOYMENT_INFO = {
    "date": "2025-08-31",
    "block_range": "30431731-30431732",
    "total_cost": "0.000015154486445882 ETH",
    "deployer": "YOUR_DEPLOYER_ADDRESS",  # placeholder until the deployer is recorded
    "version": "1.0.0",
}

# Same shape as a registry JSON file
DEFAULT_REGISTRY_DATA = {
    "network": NETWORK_CONFIG,
    "contracts": CONTRACT_ADDRESSES,
    "categories": CONTRACT_CATEGORIES,
    "relationships": CONTRACT_RELATIONSHIPS,
    "interactions": COMMON_INTERACTIONS,
    "deployment": DEPLOYMENT_INFO,
}
