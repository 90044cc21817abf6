from enum import Enum


class Chain(str, Enum):
    """EVM networks served by the Etherscan v2 unified API. Values lowercase to match config conventions."""

    ETHEREUM = "ethereum"
    SEPOLIA = "sepolia"
    HOLESKY = "holesky"
    ARBITRUM = "arbitrum"
    OPTIMISM = "optimism"
    POLYGON = "polygon"
    BASE = "base"
    BSC = "bsc"
    AVALANCHE = "avalanche"


# Etherscan v2 selects the network with the `chainid` query parameter
CHAIN_IDS: dict[Chain, int] = {
    Chain.ETHEREUM: 1,
    Chain.SEPOLIA: 11155111,
    Chain.HOLESKY: 17000,
    Chain.ARBITRUM: 42161,
    Chain.OPTIMISM: 10,
    Chain.POLYGON: 137,
    Chain.BASE: 8453,
    Chain.BSC: 56,
    Chain.AVALANCHE: 43114,
}
