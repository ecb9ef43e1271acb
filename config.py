"""
Configuration for the PositiveEvenSetter registry

Сети, адреса и значения по умолчанию для работы с контрактом PositiveEvenSetter.
Секреты (PRIVATE_KEY, RPC_URL) читаются из .env в main.py.
"""

from dataclasses import dataclass
from typing import Dict


@dataclass
class ChainConfig:
    """Конфигурация сети."""
    chain_id: int
    rpc_url: str
    explorer_url: str
    native_token: str
    name: str = ""


# ============================================================
# CHAIN CONFIGURATIONS
# ============================================================

# Local Hardhat node (npx hardhat node)
HARDHAT = ChainConfig(
    chain_id=31337,
    rpc_url="http://127.0.0.1:8545",
    explorer_url="",
    native_token="ETH",
    name="hardhat",
)

# Local Ganache node (ganache --chain.chainId 1337).
# Anvil uses 31337 by default and is served by the HARDHAT entry.
GANACHE = ChainConfig(
    chain_id=1337,
    rpc_url="http://127.0.0.1:8545",
    explorer_url="",
    native_token="ETH",
    name="ganache",
)

# Sepolia testnet
SEPOLIA = ChainConfig(
    chain_id=11155111,
    rpc_url="https://ethereum-sepolia-rpc.publicnode.com",
    explorer_url="https://sepolia.etherscan.io",
    native_token="SepoliaETH",
    name="sepolia",
)

# Ethereum Mainnet
ETHEREUM = ChainConfig(
    chain_id=1,
    rpc_url="https://eth.llamarpc.com",
    explorer_url="https://etherscan.io",
    native_token="ETH",
    name="ethereum",
)

# Chains without a block explorer (never verified, never slept on)
LOCAL_CHAIN_IDS = {HARDHAT.chain_id, GANACHE.chain_id}


# ============================================================
# REGISTRY CONSTANTS
# ============================================================

# Value stored by the constructor
INITIAL_POSITIVE_EVEN = 2

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"

# uint256 upper bound (setPositiveEven argument type)
UINT256_MAX = 2**256 - 1


# ============================================================
# DEFAULT SETTINGS
# ============================================================

DEFAULT_TX_TIMEOUT = 120  # seconds
DEFAULT_GAS_LIMIT_SET = 100_000
DEFAULT_GAS_LIMIT_OWNERSHIP = 80_000
DEFAULT_GAS_LIMIT_DEPLOY = 1_500_000

# Имена переменных окружения (.env)
ENV_PRIVATE_KEY = "PRIVATE_KEY"
ENV_RPC_URL = "RPC_URL"
ENV_CHAIN_ID = "CHAIN_ID"
ENV_CONTRACT_ADDRESS = "POSITIVE_EVEN_SETTER_ADDRESS"


# ============================================================
# HELPER FUNCTIONS
# ============================================================

CHAINS: Dict[int, ChainConfig] = {
    31337: HARDHAT,
    1337: GANACHE,
    11155111: SEPOLIA,
    1: ETHEREUM,
}


def get_chain_config(chain_id: int) -> ChainConfig:
    """Получение конфигурации по chain_id."""
    if chain_id not in CHAINS:
        raise ValueError(f"Unknown chain_id: {chain_id}")
    return CHAINS[chain_id]


def is_local_chain(chain_id: int) -> bool:
    """Локальная сеть разработки (hardhat / anvil / ganache)."""
    return chain_id in LOCAL_CHAIN_IDS
