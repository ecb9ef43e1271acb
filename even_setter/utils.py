"""
Transaction helpers shared by the contract bindings.

Includes:
- NonceManager: thread-safe nonce allocation for back-to-back transactions
- get_gas_params: EIP-1559 fee fields when the chain supports them, legacy otherwise
"""

import logging
import threading
from typing import Optional

from web3 import Web3

logger = logging.getLogger(__name__)


class NonceManager:
    """
    Thread-safe nonce allocator for one sending account.

    `get_transaction_count('pending')` hands the same nonce to transactions
    sent in quick succession; this class tracks what it has already handed out.

    Usage:
        nonce_mgr = NonceManager(w3, account.address)
        nonce = nonce_mgr.get_next_nonce()
        ...
        nonce_mgr.confirm_transaction(nonce)   # tx left the process
        nonce_mgr.release_nonce(nonce)         # tx was never sent
    """

    def __init__(self, w3: Web3, account_address: str):
        self.w3 = w3
        self.account_address = Web3.to_checksum_address(account_address)
        self._lock = threading.Lock()
        self._current_nonce: Optional[int] = None
        self._pending_nonces: set = set()

    def get_next_nonce(self, force_sync: bool = False) -> int:
        with self._lock:
            if self._current_nonce is None or force_sync:
                chain_nonce = self.w3.eth.get_transaction_count(self.account_address, 'pending')
                # Nonces below the chain nonce are already mined
                self._pending_nonces = {n for n in self._pending_nonces if n >= chain_nonce}
                self._current_nonce = max(self._current_nonce or 0, chain_nonce)
                logger.debug(f"Synced nonce for {self.account_address}: {self._current_nonce}")

            nonce = self._current_nonce
            self._current_nonce += 1
            self._pending_nonces.add(nonce)
            return nonce

    def confirm_transaction(self, nonce: int):
        """Nonce consumed on-chain (mined, even if reverted)."""
        with self._lock:
            self._pending_nonces.discard(nonce)

    def release_nonce(self, nonce: int):
        """Nonce never used; reclaim it if it was the last one handed out."""
        with self._lock:
            self._pending_nonces.discard(nonce)
            if self._current_nonce is not None and nonce == self._current_nonce - 1:
                self._current_nonce = nonce
            logger.debug(f"Released nonce: {nonce}, current: {self._current_nonce}")

    def get_pending_count(self) -> int:
        with self._lock:
            return len(self._pending_nonces)

    def reset(self):
        """Force re-sync on next call."""
        with self._lock:
            self._current_nonce = None
            self._pending_nonces.clear()


def get_gas_params(w3: Web3) -> dict:
    """Параметры газа: EIP-1559 если поддерживается, иначе legacy."""
    try:
        max_priority_fee = w3.eth.max_priority_fee
        base_fee = w3.eth.get_block('latest')['baseFeePerGas']
        return {
            'maxPriorityFeePerGas': max_priority_fee,
            'maxFeePerGas': base_fee * 2 + max_priority_fee,
        }
    except Exception as e:
        logger.debug(f"EIP-1559 fee data unavailable, using legacy gasPrice: {e}")
        return {'gasPrice': w3.eth.gas_price}
