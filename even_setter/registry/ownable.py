"""
Single-owner access control.

Composable capability modelled on OpenZeppelin's Ownable (v5): the holder
keeps an `Ownable` and routes every privileged call through `check_owner`.
Events are handed to the `emit` callback so they end up in the holder's log.
"""

import logging
from typing import Callable, Optional

from web3 import Web3

from config import ZERO_ADDRESS
from .errors import OwnableInvalidOwner, OwnableUnauthorizedAccount
from .events import OwnershipTransferred

logger = logging.getLogger(__name__)


def normalize_address(address: str) -> str:
    """Checksum an address. Raises ValueError for malformed input."""
    try:
        return Web3.to_checksum_address(address)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid address: {address!r}") from e


class Ownable:
    """
    Owner storage and checks.

    Not thread-safe on its own: the holder serializes calls.
    """

    def __init__(
        self,
        initial_owner: str,
        emit: Optional[Callable[[OwnershipTransferred], None]] = None
    ):
        initial_owner = normalize_address(initial_owner)
        if initial_owner == ZERO_ADDRESS:
            raise OwnableInvalidOwner(ZERO_ADDRESS)

        self._owner = initial_owner
        self._emit = emit or (lambda event: None)

    @property
    def owner(self) -> str:
        return self._owner

    def check_owner(self, caller: str):
        """Revert with OwnableUnauthorizedAccount(caller) unless caller is the owner."""
        caller = normalize_address(caller)
        if caller != self._owner:
            raise OwnableUnauthorizedAccount(caller)

    def transfer_ownership(self, caller: str, new_owner: str) -> OwnershipTransferred:
        """
        Передача владения.

        Args:
            caller: Адрес вызывающего (должен быть владельцем)
            new_owner: Новый владелец (не нулевой адрес)

        Returns:
            OwnershipTransferred event
        """
        self.check_owner(caller)

        new_owner = normalize_address(new_owner)
        if new_owner == ZERO_ADDRESS:
            raise OwnableInvalidOwner(ZERO_ADDRESS)

        return self._transfer(new_owner)

    def renounce_ownership(self, caller: str) -> OwnershipTransferred:
        """Leave the holder without an owner. Irreversible."""
        self.check_owner(caller)
        return self._transfer(ZERO_ADDRESS)

    def restore(self, owner: str):
        """Reinstate a previously captured owner (snapshot restore). Emits nothing."""
        self._owner = normalize_address(owner)

    def _transfer(self, new_owner: str) -> OwnershipTransferred:
        event = OwnershipTransferred(previous_owner=self._owner, new_owner=new_owner)
        self._owner = new_owner
        self._emit(event)
        logger.info(f"Ownership transferred: {event.previous_owner} -> {event.new_owner}")
        return event
