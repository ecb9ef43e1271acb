"""
Events emitted by the PositiveEvenSetter contract.

The same dataclasses are produced by the in-process registry and parsed from
transaction receipts, so tests can compare them directly.
"""

from dataclasses import dataclass

from web3 import Web3


def event_topic(signature: str) -> bytes:
    """topic0 of an event: keccak256(signature)."""
    return bytes(Web3.keccak(text=signature))


@dataclass(frozen=True)
class PositiveEvenSet:
    """Значение изменено: (предыдущее, новое)."""
    previous: int
    new: int

    name = "PositiveEvenSet"
    signature = "PositiveEvenSet(uint256,uint256)"

    @property
    def topic(self) -> bytes:
        return event_topic(self.signature)


@dataclass(frozen=True)
class OwnershipTransferred:
    """Владелец изменён (renounce = переход на нулевой адрес)."""
    previous_owner: str
    new_owner: str

    name = "OwnershipTransferred"
    signature = "OwnershipTransferred(address,address)"

    @property
    def topic(self) -> bytes:
        return event_topic(self.signature)
