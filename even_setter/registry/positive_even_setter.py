"""
PositiveEvenSetter registry

Владелец хранит одно значение - строго положительное чётное число.

Invariant: positive_even > 0 and positive_even % 2 == 0 in every observable
state. The only write path is `set_positive_even`, executed by the owner.

Check order of `set_positive_even` (observable, do not reorder):
1. argument type / uint256 range  -> TypeError / ValueError
2. caller is the owner            -> OwnableUnauthorizedAccount(caller)
3. value != 0                     -> SetPositiveNumberToZero()
4. value is even                  -> SetEvenToOddNumber(value)

Every call is all-or-nothing: validation completes before any write, and
calls are serialized by a lock, so a failed call leaves owner, value and
the event log untouched.
"""

import logging
import threading
from dataclasses import dataclass
from typing import List, Tuple, Type, TypeVar

from config import INITIAL_POSITIVE_EVEN, UINT256_MAX
from .errors import SetEvenToOddNumber, SetPositiveNumberToZero
from .events import OwnershipTransferred, PositiveEvenSet
from .ownable import Ownable

logger = logging.getLogger(__name__)

E = TypeVar("E")


def check_uint256(value) -> int:
    """Reject what the ABI encoder would reject before the call is ever made."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"uint256 expected, got {type(value).__name__}")
    if value < 0 or value > UINT256_MAX:
        raise ValueError(f"Value out of uint256 range: {value}")
    return value


def check_positive_even(value: int):
    """
    Validate a new value. Zero is checked before parity.

    Raises:
        SetPositiveNumberToZero: value == 0
        SetEvenToOddNumber: value is odd
    """
    if value == 0:
        raise SetPositiveNumberToZero()
    if value % 2 != 0:
        raise SetEvenToOddNumber(value)


@dataclass(frozen=True)
class RegistrySnapshot:
    """Captured state for snapshot / restore."""
    owner: str
    positive_even: int
    event_count: int


class PositiveEvenSetter:
    """
    In-process PositiveEvenSetter.

    Usage:
        registry = PositiveEvenSetter(deployer)
        registry.set_positive_even(deployer, 4)   # -> PositiveEvenSet(2, 4)
        registry.positive_even                    # 4
    """

    def __init__(self, deployer: str):
        self._lock = threading.Lock()
        self._events: List[object] = []
        self._ownable = Ownable(deployer, emit=self._events.append)
        self._positive_even = INITIAL_POSITIVE_EVEN

        logger.debug(f"PositiveEvenSetter created, owner={self._ownable.owner}")

    # ── Reads ─────────────────────────────────────────────────────────

    @property
    def owner(self) -> str:
        return self._ownable.owner

    @property
    def positive_even(self) -> int:
        return self._positive_even

    @property
    def value(self) -> int:
        return self._positive_even

    @property
    def events(self) -> Tuple[object, ...]:
        """Все события в порядке эмиссии."""
        with self._lock:
            return tuple(self._events)

    def events_of(self, event_type: Type[E]) -> List[E]:
        return [e for e in self.events if isinstance(e, event_type)]

    # ── Writes ────────────────────────────────────────────────────────

    def set_positive_even(self, caller: str, new_value: int) -> PositiveEvenSet:
        """
        Установка нового значения (только владелец).

        Args:
            caller: Адрес вызывающего
            new_value: Новое положительное чётное число

        Returns:
            PositiveEvenSet(previous, new)
        """
        check_uint256(new_value)

        with self._lock:
            try:
                self._ownable.check_owner(caller)
                check_positive_even(new_value)
            except Exception as e:
                logger.warning(f"setPositiveEven({new_value}) by {caller} reverted: {e}")
                raise

            event = PositiveEvenSet(previous=self._positive_even, new=new_value)
            self._positive_even = new_value
            self._events.append(event)

        logger.info(f"Positive even set: {event.previous} -> {event.new}")
        return event

    # Operation names of the registry interface
    set_value = set_positive_even

    def transfer_ownership(self, caller: str, new_owner: str) -> OwnershipTransferred:
        with self._lock:
            return self._ownable.transfer_ownership(caller, new_owner)

    def renounce_ownership(self, caller: str) -> OwnershipTransferred:
        with self._lock:
            return self._ownable.renounce_ownership(caller)

    # ── Snapshots ─────────────────────────────────────────────────────

    def snapshot(self) -> RegistrySnapshot:
        with self._lock:
            snap = RegistrySnapshot(
                owner=self._ownable.owner,
                positive_even=self._positive_even,
                event_count=len(self._events),
            )
        logger.debug(f"Snapshot taken: {snap}")
        return snap

    def restore(self, snap: RegistrySnapshot):
        """
        Вернуть состояние на момент снапшота.

        Events emitted after the snapshot are dropped. Snapshots ahead of the
        event log, or holding a value outside the invariant, are rejected.
        """
        if snap.positive_even <= 0 or snap.positive_even % 2 != 0:
            raise ValueError(f"Snapshot value is not positive even: {snap.positive_even}")

        with self._lock:
            if snap.event_count > len(self._events):
                raise ValueError(
                    f"Snapshot is ahead of the event log ({snap.event_count} > {len(self._events)})"
                )
            self._ownable.restore(snap.owner)
            self._positive_even = snap.positive_even
            del self._events[snap.event_count:]
        logger.debug(f"Snapshot restored: {snap}")
