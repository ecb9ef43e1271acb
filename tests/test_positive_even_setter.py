"""
Tests for the in-process PositiveEvenSetter registry.

Тесты: деплой, установка значения, ревёрты, порядок проверок,
атомарность, снапшоты, конкурентные вызовы.
"""

import threading

import pytest

from even_setter.registry import (
    PositiveEvenSetter,
    RegistrySnapshot,
    OwnableUnauthorizedAccount,
    SetPositiveNumberToZero,
    SetEvenToOddNumber,
    PositiveEvenSet,
    OwnershipTransferred,
    check_positive_even,
    check_uint256,
)
from config import INITIAL_POSITIVE_EVEN, UINT256_MAX

from tests.conftest import DEPLOYER, USER, OTHER


def assert_invariant(registry):
    assert registry.positive_even > 0
    assert registry.positive_even % 2 == 0


# ============================================================
# Deployment
# ============================================================

class TestDeployment:

    def test_deployer_is_owner(self, registry):
        """Деплоер становится владельцем."""
        assert registry.owner == DEPLOYER

    def test_initial_value_is_two(self, registry):
        assert registry.positive_even == 2
        assert registry.positive_even == INITIAL_POSITIVE_EVEN

    def test_value_alias(self, registry):
        assert registry.value == registry.positive_even

    def test_no_events_on_construction(self, registry):
        assert registry.events == ()

    def test_lowercase_deployer_is_checksummed(self):
        registry = PositiveEvenSetter(USER.lower())
        assert registry.owner == USER

    def test_invalid_deployer(self):
        with pytest.raises(ValueError):
            PositiveEvenSetter("not-an-address")


# ============================================================
# setPositiveEven
# ============================================================

class TestSetPositiveEven:

    def test_sets_value(self, registry):
        event = registry.set_positive_even(DEPLOYER, 4)

        assert registry.positive_even == 4
        assert event == PositiveEvenSet(previous=2, new=4)
        assert registry.events == (PositiveEvenSet(2, 4),)

    def test_set_value_alias(self, registry):
        registry.set_value(DEPLOYER, 8)
        assert registry.value == 8

    def test_large_even_value(self, registry):
        registry.set_positive_even(DEPLOYER, UINT256_MAX - 1)
        assert registry.positive_even == UINT256_MAX - 1

    def test_same_value_twice_emits_both_times(self, registry):
        """Повторная запись того же значения не игнорируется."""
        registry.set_positive_even(DEPLOYER, 6)
        event = registry.set_positive_even(DEPLOYER, 6)

        assert event == PositiveEvenSet(6, 6)
        assert registry.events_of(PositiveEvenSet) == [
            PositiveEvenSet(2, 6),
            PositiveEvenSet(6, 6),
        ]

    def test_caller_case_insensitive(self, registry):
        registry.set_positive_even(DEPLOYER.lower(), 10)
        assert registry.positive_even == 10

    def test_zero_reverts(self, registry):
        with pytest.raises(SetPositiveNumberToZero) as exc:
            registry.set_positive_even(DEPLOYER, 0)

        assert exc.value.payload == ()
        assert registry.positive_even == 2
        assert registry.events == ()

    def test_odd_reverts_with_value(self, registry):
        with pytest.raises(SetEvenToOddNumber) as exc:
            registry.set_positive_even(DEPLOYER, 3)

        assert exc.value.value == 3
        assert registry.positive_even == 2

    def test_odd_one_reverts(self, registry):
        with pytest.raises(SetEvenToOddNumber) as exc:
            registry.set_positive_even(DEPLOYER, 1)
        assert exc.value == SetEvenToOddNumber(1)

    def test_non_owner_reverts(self, registry):
        with pytest.raises(OwnableUnauthorizedAccount) as exc:
            registry.set_positive_even(USER, 4)

        assert exc.value.account == USER
        assert registry.positive_even == 2
        assert registry.events == ()

    def test_access_check_precedes_odd_check(self, registry):
        """Не-владелец с нечётным значением получает Unauthorized, а не OddValue."""
        with pytest.raises(OwnableUnauthorizedAccount):
            registry.set_positive_even(USER, 3)

    def test_access_check_precedes_zero_check(self, registry):
        with pytest.raises(OwnableUnauthorizedAccount):
            registry.set_positive_even(USER, 0)

    @pytest.mark.parametrize("bad", [-2, UINT256_MAX + 1])
    def test_out_of_uint256_range(self, registry, bad):
        with pytest.raises(ValueError):
            registry.set_positive_even(DEPLOYER, bad)
        assert registry.positive_even == 2

    @pytest.mark.parametrize("bad", [4.0, "4", True, None])
    def test_non_integer_rejected(self, registry, bad):
        with pytest.raises(TypeError):
            registry.set_positive_even(DEPLOYER, bad)

    def test_argument_check_precedes_access_check(self, registry):
        """Невалидный аргумент отсекается ещё до вызова (как ABI encoder)."""
        with pytest.raises(ValueError):
            registry.set_positive_even(USER, -1)

    def test_invariant_holds_across_mixed_calls(self, registry):
        for caller, value in [
            (DEPLOYER, 4), (DEPLOYER, 0), (USER, 8), (DEPLOYER, 7),
            (DEPLOYER, 100), (OTHER, 2), (DEPLOYER, 2),
        ]:
            try:
                registry.set_positive_even(caller, value)
            except (OwnableUnauthorizedAccount, SetPositiveNumberToZero, SetEvenToOddNumber):
                pass
            assert_invariant(registry)

        assert registry.positive_even == 2
        assert [e.new for e in registry.events_of(PositiveEvenSet)] == [4, 100, 2]


# ============================================================
# Validation helpers
# ============================================================

class TestValidationHelpers:

    def test_check_positive_even_accepts_even(self):
        check_positive_even(2)
        check_positive_even(2**255)

    def test_zero_checked_before_parity(self):
        with pytest.raises(SetPositiveNumberToZero):
            check_positive_even(0)

    def test_check_uint256_returns_value(self):
        assert check_uint256(42) == 42
        assert check_uint256(0) == 0
        assert check_uint256(UINT256_MAX) == UINT256_MAX


# ============================================================
# Ownership through the registry
# ============================================================

class TestOwnership:

    def test_transfer_then_new_owner_sets(self, registry):
        event = registry.transfer_ownership(DEPLOYER, USER)

        assert event == OwnershipTransferred(DEPLOYER, USER)
        assert registry.owner == USER

        registry.set_positive_even(USER, 12)
        assert registry.positive_even == 12

        with pytest.raises(OwnableUnauthorizedAccount) as exc:
            registry.set_positive_even(DEPLOYER, 14)
        assert exc.value.account == DEPLOYER

    def test_renounce_locks_setter(self, registry):
        registry.renounce_ownership(DEPLOYER)

        with pytest.raises(OwnableUnauthorizedAccount):
            registry.set_positive_even(DEPLOYER, 4)
        assert registry.positive_even == 2

    def test_events_in_emission_order(self, registry):
        registry.set_positive_even(DEPLOYER, 4)
        registry.transfer_ownership(DEPLOYER, USER)
        registry.set_positive_even(USER, 6)

        assert registry.events == (
            PositiveEvenSet(2, 4),
            OwnershipTransferred(DEPLOYER, USER),
            PositiveEvenSet(4, 6),
        )
        assert registry.events_of(OwnershipTransferred) == [OwnershipTransferred(DEPLOYER, USER)]


# ============================================================
# Snapshots
# ============================================================

class TestSnapshots:

    def test_restore_rolls_back_value_owner_and_events(self, registry):
        snap = registry.snapshot()

        registry.set_positive_even(DEPLOYER, 4)
        registry.transfer_ownership(DEPLOYER, USER)

        registry.restore(snap)

        assert registry.positive_even == 2
        assert registry.owner == DEPLOYER
        assert registry.events == ()

    def test_snapshot_fields(self, registry):
        registry.set_positive_even(DEPLOYER, 4)
        assert registry.snapshot() == RegistrySnapshot(
            owner=DEPLOYER, positive_even=4, event_count=1
        )

    def test_restore_same_snapshot_repeatedly(self, registry):
        """Как takeSnapshot().restore() в afterEach."""
        snap = registry.snapshot()
        for value in (4, 6, 8):
            registry.set_positive_even(DEPLOYER, value)
            registry.restore(snap)
            assert registry.positive_even == 2

    def test_restore_snapshot_ahead_of_log(self, registry):
        registry.set_positive_even(DEPLOYER, 4)
        snap = registry.snapshot()
        registry.restore(PositiveEvenSetter(DEPLOYER).snapshot())

        with pytest.raises(ValueError):
            registry.restore(snap)

    @pytest.mark.parametrize("value", [0, 3])
    def test_restore_rejects_invalid_value(self, registry, value):
        """Снапшот - не вызов контракта: ValueError, а не ревёрт."""
        with pytest.raises(ValueError, match="not positive even"):
            registry.restore(RegistrySnapshot(owner=DEPLOYER, positive_even=value, event_count=0))
        assert registry.positive_even == 2


# ============================================================
# Concurrency
# ============================================================

class TestConcurrency:

    def test_concurrent_setters_serialized(self, registry):
        """Каждое событие видит post-state предыдущего."""
        values = [2 * i for i in range(1, 51)]
        barrier = threading.Barrier(len(values))

        def worker(v):
            barrier.wait()
            registry.set_positive_even(DEPLOYER, v)

        threads = [threading.Thread(target=worker, args=(v,)) for v in values]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        events = registry.events_of(PositiveEvenSet)
        assert len(events) == len(values)
        assert events[0].previous == 2
        for prev, cur in zip(events, events[1:]):
            assert cur.previous == prev.new
        assert registry.positive_even == events[-1].new
        assert sorted(e.new for e in events) == values
