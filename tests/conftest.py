"""
Shared fixtures for all tests.
"""

import pytest
from unittest.mock import Mock, MagicMock

from even_setter.registry import PositiveEvenSetter


# Тестовые адреса
DEPLOYER = "0x1234567890123456789012345678901234567890"
USER = "0x9999999999999999999999999999999999999999"
OTHER = "0x1111111111111111111111111111111111111111"
CONTRACT = "0x5555555555555555555555555555555555555555"
ZERO = "0x0000000000000000000000000000000000000000"


class MockWeb3:
    """Переиспользуемый мок Web3 для тестов."""

    def __init__(self, initial_nonce: int = 100):
        self._nonce = initial_nonce
        self.eth = MagicMock()
        self.eth.get_transaction_count = MagicMock(return_value=self._nonce)
        self.eth.gas_price = 5_000_000_000  # 5 gwei
        self.eth.chain_id = 31337
        self.eth.send_raw_transaction = MagicMock(return_value=b'\x12\x34' * 16)
        self.eth.wait_for_transaction_receipt = MagicMock(return_value={
            'status': 1,
            'gasUsed': 30_000,
            'blockNumber': 7,
            'logs': [],
            'transactionHash': b'\x12\x34' * 16
        })
        self.eth.contract = MagicMock()

    def set_nonce(self, nonce: int):
        self._nonce = nonce
        self.eth.get_transaction_count.return_value = nonce


@pytest.fixture
def mock_w3():
    """Мок Web3 instance."""
    return MockWeb3()


@pytest.fixture
def mock_account():
    """Мок LocalAccount (владелец контракта)."""
    account = Mock()
    account.address = DEPLOYER
    account.sign_transaction = Mock(return_value=Mock(raw_transaction=b'signed_tx'))
    return account


@pytest.fixture
def mock_receipt_success():
    """Успешный receipt транзакции."""
    return {
        'status': 1,
        'gasUsed': 30_000,
        'logs': [],
        'transactionHash': b'\x12\x34' * 16,
        'blockNumber': 7,
    }


@pytest.fixture
def mock_receipt_fail():
    """Неуспешный receipt транзакции."""
    return {
        'status': 0,
        'gasUsed': 30_000,
        'logs': [],
        'transactionHash': b'\xde\xad' * 16,
        'blockNumber': 7,
    }


@pytest.fixture
def registry():
    """Свежий PositiveEvenSetter, задеплоенный DEPLOYER."""
    return PositiveEvenSetter(DEPLOYER)
