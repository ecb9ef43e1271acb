"""
PositiveEvenSetter on-chain binding

Работа с задеплоенным контрактом PositiveEvenSetter через web3:
чтение owner / positiveEven, установка значения, управление владением, деплой.

Custom-error reverts are decoded into the same exception types the
in-process registry raises (even_setter.registry.errors).
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple

from eth_account.signers.local import LocalAccount
from web3 import Web3
from web3.exceptions import ContractCustomError

from config import (
    DEFAULT_GAS_LIMIT_DEPLOY,
    DEFAULT_GAS_LIMIT_OWNERSHIP,
    DEFAULT_GAS_LIMIT_SET,
    DEFAULT_TX_TIMEOUT,
)
from .abis import POSITIVE_EVEN_SETTER_ABI
from ..registry.errors import OwnableUnauthorizedAccount, decode_revert_data
from ..registry.events import OwnershipTransferred, PositiveEvenSet
from ..registry.positive_even_setter import check_positive_even, check_uint256
from ..utils import NonceManager, get_gas_params

logger = logging.getLogger(__name__)


class TransactionFailedError(RuntimeError):
    """Транзакция замайнена со status != 1."""

    def __init__(self, action: str, tx_hash: str, receipt: dict = None):
        self.action = action
        self.tx_hash = tx_hash
        self.receipt = receipt
        super().__init__(f"{action} transaction reverted! TX: {tx_hash}")


@dataclass
class TxResult:
    """Результат транзакции."""
    tx_hash: str
    gas_used: int
    block_number: Optional[int]
    event: Optional[object] = None


def _hex(tx_hash) -> str:
    h = tx_hash.hex() if hasattr(tx_hash, 'hex') else str(tx_hash)
    return h if h.startswith('0x') else '0x' + h


def _revert_data(error: ContractCustomError):
    """Extract raw revert data from a web3 custom-error exception."""
    data = getattr(error, 'data', None)
    if not data and error.args:
        data = error.args[0]
    return data


def load_artifact(path) -> Tuple[list, str]:
    """
    Чтение артефакта компиляции (Hardhat или Foundry).

    Hardhat: {"abi": [...], "bytecode": "0x..."}
    Foundry: {"abi": [...], "bytecode": {"object": "0x..."}}

    Returns:
        (abi, bytecode)
    """
    with open(Path(path), 'r', encoding='utf-8') as f:
        artifact = json.load(f)

    abi = artifact.get('abi')
    bytecode = artifact.get('bytecode')
    if isinstance(bytecode, dict):
        bytecode = bytecode.get('object')

    if not abi or not bytecode:
        raise ValueError(f"Artifact {path} has no abi/bytecode")
    if not bytecode.startswith('0x'):
        bytecode = '0x' + bytecode

    return abi, bytecode


def send_transaction(
    w3: Web3,
    account: LocalAccount,
    tx_source,
    gas: int,
    action: str,
    timeout: int = DEFAULT_TX_TIMEOUT,
    nonce_manager: NonceManager = None
):
    """
    Build, sign, send and wait for one transaction.

    Args:
        tx_source: Anything with build_transaction() (contract function or constructor)

    Returns:
        (receipt, tx_hash_hex)
    """
    nonce = nonce_manager.get_next_nonce() if nonce_manager else \
            w3.eth.get_transaction_count(account.address, 'pending')

    try:
        tx_params = {
            'from': account.address,
            'nonce': nonce,
            'gas': gas,
        }
        tx_params.update(get_gas_params(w3))
        tx = tx_source.build_transaction(tx_params)

        signed = account.sign_transaction(tx)
        tx_hash = w3.eth.send_raw_transaction(signed.raw_transaction)
    except Exception:
        if nonce_manager:
            nonce_manager.release_nonce(nonce)
        raise

    # TX left the process: nonce is consumed whether it is mined, reverted or times out
    if nonce_manager:
        nonce_manager.confirm_transaction(nonce)

    receipt = w3.eth.wait_for_transaction_receipt(tx_hash, timeout=timeout)
    if receipt['status'] != 1:
        raise TransactionFailedError(action, _hex(tx_hash), receipt)

    return receipt, _hex(tx_hash)


class PositiveEvenSetterContract:
    """
    Класс для работы с задеплоенным PositiveEvenSetter.

    Позволяет:
    - Читать owner и positiveEven
    - Устанавливать новое значение (с локальной предпроверкой)
    - Передавать / отзывать владение
    - Деплоить контракт из артефакта
    """

    def __init__(
        self,
        w3: Web3,
        address: str,
        account: LocalAccount = None,
        nonce_manager: NonceManager = None,
        abi: list = None
    ):
        self.w3 = w3
        self.account = account
        self.nonce_manager = nonce_manager
        self.address = Web3.to_checksum_address(address)
        self.contract = w3.eth.contract(
            address=self.address,
            abi=abi or POSITIVE_EVEN_SETTER_ABI
        )

    # ── Reads ─────────────────────────────────────────────────────────

    def owner(self) -> str:
        return Web3.to_checksum_address(self.contract.functions.owner().call())

    def positive_even(self) -> int:
        return self.contract.functions.positiveEven().call()

    # ── Writes ────────────────────────────────────────────────────────

    def set_positive_even(
        self,
        new_value: int,
        timeout: int = DEFAULT_TX_TIMEOUT,
        preflight: bool = True
    ) -> TxResult:
        """
        Установка нового значения.

        Args:
            new_value: Положительное чётное число
            timeout: Таймаут ожидания receipt
            preflight: Проверить owner / значение локально до отправки

        Returns:
            TxResult с распарсенным PositiveEvenSet
        """
        account = self._require_account()
        check_uint256(new_value)

        if preflight:
            sender = Web3.to_checksum_address(account.address)
            if self.owner() != sender:
                raise OwnableUnauthorizedAccount(sender)
            check_positive_even(new_value)

        fn = self.contract.functions.setPositiveEven(new_value)
        receipt, tx_hash = self._transact(fn, DEFAULT_GAS_LIMIT_SET, "setPositiveEven", timeout)

        event = None
        for log in self._process_events("PositiveEvenSet", receipt):
            args = log['args']
            event = PositiveEvenSet(
                previous=args['previousPositiveEven'],
                new=args['newPositiveEven']
            )

        if event is not None:
            logger.info(f"PositiveEvenSet: {event.previous} -> {event.new} (TX {tx_hash})")
        return self._result(tx_hash, receipt, event)

    def transfer_ownership(self, new_owner: str, timeout: int = DEFAULT_TX_TIMEOUT) -> TxResult:
        """Передача владения новому адресу."""
        self._require_account()
        fn = self.contract.functions.transferOwnership(Web3.to_checksum_address(new_owner))
        receipt, tx_hash = self._transact(fn, DEFAULT_GAS_LIMIT_OWNERSHIP, "transferOwnership", timeout)
        return self._result(tx_hash, receipt, self._ownership_event(receipt))

    def renounce_ownership(self, timeout: int = DEFAULT_TX_TIMEOUT) -> TxResult:
        """Отказ от владения. Необратимо."""
        self._require_account()
        fn = self.contract.functions.renounceOwnership()
        receipt, tx_hash = self._transact(fn, DEFAULT_GAS_LIMIT_OWNERSHIP, "renounceOwnership", timeout)
        return self._result(tx_hash, receipt, self._ownership_event(receipt))

    # ── Deployment ────────────────────────────────────────────────────

    @classmethod
    def deploy(
        cls,
        w3: Web3,
        account: LocalAccount,
        bytecode: str,
        abi: list = None,
        nonce_manager: NonceManager = None,
        timeout: int = DEFAULT_TX_TIMEOUT
    ) -> 'PositiveEvenSetterContract':
        """
        Деплой PositiveEvenSetter (конструктор без аргументов).

        Returns:
            Экземпляр, привязанный к новому адресу
        """
        abi = abi or POSITIVE_EVEN_SETTER_ABI
        factory = w3.eth.contract(abi=abi, bytecode=bytecode)

        receipt, tx_hash = send_transaction(
            w3, account, factory.constructor(), DEFAULT_GAS_LIMIT_DEPLOY, "deploy",
            timeout, nonce_manager
        )

        address = receipt['contractAddress']
        logger.info(f"PositiveEvenSetter deployed to {address} (TX {tx_hash})")
        return cls(w3, address, account=account, nonce_manager=nonce_manager, abi=abi)

    # ── Internals ─────────────────────────────────────────────────────

    def _require_account(self) -> LocalAccount:
        if not self.account:
            raise ValueError("Account not configured")
        return self.account

    def _simulate(self, fn):
        """eth_call from the sender; custom-error reverts become RegistryError."""
        try:
            fn.call({'from': self.account.address})
        except ContractCustomError as e:
            raise decode_revert_data(_revert_data(e)) from e

    def _transact(self, fn, gas: int, action: str, timeout: int):
        """Simulate, then send. Returns (receipt, tx_hash_hex)."""
        self._simulate(fn)
        return send_transaction(
            self.w3, self.account, fn, gas, action, timeout, self.nonce_manager
        )

    def _process_events(self, name: str, receipt) -> List[dict]:
        try:
            return list(getattr(self.contract.events, name)().process_receipt(receipt))
        except Exception as e:
            logger.debug(f"Failed to parse {name} event: {e}")
            return []

    def _ownership_event(self, receipt) -> Optional[OwnershipTransferred]:
        event = None
        for log in self._process_events("OwnershipTransferred", receipt):
            args = log['args']
            event = OwnershipTransferred(
                previous_owner=Web3.to_checksum_address(args['previousOwner']),
                new_owner=Web3.to_checksum_address(args['newOwner'])
            )
        if event is not None:
            logger.info(f"OwnershipTransferred: {event.previous_owner} -> {event.new_owner}")
        return event

    @staticmethod
    def _result(tx_hash: str, receipt, event) -> TxResult:
        return TxResult(
            tx_hash=tx_hash,
            gas_used=receipt.get('gasUsed', 0),
            block_number=receipt.get('blockNumber'),
            event=event
        )
