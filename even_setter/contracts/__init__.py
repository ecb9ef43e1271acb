"""
PositiveEvenSetter web3 binding.
"""

from .abis import POSITIVE_EVEN_SETTER_ABI
from .positive_even_setter import (
    PositiveEvenSetterContract,
    TransactionFailedError,
    TxResult,
    load_artifact,
    send_transaction,
)

__all__ = [
    'POSITIVE_EVEN_SETTER_ABI',
    'PositiveEvenSetterContract',
    'TransactionFailedError',
    'TxResult',
    'load_artifact',
    'send_transaction',
]
