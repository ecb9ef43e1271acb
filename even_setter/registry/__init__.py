"""
In-process PositiveEvenSetter registry.

Same errors and events as the deployed contract.
"""

from .errors import (
    RegistryError,
    OwnableUnauthorizedAccount,
    OwnableInvalidOwner,
    SetPositiveNumberToZero,
    SetEvenToOddNumber,
    UnknownRevertError,
    decode_revert_data,
)
from .events import PositiveEvenSet, OwnershipTransferred
from .ownable import Ownable
from .positive_even_setter import (
    PositiveEvenSetter,
    RegistrySnapshot,
    check_positive_even,
    check_uint256,
)

__all__ = [
    'RegistryError',
    'OwnableUnauthorizedAccount',
    'OwnableInvalidOwner',
    'SetPositiveNumberToZero',
    'SetEvenToOddNumber',
    'UnknownRevertError',
    'decode_revert_data',
    'PositiveEvenSet',
    'OwnershipTransferred',
    'Ownable',
    'PositiveEvenSetter',
    'RegistrySnapshot',
    'check_positive_even',
    'check_uint256',
]
