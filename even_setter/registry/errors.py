"""
Revert taxonomy of the PositiveEvenSetter contract.

Every error carries the Solidity signature it corresponds to, so the same
exception types are raised by the in-process registry and decoded from the
revert data of the deployed contract.

Ошибки контракта PositiveEvenSetter + Ownable (OpenZeppelin v5).
"""

from typing import Dict, Tuple, Type

from eth_abi import decode, encode
from web3 import Web3


def error_selector(signature: str) -> bytes:
    """First 4 bytes of keccak256(signature)."""
    return bytes(Web3.keccak(text=signature)[:4])


class RegistryError(Exception):
    """
    Base class for every revert raised by the registry.

    Subclasses declare `signature` and `arg_types`; the payload is kept in
    `payload` in declaration order.
    """

    signature: str = ""
    arg_types: Tuple[str, ...] = ()

    def __init__(self, *payload):
        if len(payload) != len(self.arg_types):
            raise TypeError(
                f"{type(self).__name__} expects {len(self.arg_types)} argument(s), got {len(payload)}"
            )
        self.payload = tuple(payload)
        super().__init__(self._message())

    @property
    def name(self) -> str:
        return self.signature.split("(", 1)[0]

    @property
    def selector(self) -> bytes:
        return error_selector(self.signature)

    def _message(self) -> str:
        if not self.payload:
            return f"{self.name}()"
        args = ", ".join(str(p) for p in self.payload)
        return f"{self.name}({args})"

    def encode(self) -> bytes:
        """Revert data as the EVM returns it: selector || abi.encode(payload)."""
        return self.selector + encode(list(self.arg_types), list(self.payload))

    def __eq__(self, other):
        return type(self) is type(other) and self.payload == other.payload

    def __hash__(self):
        return hash((type(self), self.payload))


class OwnableUnauthorizedAccount(RegistryError):
    """Caller is not the owner."""

    signature = "OwnableUnauthorizedAccount(address)"
    arg_types = ("address",)

    def __init__(self, account: str):
        super().__init__(Web3.to_checksum_address(account))

    @property
    def account(self) -> str:
        return self.payload[0]


class OwnableInvalidOwner(RegistryError):
    """Ownership cannot be handed to the zero address."""

    signature = "OwnableInvalidOwner(address)"
    arg_types = ("address",)

    def __init__(self, owner: str):
        super().__init__(Web3.to_checksum_address(owner))

    @property
    def owner(self) -> str:
        return self.payload[0]


class SetPositiveNumberToZero(RegistryError):
    signature = "SetPositiveNumberToZero()"
    arg_types = ()

    def __init__(self):
        super().__init__()


class SetEvenToOddNumber(RegistryError):
    signature = "SetEvenToOddNumber(uint256)"
    arg_types = ("uint256",)

    def __init__(self, value: int):
        super().__init__(value)

    @property
    def value(self) -> int:
        return self.payload[0]


class UnknownRevertError(Exception):
    """Revert data that does not match any known selector."""

    def __init__(self, data: bytes):
        self.data = bytes(data)
        super().__init__(f"Unknown revert data: 0x{self.data.hex()}")


KNOWN_ERRORS: Dict[bytes, Type[RegistryError]] = {
    error_selector(cls.signature): cls
    for cls in (
        OwnableUnauthorizedAccount,
        OwnableInvalidOwner,
        SetPositiveNumberToZero,
        SetEvenToOddNumber,
    )
}


def decode_revert_data(data) -> RegistryError:
    """
    Decode revert data returned by the contract into a RegistryError.

    Args:
        data: Raw bytes or a 0x-prefixed hex string

    Returns:
        Instance of the matching RegistryError subclass

    Raises:
        UnknownRevertError: selector is unknown or the payload is malformed
    """
    if isinstance(data, str):
        data = bytes.fromhex(data[2:] if data.startswith("0x") else data)
    data = bytes(data)

    if len(data) < 4:
        raise UnknownRevertError(data)

    cls = KNOWN_ERRORS.get(data[:4])
    if cls is None:
        raise UnknownRevertError(data)

    try:
        payload = decode(list(cls.arg_types), data[4:]) if cls.arg_types else ()
    except Exception as e:
        raise UnknownRevertError(data) from e

    return cls(*payload)
