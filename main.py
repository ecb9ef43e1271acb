"""
PositiveEvenSetter CLI

Интерактивная работа с контрактом PositiveEvenSetter:
- чтение owner / positiveEven
- установка нового значения (только владелец)
- передача / отзыв владения
- деплой из артефакта Hardhat / Foundry
- офлайн-симуляция без сети
"""

import logging
import os

from dotenv import load_dotenv
from eth_account import Account
from web3 import Web3

from config import (
    ENV_CHAIN_ID,
    ENV_CONTRACT_ADDRESS,
    ENV_PRIVATE_KEY,
    ENV_RPC_URL,
    HARDHAT,
    get_chain_config,
    is_local_chain,
)
from even_setter.contracts import PositiveEvenSetterContract, load_artifact
from even_setter.registry import PositiveEvenSetter, RegistryError
from even_setter.utils import NonceManager

load_dotenv()


def connect():
    """
    Подключение к сети по .env.

    Returns:
        (w3, account, chain_config) или None если нет PRIVATE_KEY, неизвестен CHAIN_ID или RPC недоступен
    """
    private_key = os.getenv(ENV_PRIVATE_KEY)
    if not private_key:
        print(f"\nERROR: {ENV_PRIVATE_KEY} not found in .env file")
        print(f"Create .env file with: {ENV_PRIVATE_KEY}=0x...")
        return None

    try:
        chain_id = int(os.getenv(ENV_CHAIN_ID, HARDHAT.chain_id))
        chain = get_chain_config(chain_id)
    except ValueError as e:
        print(f"\nERROR: {ENV_CHAIN_ID}: {e}")
        return None
    rpc_url = os.getenv(ENV_RPC_URL, chain.rpc_url)

    w3 = Web3(Web3.HTTPProvider(rpc_url))
    if not w3.is_connected():
        print(f"\nERROR: cannot connect to {rpc_url}")
        return None

    account = Account.from_key(private_key)
    print(f"\nNetwork: {chain.name} ({chain_id})")
    print(f"Account: {account.address}")
    return w3, account, chain


def attach(w3, account) -> PositiveEvenSetterContract:
    """Адрес контракта из .env или ввод вручную."""
    address = os.getenv(ENV_CONTRACT_ADDRESS) or input("Адрес PositiveEvenSetter: ").strip()
    return PositiveEvenSetterContract(
        w3,
        address,
        account=account,
        nonce_manager=NonceManager(w3, account.address)
    )


def show_state(setter: PositiveEvenSetterContract):
    print(f"\nContract:     {setter.address}")
    print(f"Owner:        {setter.owner()}")
    print(f"PositiveEven: {setter.positive_even()}")


def set_value_interactive(setter: PositiveEvenSetterContract):
    while True:
        try:
            new_value = int(input("\nНовое значение (положительное чётное): "))
            break
        except ValueError:
            print("Введите целое число")

    try:
        result = setter.set_positive_even(new_value)
    except RegistryError as e:
        print(f"\n REVERT: {e}")
        return

    print(f"\n SUCCESS! TX: {result.tx_hash}")
    print(f"Gas used: {result.gas_used}")
    if result.event:
        print(f"PositiveEvenSet: {result.event.previous} -> {result.event.new}")


def transfer_ownership_interactive(setter: PositiveEvenSetterContract):
    new_owner = input("\nАдрес нового владельца: ").strip()
    try:
        result = setter.transfer_ownership(new_owner)
    except RegistryError as e:
        print(f"\n REVERT: {e}")
        return
    except ValueError as e:
        print(f"\n Ошибка ввода: {e}")
        return
    print(f"\n SUCCESS! TX: {result.tx_hash}")


def renounce_ownership_interactive(setter: PositiveEvenSetterContract):
    confirm = input("\nОтказаться от владения НАВСЕГДА? (yes/no): ")
    if confirm.lower() != "yes":
        print("Отменено")
        return
    try:
        result = setter.renounce_ownership()
    except RegistryError as e:
        print(f"\n REVERT: {e}")
        return
    print(f"\n SUCCESS! TX: {result.tx_hash}")


def deploy_interactive(w3, account, chain):
    path = input("\nПуть к артефакту (artifacts/.../PositiveEvenSetter.json): ").strip()
    try:
        abi, bytecode = load_artifact(path)
    except (OSError, ValueError) as e:
        print(f"\n Ошибка артефакта: {e}")
        return

    setter = PositiveEvenSetterContract.deploy(
        w3, account, bytecode, abi=abi,
        nonce_manager=NonceManager(w3, account.address)
    )
    print(f"\n`positiveEvenSetter` is deployed to {setter.address}.")

    if not is_local_chain(chain.chain_id) and chain.explorer_url:
        print(f"Explorer: {chain.explorer_url}/address/{setter.address}")


def simulate():
    """Офлайн-симуляция: тот же контракт, без сети."""
    deployer = input("\nАдрес деплоера [0x...01]: ").strip() or "0x" + "00" * 19 + "01"
    registry = PositiveEvenSetter(deployer)
    print(f"Owner: {registry.owner}, positiveEven: {registry.positive_even}")

    while True:
        raw = input("\n<caller> <value> (Enter = выход): ").strip()
        if not raw:
            break
        try:
            caller, value = raw.split()
            event = registry.set_positive_even(caller, int(value))
            print(f" PositiveEvenSet({event.previous}, {event.new})")
        except RegistryError as e:
            print(f" REVERT: {e}")
        except (ValueError, TypeError) as e:
            print(f" Ошибка ввода: {e}")

    print(f"\nИтог: positiveEven = {registry.positive_even}, событий: {len(registry.events)}")


def main():
    """Главная функция."""
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s'
    )

    print("""
    PositiveEvenSetter
    Owner-gated positive even number registry
    """)

    print("Выбери действие:")
    print("1. Показать состояние контракта")
    print("2. Установить значение")
    print("3. Передать владение")
    print("4. Отказаться от владения")
    print("5. Деплой контракта")
    print("6. Офлайн-симуляция")
    print("7. Выход")

    choice = input("\nВыбор (1-7): ").strip()

    if choice == "6":
        simulate()
        return
    if choice == "7":
        print("Выход")
        return
    if choice not in {"1", "2", "3", "4", "5"}:
        print("Неверный выбор")
        return

    connection = connect()
    if connection is None:
        return
    w3, account, chain = connection

    if choice == "5":
        deploy_interactive(w3, account, chain)
        return

    setter = attach(w3, account)
    if choice == "1":
        show_state(setter)
    elif choice == "2":
        set_value_interactive(setter)
    elif choice == "3":
        transfer_ownership_interactive(setter)
    elif choice == "4":
        renounce_ownership_interactive(setter)


if __name__ == "__main__":
    main()
