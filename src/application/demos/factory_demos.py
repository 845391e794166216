"""Factory method and abstract factory demonstrations."""
from typing import Callable, Optional

from src.config.manager import get_config_manager
from src.config.schemas import DrinkConfig
from src.domain.factory import HotDrinkMachine, PersonFactory, Point


def factory_sample() -> None:
    non_singleton = Point.create_polar(1, 2)
    singleton = Point.factory.create_cartesian(1, 2)

    print(non_singleton)
    print(singleton)


def abstract_factory_sample(read_line: Callable[[], str] = input,
                            amount: Optional[int] = None) -> None:
    """
    Let the user pick a drink from the machine's menu and drink it.

    The pour amount defaults to the configured drinks.default_amount.
    """
    if amount is None:
        amount = get_config_manager().get_typed(DrinkConfig).default_amount
    machine = HotDrinkMachine(default_amount=amount)
    print(len(machine.named_factories))
    drink = machine.make_drink_interactive(read_line)
    drink.consume()


def factory_coding_exercise() -> None:
    f = PersonFactory()
    print(f.create_person("Myron"))
    print(f.create_person("Sarah"))
