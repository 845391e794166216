"""Factory bounded context."""

from .hot_drink import Coffee, CoffeeFactory, HotDrink, HotDrinkFactory, Tea, TeaFactory
from .hot_drink_machine import (
    DEFAULT_AMOUNT,
    DRINK_FACTORIES,
    AvailableDrink,
    HotDrinkMachine,
    parse_selection,
)
from .person_factory import Person, PersonFactory
from .point import Point

__all__ = [
    "AvailableDrink",
    "Coffee",
    "CoffeeFactory",
    "DEFAULT_AMOUNT",
    "DRINK_FACTORIES",
    "HotDrink",
    "HotDrinkFactory",
    "HotDrinkMachine",
    "Person",
    "PersonFactory",
    "Point",
    "Tea",
    "TeaFactory",
    "parse_selection",
]
