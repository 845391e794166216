"""Hot drink machine - abstract factory keyed by a closed set of drink kinds.

Every kind in AvailableDrink is mapped to its factory class in
DRINK_FACTORIES. The machine builds one factory instance per kind when it
is created and keeps them in enumeration order, so menu positions are
stable.
"""
import logging
from enum import Enum
from typing import Callable, Dict, List, Optional, Tuple, Type

from src.domain.core.exceptions import OutOfRangeError, ParseFailureError, ValidationError
from src.domain.factory.hot_drink import CoffeeFactory, HotDrink, HotDrinkFactory, TeaFactory

DEFAULT_AMOUNT = 250

logger = logging.getLogger(__name__)


class AvailableDrink(str, Enum):
    """Drinks the machine can make, in menu order."""
    COFFEE = "Coffee"
    TEA = "Tea"


# Adding a drink means extending both AvailableDrink and this mapping.
DRINK_FACTORIES: Dict[AvailableDrink, Type[HotDrinkFactory]] = {
    AvailableDrink.COFFEE: CoffeeFactory,
    AvailableDrink.TEA: TeaFactory,
}


def parse_selection(text: str) -> int:
    """
    Parse a menu selection typed by the user.

    Raises:
        ParseFailureError: If the text is not an integer
    """
    stripped = (text or "").strip()
    try:
        return int(stripped)
    except ValueError:
        raise ParseFailureError(stripped) from None


class HotDrinkMachine:
    """Makes drinks by menu position using one factory per drink kind."""

    def __init__(self, default_amount: int = DEFAULT_AMOUNT):
        self.default_amount = default_amount
        self.factories: Dict[AvailableDrink, HotDrinkFactory] = {}
        self.named_factories: List[Tuple[str, HotDrinkFactory]] = []

        for drink in AvailableDrink:
            factory = DRINK_FACTORIES[drink]()
            self.factories[drink] = factory
            self.named_factories.append((drink.value, factory))

        logger.debug("Hot drink machine ready with %d factories", len(self.named_factories))

    def list_available(self) -> List[str]:
        """Display names of the available drinks, in menu order."""
        return [name for name, _ in self.named_factories]

    def factory_for(self, drink: AvailableDrink) -> HotDrinkFactory:
        return self.factories[drink]

    def make_drink(self, index: int, amount: Optional[int] = None) -> HotDrink:
        """
        Make the drink at the given menu position.

        Args:
            index: Zero-based menu position
            amount: Amount to pour in ml; defaults to the machine's default amount

        Raises:
            ValidationError: If index is not an integer
            OutOfRangeError: If index is not a valid menu position
        """
        if isinstance(index, bool) or not isinstance(index, int):
            raise ValidationError(f"Menu position must be an integer, got {index!r}")
        if not 0 <= index < len(self.named_factories):
            raise OutOfRangeError(index, len(self.named_factories))

        name, factory = self.named_factories[index]
        logger.debug("Making %s", name)
        return factory.prepare(self.default_amount if amount is None else amount)

    def print_menu(self) -> None:
        print("Available drinks:")
        for i, name in enumerate(self.list_available()):
            print(f"{i}: {name}")

    def make_drink_interactive(self, read_line: Callable[[], str] = input,
                               amount: Optional[int] = None) -> HotDrink:
        """
        Print the menu, read one selection line and make that drink.

        Raises:
            ParseFailureError: If the line is not an integer
            OutOfRangeError: If the selection is not a valid menu position
        """
        self.print_menu()
        return self.make_drink(parse_selection(read_line()), amount)
