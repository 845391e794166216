"""Hot drinks and the factories that prepare them."""
import logging
from abc import ABC, abstractmethod

from src.domain.core.exceptions import ValidationError

logger = logging.getLogger(__name__)


class HotDrink(ABC):
    """A drink that can be consumed."""

    @property
    @abstractmethod
    def description(self) -> str:
        """What the drinker says about it."""

    def consume(self) -> None:
        print(self.description)

    def __str__(self) -> str:
        return self.description


class Tea(HotDrink):

    @property
    def description(self) -> str:
        return "This tea is nice but I prefer it with milk."


class Coffee(HotDrink):

    @property
    def description(self) -> str:
        return "This coffee is delicious!"


class HotDrinkFactory(ABC):
    """Prepares one kind of hot drink."""

    def prepare(self, amount: int) -> HotDrink:
        """
        Prepare a drink of the given amount.

        Prints the preparation steps and returns a new drink.

        Args:
            amount: Amount to pour, in ml

        Raises:
            ValidationError: If amount is not positive
        """
        if isinstance(amount, bool) or not isinstance(amount, int) or amount <= 0:
            raise ValidationError(f"Amount must be a positive number of ml, got {amount!r}")
        print(self.steps(amount))
        logger.debug("Prepared %s (%sml)", type(self).__name__, amount)
        return self._make()

    @abstractmethod
    def steps(self, amount: int) -> str:
        """Preparation steps for the given amount."""

    @abstractmethod
    def _make(self) -> HotDrink:
        pass


class TeaFactory(HotDrinkFactory):

    def steps(self, amount: int) -> str:
        return f"Put in tea bag, boil water, pour {amount}ml, add lemon, enjoy"

    def _make(self) -> HotDrink:
        return Tea()


class CoffeeFactory(HotDrinkFactory):

    def steps(self, amount: int) -> str:
        return f"Grind some beans, boil water, pour {amount}ml, add cream and sugar, enjoy!"

    def _make(self) -> HotDrink:
        return Coffee()
