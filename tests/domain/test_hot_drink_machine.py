from unittest.mock import Mock

import pytest

from src.domain.core.exceptions import OutOfRangeError, ParseFailureError, ValidationError
from src.domain.factory import (
    AvailableDrink,
    Coffee,
    CoffeeFactory,
    HotDrinkMachine,
    Tea,
    TeaFactory,
    parse_selection,
)

TEA_TEXT = "This tea is nice but I prefer it with milk."
COFFEE_TEXT = "This coffee is delicious!"


def test_list_available_follows_enumeration_order(machine):
    names = machine.list_available()

    assert len(names) == len(AvailableDrink)
    assert names == ["Coffee", "Tea"]


def test_one_factory_per_kind(machine):
    assert isinstance(machine.factory_for(AvailableDrink.COFFEE), CoffeeFactory)
    assert isinstance(machine.factory_for(AvailableDrink.TEA), TeaFactory)
    assert [f for _, f in machine.named_factories] == [
        machine.factories[AvailableDrink.COFFEE],
        machine.factories[AvailableDrink.TEA],
    ]


@pytest.mark.parametrize("index,drink_type,text", [
    (0, Coffee, COFFEE_TEXT),
    (1, Tea, TEA_TEXT),
])
def test_make_drink_for_each_valid_index(machine, index, drink_type, text):
    drink = machine.make_drink(index)

    assert isinstance(drink, drink_type)
    assert drink.description == text


@pytest.mark.parametrize("index", [-1, 2, 100])
def test_make_drink_rejects_out_of_range(machine, index):
    with pytest.raises(OutOfRangeError) as exc:
        machine.make_drink(index)

    assert exc.value.index == index
    assert exc.value.size == 2


@pytest.mark.parametrize("index", [True, False, "0", 1.0, None])
def test_make_drink_rejects_non_integer_index(machine, index):
    with pytest.raises(ValidationError, match="Menu position must be an integer"):
        machine.make_drink(index)


def test_out_of_range_is_an_index_error(machine):
    with pytest.raises(IndexError):
        machine.make_drink(len(machine.list_available()))


def test_prepare_prints_steps(capsys):
    TeaFactory().prepare(250)
    CoffeeFactory().prepare(100)

    out = capsys.readouterr().out.splitlines()
    assert out == [
        "Put in tea bag, boil water, pour 250ml, add lemon, enjoy",
        "Grind some beans, boil water, pour 100ml, add cream and sugar, enjoy!",
    ]


def test_prepare_returns_a_new_drink_each_time():
    factory = TeaFactory()

    assert factory.prepare(10) is not factory.prepare(10)


@pytest.mark.parametrize("amount", [0, -5, "250"])
def test_prepare_rejects_bad_amount(amount):
    with pytest.raises(ValidationError):
        TeaFactory().prepare(amount)


def test_default_amount_is_used(capsys):
    HotDrinkMachine(default_amount=300).make_drink(1)

    assert "pour 300ml" in capsys.readouterr().out


def test_explicit_amount_overrides_default(capsys, machine):
    machine.make_drink(0, amount=50)

    assert "pour 50ml" in capsys.readouterr().out


def test_consume_prints_description(capsys):
    Coffee().consume()

    assert capsys.readouterr().out == COFFEE_TEXT + "\n"


def test_interactive_selection(capsys, machine):
    read_line = Mock(return_value="1\n")

    drink = machine.make_drink_interactive(read_line)

    read_line.assert_called_once_with()
    assert isinstance(drink, Tea)
    out = capsys.readouterr().out.splitlines()
    assert out[:3] == ["Available drinks:", "0: Coffee", "1: Tea"]


def test_interactive_selection_not_a_number(machine):
    with pytest.raises(ParseFailureError) as exc:
        machine.make_drink_interactive(lambda: "tea")

    assert exc.value.text == "tea"


def test_interactive_selection_out_of_range(machine):
    with pytest.raises(OutOfRangeError):
        machine.make_drink_interactive(lambda: "5")


@pytest.mark.parametrize("text,expected", [("0", 0), (" 1 \n", 1), ("-1", -1)])
def test_parse_selection(text, expected):
    assert parse_selection(text) == expected


@pytest.mark.parametrize("text", ["", "one", "1.5"])
def test_parse_selection_failure(text):
    with pytest.raises(ParseFailureError):
        parse_selection(text)
