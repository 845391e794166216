"""Tests for the pattern demonstrations' printed output."""
import math
from unittest.mock import Mock

import pytest

from src.application.demos import builder_demos, factory_demos, prototype_demos, solid_demos
from src.config.manager import get_config_manager
from src.domain.core.exceptions import OutOfRangeError


def output_lines(capsys):
    return capsys.readouterr().out.splitlines()


class TestBuilderDemos:

    def test_faceted_builder_sample(self, capsys):
        builder_demos.faceted_builder_sample()

        assert output_lines(capsys) == [
            "I live at 123 London Road, SW12BC, London. "
            "I work at Fabrikam as a Engineer, earning 123000"
        ]

    def test_builder_coding_exercise(self, capsys):
        builder_demos.builder_coding_exercise()

        assert capsys.readouterr().out == "class Person \n{\nname: String\nage: Int\n}\n\n"


class TestFactoryDemos:

    def test_factory_sample(self, capsys):
        factory_demos.factory_sample()

        lines = output_lines(capsys)
        assert lines[0] == f"x = {math.cos(2)}, y= {math.sin(2)}"
        assert lines[1] == "x = 1, y= 2"

    def test_abstract_factory_sample(self, capsys):
        factory_demos.abstract_factory_sample(Mock(return_value="0"))

        assert output_lines(capsys) == [
            "2",
            "Available drinks:",
            "0: Coffee",
            "1: Tea",
            "Grind some beans, boil water, pour 250ml, add cream and sugar, enjoy!",
            "This coffee is delicious!",
        ]

    def test_abstract_factory_sample_uses_configured_amount(self, capsys, monkeypatch):
        monkeypatch.setenv("PATTERNS_DRINK_AMOUNT", "400")
        get_config_manager().reload()

        factory_demos.abstract_factory_sample(lambda: "1")

        assert "Put in tea bag, boil water, pour 400ml, add lemon, enjoy" in output_lines(capsys)

    def test_abstract_factory_sample_bad_selection(self):
        with pytest.raises(OutOfRangeError):
            factory_demos.abstract_factory_sample(lambda: "7", amount=100)

    def test_factory_coding_exercise(self, capsys):
        factory_demos.factory_coding_exercise()

        assert output_lines(capsys) == ["id: 1, name: Myron", "id: 2, name: Sarah"]


class TestPrototypeDemos:

    @pytest.mark.parametrize("demo", [
        prototype_demos.copy_constructor_sample,
        prototype_demos.clone_sample,
    ])
    def test_copy_leaves_original_untouched(self, capsys, demo):
        demo()

        assert output_lines(capsys) == [
            "My name is John and I live at 123 London Road, London",
            "My name is Chris and I live at 124 London Road, London",
        ]

    def test_line_exercise(self, capsys):
        prototype_demos.line_exercise()

        assert output_lines(capsys) == [
            "start x: 1, start y: 2", "end x: 3, end y: 4",
            "start x: 6, start y: 7", "end x: 8, end y: 9",
            "start x: 6, start y: 7", "end x: 10, end y: 9",
        ]


class TestSolidDemos:

    def test_single_responsibility_sample(self, capsys):
        solid_demos.single_responsibility_sample()

        assert output_lines(capsys) == [
            "Journal entries:",
            "1: I cried today.",
            "2: I ate a bug.",
            "Saved 2 entries",
        ]

    def test_open_closed_sample(self, capsys):
        solid_demos.open_closed_sample()

        assert output_lines(capsys) == [
            "Green products:",
            "- Tree is green",
            "Large blue items:",
            "- House is large and blue",
        ]

    def test_liskov_sample(self, capsys):
        solid_demos.liskov_sample()

        lines = output_lines(capsys)
        assert lines[:2] == [
            "Expected an area of 20, got 20",
            "Expected an area of 50, got 100",
        ]
        assert lines[2].endswith("has area 20")
        assert lines[3].endswith("has area 25")

    def test_interface_segregation_sample(self, capsys):
        solid_demos.interface_segregation_sample()

        lines = output_lines(capsys)
        assert lines[0] == "OldFashionedPrinter: Printer"
        assert lines[2] == "Photocopier: Printer, Scanner"
        assert lines[4] == "MultiFunctionMachine: Printer, Scanner"
        assert lines[1].strip() == "Printing report.txt"

    def test_dependency_inversion_sample(self, capsys):
        solid_demos.dependency_inversion_sample()

        assert output_lines(capsys) == [
            "John has a child called Chris",
            "John has a child called Matt",
        ]
