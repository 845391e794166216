import logging
import os

import pytest

from src.config.manager import reset_config_manager
from src.domain.factory import HotDrinkMachine
from src.domain.prototype import Address, Employee
from src.domain.solid import Color, Product, Size


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch):
    """Fresh configuration and logging state for every test."""
    for name in list(os.environ):
        if name.startswith("PATTERNS_"):
            monkeypatch.delenv(name)
    reset_config_manager()
    yield
    reset_config_manager()
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    root_logger.setLevel(logging.WARNING)


@pytest.fixture
def machine():
    return HotDrinkMachine()


@pytest.fixture
def john():
    return Employee(name="John", address=Address(street_address="123 London Road", city="London"))


@pytest.fixture
def products():
    return [
        Product(name="Apple", color=Color.RED, size=Size.SMALL),
        Product(name="Tree", color=Color.GREEN, size=Size.LARGE),
        Product(name="House", color=Color.BLUE, size=Size.LARGE),
    ]
