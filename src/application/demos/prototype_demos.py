"""Prototype demonstrations."""
from src.domain.prototype import Address, Employee, Line, Point


def copy_constructor_sample() -> None:
    john = Employee(name="John", address=Address(street_address="123 London Road", city="London"))

    chris = Employee.copy_from(john)
    chris.name = "Chris"
    chris.address.street_address = "124 London Road"
    print(john)
    print(chris)


def clone_sample() -> None:
    john = Employee(name="John", address=Address(street_address="123 London Road", city="London"))

    chris = john.clone()
    chris.name = "Chris"
    chris.address.street_address = "124 London Road"
    print(john)
    print(chris)


def line_exercise() -> None:
    origin = Line(start=Point(1, 2), end=Point(3, 4))
    detour = Line(start=Point(6, 7), end=Point(8, 9))

    destination = detour.deep_copy()
    destination.end.x = 10

    print(origin)
    print(detour)
    print(destination)
