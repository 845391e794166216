from src.domain.prototype import Address, Employee, Line, Point, Prototype


def test_copy_constructor_is_deep(john):
    chris = Employee.copy_from(john)
    chris.name = "Chris"
    chris.address.street_address = "124 London Road"

    assert chris.address is not john.address
    assert john.address.street_address == "123 London Road"
    assert str(john) == "My name is John and I live at 123 London Road, London"
    assert str(chris) == "My name is Chris and I live at 124 London Road, London"


def test_clone_is_deep(john):
    chris = john.clone()
    chris.address.street_address = "124 London Road"
    chris.address.city = "Manchester"

    assert john.address != chris.address
    assert john.address == Address(street_address="123 London Road", city="London")


def test_clone_starts_equal(john):
    chris = john.clone()

    assert chris == john
    assert chris is not john


def test_address_copies():
    address = Address(street_address="1 Main St", city="Springfield")

    assert Address.copy_from(address) == address
    assert address.clone() is not address
    assert str(address) == "1 Main St, Springfield"


def test_prototypes():
    assert isinstance(Address(street_address="a", city="b"), Prototype)
    assert issubclass(Employee, Prototype)


def test_line_deep_copy():
    detour = Line(start=Point(6, 7), end=Point(8, 9))

    destination = detour.deep_copy()
    destination.start.x = 0
    destination.end.y = 0

    assert destination == Line(start=Point(0, 7), end=Point(8, 0))
    assert detour == Line(start=Point(6, 7), end=Point(8, 9))
    assert destination.start is not detour.start


def test_line_description():
    line = Line(start=Point(1, 2), end=Point(3, 4))

    assert str(line) == "start x: 1, start y: 2\nend x: 3, end y: 4"


def test_default_line_points_are_not_shared():
    first, second = Line(), Line()
    first.start.x = 5

    assert second.start.x == 0
