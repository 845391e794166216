"""SOLID principle demonstrations."""
import tempfile
from pathlib import Path

from src.domain.solid import (
    BetterFilter,
    Color,
    ColorSpecification,
    Document,
    Journal,
    MultiFunctionMachine,
    OldFashionedPrinter,
    PersistenceManager,
    Photocopier,
    Product,
    Rectangle,
    RectangleShape,
    Relationships,
    Research,
    Size,
    SizeSpecification,
    Square,
    SquareShape,
    area_of,
    capabilities,
    use_it,
)
from src.domain.solid.relationships import Person


def single_responsibility_sample() -> None:
    j = Journal()
    j.add_entry("I cried today.")
    j.add_entry("I ate a bug.")
    print(f"Journal entries:\n{j}")

    with tempfile.TemporaryDirectory() as tmp:
        path = PersistenceManager.save_to_file(j, Path(tmp) / "journal.txt")
        print(f"Saved {len(path.read_text().splitlines())} entries")


def open_closed_sample() -> None:
    apple = Product(name="Apple", color=Color.RED, size=Size.SMALL)
    tree = Product(name="Tree", color=Color.GREEN, size=Size.LARGE)
    house = Product(name="House", color=Color.BLUE, size=Size.LARGE)

    products = [apple, tree, house]

    bf = BetterFilter()
    print("Green products:")
    for p in bf.filter(products, ColorSpecification(Color.GREEN)):
        print(f"- {p.name} is green")

    print("Large blue items:")
    large_blue = ColorSpecification(Color.BLUE) & SizeSpecification(Size.LARGE)
    for p in bf.filter(products, large_blue):
        print(f"- {p.name} is large and blue")


def liskov_sample() -> None:
    for rc in (Rectangle(2, 3), Square(5)):
        expected, actual = use_it(rc)
        print(f"Expected an area of {expected}, got {actual}")

    for shape in (RectangleShape(2, 10), SquareShape(5)):
        print(f"{shape} has area {area_of(shape)}")


def interface_segregation_sample() -> None:
    document = Document(name="report.txt")
    devices = [
        OldFashionedPrinter(),
        Photocopier(),
        MultiFunctionMachine(OldFashionedPrinter(), Photocopier()),
    ]
    for device in devices:
        print(f"{type(device).__name__}: {', '.join(capabilities(device))}")
        print(f"  {device.print_document(document)}")


def dependency_inversion_sample() -> None:
    parent = Person(name="John")
    relationships = Relationships()
    relationships.add_parent_and_child(parent, Person(name="Chris"))
    relationships.add_parent_and_child(parent, Person(name="Matt"))

    for line in Research(relationships).report("John"):
        print(line)
