"""SOLID principles bounded context."""

from .journal import Journal, PersistenceManager
from .machines import (
    Document,
    Fax,
    MultiFunctionDevice,
    MultiFunctionMachine,
    OldFashionedPrinter,
    Photocopier,
    Printer,
    Scanner,
    capabilities,
)
from .relationships import Relationship, RelationshipBrowser, Relationships, Research
from .shapes import Rectangle, RectangleShape, Shape, Square, SquareShape, area_of, use_it
from .specification import (
    AndSpecification,
    BetterFilter,
    Color,
    ColorSpecification,
    Filter,
    Product,
    ProductFilter,
    Size,
    SizeSpecification,
    Specification,
)

__all__ = [
    # Single responsibility
    "Journal",
    "PersistenceManager",
    # Open/closed
    "AndSpecification",
    "BetterFilter",
    "Color",
    "ColorSpecification",
    "Filter",
    "Product",
    "ProductFilter",
    "Size",
    "SizeSpecification",
    "Specification",
    # Liskov substitution
    "Rectangle",
    "RectangleShape",
    "Shape",
    "Square",
    "SquareShape",
    "area_of",
    "use_it",
    # Interface segregation
    "Document",
    "Fax",
    "MultiFunctionDevice",
    "MultiFunctionMachine",
    "OldFashionedPrinter",
    "Photocopier",
    "Printer",
    "Scanner",
    "capabilities",
    # Dependency inversion
    "Relationship",
    "RelationshipBrowser",
    "Relationships",
    "Research",
]
