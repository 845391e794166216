"""Package metadata and naming constants."""

PACKAGE_NAME = "design-pattern-playgrounds"
PACKAGE_NAME_SHORT = "patterns"
__version__ = "1.0.0"
VERSION = __version__  # Alias for compatibility
DESCRIPTION = (
    "Design pattern playgrounds - Builder, Factory Method, Abstract Factory, "
    "Prototype and SOLID examples"
)
