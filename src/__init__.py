"""Design Pattern Playgrounds - Root Package.

Small, self-contained examples of classic object-oriented design patterns
and the SOLID principles.

Key Components:
    - domain: The pattern examples, one bounded context per pattern family
    - application: Runnable demonstrations of each example
    - infrastructure: Logging and the demo registry
    - config: Configuration schemas and loading
    - cli: Command line interface

Usage:
    patterns demos list
    patterns demos run faceted-builder
    patterns drinks make --index 1
"""

from ._package import PACKAGE_NAME, __version__

__all__ = ["PACKAGE_NAME", "__version__"]
