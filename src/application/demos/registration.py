"""Demo Registration Module.

Registers every pattern demonstration with the demo registry.
"""

from typing import Callable, List, Optional, Tuple

from src.application.demos import builder_demos, factory_demos, prototype_demos, solid_demos
from src.infrastructure.registry.demo_registry import DemoRegistry, get_demo_registry

# (name, category, description, runner)
DEMOS: List[Tuple[str, str, str, Callable[[], None]]] = [
    ("faceted-builder", "builder",
     "Fluent person builder with address and job facets",
     builder_demos.faceted_builder_sample),
    ("code-builder", "builder",
     "Builds a class declaration field by field",
     builder_demos.builder_coding_exercise),
    ("factory-method", "factory",
     "Named point constructors and a singleton point factory",
     factory_demos.factory_sample),
    ("abstract-factory", "factory",
     "Hot drink machine choosing a drink factory by menu position",
     factory_demos.abstract_factory_sample),
    ("person-factory", "factory",
     "Factory assigning sequential ids",
     factory_demos.factory_coding_exercise),
    ("copy-constructor", "prototype",
     "Deep copy through copy-constructors",
     prototype_demos.copy_constructor_sample),
    ("clone", "prototype",
     "Deep copy through clone()",
     prototype_demos.clone_sample),
    ("line-deep-copy", "prototype",
     "Deep copy of a line and its endpoints",
     prototype_demos.line_exercise),
    ("single-responsibility", "solid",
     "Journal entries kept apart from journal persistence",
     solid_demos.single_responsibility_sample),
    ("open-closed", "solid",
     "Product filtering with composable specifications",
     solid_demos.open_closed_sample),
    ("liskov-substitution", "solid",
     "Square breaking Rectangle's contract, and tagged shapes that don't",
     solid_demos.liskov_sample),
    ("interface-segregation", "solid",
     "Devices implementing only the interfaces they support",
     solid_demos.interface_segregation_sample),
    ("dependency-inversion", "solid",
     "Research depending on a relationship browser abstraction",
     solid_demos.dependency_inversion_sample),
]


def register_demos(registry: Optional[DemoRegistry] = None) -> DemoRegistry:
    """
    Register all demos that are not registered yet.

    Args:
        registry: Registry to fill; defaults to the global demo registry

    Returns:
        The filled registry
    """
    registry = registry or get_demo_registry()
    for name, category, description, runner in DEMOS:
        if not registry.is_demo_registered(name):
            registry.register_demo(name, category, description, runner)
    return registry
