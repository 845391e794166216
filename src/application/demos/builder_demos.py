"""Builder demonstrations."""
from src.domain.builder import CodeBuilder, PersonBuilder


def faceted_builder_sample() -> None:
    pb = PersonBuilder()
    p = (pb
         .lives.at("123 London Road")
               .in_city("London")
               .with_post_code("SW12BC")
         .works.at("Fabrikam")
               .as_a("Engineer")
               .earning(123000)
         .build())
    print(p)


def builder_coding_exercise() -> None:
    cb = (CodeBuilder("Person")
          .add_field("name", "String")
          .add_field("age", "Int"))
    print(cb)
