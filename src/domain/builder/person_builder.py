"""Faceted builder for Person.

The root builder owns the person under construction. Each facet is a small
object holding a reference to the root builder, so every facet writes into
the same person and a chain can jump between facets in any order::

    person = (PersonBuilder()
              .lives.at("123 London Road").in_city("London").with_post_code("SW12BC")
              .works.at("Fabrikam").as_a("Engineer").earning(123000)
              .build())
"""
from typing import Optional

from src.domain.builder.person import Person


class PersonBuilder:
    """Root builder holding the shared Person."""

    def __init__(self, person: Optional[Person] = None):
        self.person = person if person is not None else Person()

    @property
    def lives(self) -> 'PersonAddressBuilder':
        """Address facet."""
        return PersonAddressBuilder(self)

    @property
    def works(self) -> 'PersonJobBuilder':
        """Employment facet."""
        return PersonJobBuilder(self)

    def build(self) -> Person:
        return self.person


class _PersonFacet:
    """Common navigation for facets; all state lives in the owning builder."""

    def __init__(self, owner: PersonBuilder):
        self._owner = owner

    @property
    def person(self) -> Person:
        return self._owner.person

    @property
    def lives(self) -> 'PersonAddressBuilder':
        return self._owner.lives

    @property
    def works(self) -> 'PersonJobBuilder':
        return self._owner.works

    def build(self) -> Person:
        return self._owner.build()


class PersonAddressBuilder(_PersonFacet):
    """Builds the address part of a Person."""

    def at(self, street_address: str) -> 'PersonAddressBuilder':
        self.person.street_address = street_address
        return self

    def with_post_code(self, post_code: str) -> 'PersonAddressBuilder':
        self.person.post_code = post_code
        return self

    def in_city(self, city: str) -> 'PersonAddressBuilder':
        self.person.city = city
        return self


class PersonJobBuilder(_PersonFacet):
    """Builds the employment part of a Person."""

    def at(self, company_name: str) -> 'PersonJobBuilder':
        self.person.company_name = company_name
        return self

    def as_a(self, position: str) -> 'PersonJobBuilder':
        self.person.position = position
        return self

    def earning(self, annual_income: int) -> 'PersonJobBuilder':
        self.person.annual_income = annual_income
        return self
