import pytest
from src.domain.builder import Person, PersonAddressBuilder, PersonBuilder, PersonJobBuilder

EXPECTED = dict(
    street_address="123 London Road",
    city="London",
    post_code="SW12BC",
    company_name="Fabrikam",
    position="Engineer",
    annual_income=123000,
)

def test_faceted_chain_sets_every_field():
    p = (PersonBuilder()
         .lives.at("123 London Road").in_city("London").with_post_code("SW12BC")
         .works.at("Fabrikam").as_a("Engineer").earning(123000)
         .build())

    assert p.model_dump() == EXPECTED

def test_facet_order_does_not_matter():
    p = (PersonBuilder()
         .works.earning(123000).as_a("Engineer").at("Fabrikam")
         .lives.with_post_code("SW12BC").at("123 London Road").in_city("London")
         .build())

    assert p.model_dump() == EXPECTED

def test_facets_share_the_same_person():
    pb = PersonBuilder()
    address = pb.lives
    job = pb.works

    assert isinstance(address, PersonAddressBuilder)
    assert isinstance(job, PersonJobBuilder)
    assert address.person is job.person is pb.person

def test_facets_are_not_builder_subclasses():
    assert not issubclass(PersonAddressBuilder, PersonBuilder)
    assert not issubclass(PersonJobBuilder, PersonBuilder)

def test_at_writes_to_the_active_facet():
    p = PersonBuilder().lives.at("1 High Street").works.at("Contoso").build()

    assert p.street_address == "1 High Street"
    assert p.company_name == "Contoso"

def test_build_without_calls_returns_defaults():
    p = PersonBuilder().build()

    assert p == Person()
    assert p.annual_income == 0

def test_builder_can_start_from_existing_person():
    existing = Person(city="Paris")
    p = PersonBuilder(existing).works.as_a("Chef").build()

    assert p is existing
    assert p.city == "Paris"
    assert p.position == "Chef"

def test_person_description():
    p = Person(**EXPECTED)

    assert str(p) == (
        "I live at 123 London Road, SW12BC, London. "
        "I work at Fabrikam as a Engineer, earning 123000"
    )

def test_income_is_validated_on_assignment():
    with pytest.raises(ValueError):
        PersonBuilder().works.earning("a lot")
