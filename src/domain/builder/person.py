"""Person record assembled by the faceted builder."""
from src.domain.base.entity import Record


class Person(Record):
    """A person with an address facet and an employment facet."""

    # address
    street_address: str = ""
    post_code: str = ""
    city: str = ""

    # employment
    company_name: str = ""
    position: str = ""
    annual_income: int = 0

    def __str__(self) -> str:
        return (
            f"I live at {self.street_address}, {self.post_code}, {self.city}. "
            f"I work at {self.company_name} as a {self.position}, earning {self.annual_income}"
        )
