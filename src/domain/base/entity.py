"""Base domain records - foundation for the example value holders."""
from pydantic import BaseModel, ConfigDict


class Record(BaseModel):
    """
    Base class for plain mutable value holders.

    Records have public fields, are mutated through plain attribute
    assignment and carry no identity; two records are equal when all of
    their fields are equal.
    """
    model_config = ConfigDict(
        frozen=False,  # Records are mutable
        validate_assignment=True,
        arbitrary_types_allowed=True
    )
