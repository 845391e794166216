"""Hot drink machine configuration schema."""
from pydantic import BaseModel, Field, field_validator


class DrinkConfig(BaseModel):
    """Hot drink machine configuration."""

    default_amount: int = Field(250, description="Amount poured per drink, in ml")

    @field_validator("default_amount")
    @classmethod
    def validate_amount(cls, v: int) -> int:
        """Validate pour amount."""
        if v < 1:
            raise ValueError("Amount must be at least 1 ml")
        return v
