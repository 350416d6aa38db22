"""
Address value object
"""

from dataclasses import dataclass

from customer_manager.infrastructure.utilities.constants import CustomerLimits


@dataclass(frozen=True)
class Address:
    """Postal address value object with validation"""

    value: str

    def __post_init__(self):
        """Validate address"""
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValueError("Address cannot be empty")

        cleaned_address = self.value.strip()

        if len(cleaned_address) < CustomerLimits.ADDRESS_MIN_LENGTH:
            raise ValueError(
                f"Address must be at least {CustomerLimits.ADDRESS_MIN_LENGTH} characters"
            )

        if len(cleaned_address) > CustomerLimits.ADDRESS_MAX_LENGTH:
            raise ValueError(
                f"Address cannot exceed {CustomerLimits.ADDRESS_MAX_LENGTH} characters"
            )

        object.__setattr__(self, "value", cleaned_address)

    def __str__(self) -> str:
        return self.value
