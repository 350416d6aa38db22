"""
Customer Name value object
"""

import re
from dataclasses import dataclass

from customer_manager.infrastructure.utilities.constants import CustomerLimits


@dataclass(frozen=True)
class CustomerName:
    """Customer name value object with validation"""

    value: str

    def __post_init__(self):
        """Validate customer name"""
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValueError("Customer name cannot be empty")

        cleaned_name = " ".join(self.value.split())

        if len(cleaned_name) < CustomerLimits.NAME_MIN_LENGTH:
            raise ValueError(
                f"Customer name must be at least {CustomerLimits.NAME_MIN_LENGTH} characters"
            )

        if len(cleaned_name) > CustomerLimits.NAME_MAX_LENGTH:
            raise ValueError(
                f"Customer name cannot exceed {CustomerLimits.NAME_MAX_LENGTH} characters"
            )

        # \w without digits and underscore: any unicode letter
        if not re.search(r"[^\W\d_]", cleaned_name):
            raise ValueError("Customer name must contain letters")

        # Use object.__setattr__ because the class is frozen
        object.__setattr__(self, "value", cleaned_name)

    def first_name(self) -> str:
        """Extract first name"""
        return self.value.split()[0] if self.value else ""

    def __str__(self) -> str:
        return self.value
