"""
Email Address value object
"""

import re
from dataclasses import dataclass
from typing import ClassVar

from customer_manager.infrastructure.utilities.constants import CustomerLimits


@dataclass(frozen=True)
class EmailAddress:
    """Email address value object, stored lower-cased"""

    value: str

    EMAIL_PATTERN: ClassVar[str] = r"^[A-Za-z0-9._%+\-]+@[A-Za-z0-9\-]+(\.[A-Za-z0-9\-]+)*\.[A-Za-z]{2,}$"

    def __post_init__(self):
        """Validate and normalize email"""
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValueError("Email address cannot be empty")

        normalized = self.value.strip().lower()

        if len(normalized) > CustomerLimits.EMAIL_MAX_LENGTH:
            raise ValueError(
                f"Email address cannot exceed {CustomerLimits.EMAIL_MAX_LENGTH} characters"
            )

        if not re.match(self.EMAIL_PATTERN, normalized):
            raise ValueError(f"Invalid email address: {self.value}")

        object.__setattr__(self, "value", normalized)

    @property
    def domain(self) -> str:
        """Part after the @"""
        return self.value.split("@", 1)[1]

    def __str__(self) -> str:
        return self.value
