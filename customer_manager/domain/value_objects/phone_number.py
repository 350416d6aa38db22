"""
Phone Number value object

Represents a validated phone number in the system.
"""

import re
from dataclasses import dataclass

from customer_manager.infrastructure.utilities.constants import CustomerLimits


@dataclass(frozen=True)
class PhoneNumber:
    """
    Phone number value object

    Accepts common separators and keeps only digits plus an optional
    leading '+'.
    """

    value: str

    def __post_init__(self):
        """Validate phone number on creation"""
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValueError("Phone number cannot be empty")

        normalized = self._normalize_phone_number(self.value)
        digits = normalized.lstrip("+")

        if not digits.isdigit():
            raise ValueError(f"Invalid phone number: {self.value}")

        if not CustomerLimits.PHONE_MIN_DIGITS <= len(digits) <= CustomerLimits.PHONE_MAX_DIGITS:
            raise ValueError(
                f"Phone number must have between {CustomerLimits.PHONE_MIN_DIGITS} "
                f"and {CustomerLimits.PHONE_MAX_DIGITS} digits"
            )

        # Use object.__setattr__ because the class is frozen
        object.__setattr__(self, "value", normalized)

    @staticmethod
    def _normalize_phone_number(phone: str) -> str:
        """Remove separators, keep a single leading +"""
        stripped = phone.strip()
        cleaned = re.sub(r"[\s\-.()]", "", stripped)
        if cleaned.startswith("00"):
            return f"+{cleaned[2:]}"
        return cleaned

    def is_international(self) -> bool:
        """Check if the number carries a country prefix"""
        return self.value.startswith("+")

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"PhoneNumber('{self.value}')"
