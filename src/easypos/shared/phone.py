"""PhoneNumber value object for validated phone numbers."""

import re

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Text

from easypos.domain import easypos

DIGIT_COUNT = 8

# Exactly DIGIT_COUNT digits; hyphens may appear anywhere around them.
PHONE_PATTERN = re.compile(rf"^(?:-*\d-*){{{DIGIT_COUNT}}}$")


@easypos.value_object
class PhoneNumber:
    """Value object for a customer's phone number.

    Holds eight digits, optionally separated by hyphens (``12345678``,
    ``1234-5678``). The stored value is the trimmed input.
    """

    value: Text(required=True, sanitize=False)

    @invariant.post
    def must_contain_exactly_eight_digits(self):
        if not PHONE_PATTERN.match(self.value or ""):
            raise ValidationError({"value": [f"Invalid phone number: {self.value!r}"]})

    @property
    def digits(self) -> str:
        """The phone number without separators."""
        return self.value.replace("-", "")

    @classmethod
    def create(cls, value) -> "PhoneNumber | None":
        """Build a PhoneNumber from raw input, or return None when it is malformed."""
        if not isinstance(value, str):
            return None

        value = value.strip()
        if not value or not PHONE_PATTERN.match(value):
            return None

        try:
            return cls(value=value)
        except ValidationError:
            return None
