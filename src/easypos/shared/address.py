"""Address value object for customer postal addresses."""

from protean.exceptions import ValidationError
from protean.fields import Text

from easypos.domain import easypos

REQUIRED_FIELDS = ("country", "line1", "city", "state", "zip_code")


@easypos.value_object
class Address:
    """A postal address. ``line2`` is the only optional part.

    Parts are kept exactly as given after trimming; column widths belong to
    the storage and request layers.
    """

    country: Text(required=True, sanitize=False)
    line1: Text(required=True, sanitize=False)
    line2: Text(default="", sanitize=False)
    city: Text(required=True, sanitize=False)
    state: Text(required=True, sanitize=False)
    zip_code: Text(required=True, sanitize=False)

    @property
    def full_address(self) -> str:
        """Single-line rendering: ``line1, line2, city, state zip_code, country``.

        Empty parts are left out so the result never carries a dangling separator.
        """
        region = " ".join(part for part in (self.state, self.zip_code) if part)
        parts = (self.line1, self.line2, self.city, region, self.country)
        return ", ".join(part for part in parts if part)

    @classmethod
    def create(cls, country, line1, line2, city, state, zip_code) -> "Address | None":
        """Build an Address from raw input, or return None when a required part is missing.

        Every part is trimmed; a missing ``line2`` becomes an empty string.
        """
        raw = {
            "country": country,
            "line1": line1,
            "line2": line2,
            "city": city,
            "state": state,
            "zip_code": zip_code,
        }
        values = {}
        for name, value in raw.items():
            if value is None:
                value = ""
            elif not isinstance(value, str):
                return None
            values[name] = value.strip()

        if any(not values[name] for name in REQUIRED_FIELDS):
            return None

        try:
            return cls(**values)
        except ValidationError:
            return None
