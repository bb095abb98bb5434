import pytest
from easypos.shared.address import Address
from protean.exceptions import IncorrectUsageError
from protean.utils import DomainObjects


def _address(**overrides):
    data = {
        "country": "Costa Rica",
        "line1": "Avenida Central 120",
        "line2": "Local 4",
        "city": "San Jose",
        "state": "San Jose",
        "zip_code": "10101",
    }
    data.update(overrides)
    return Address.create(**data)


def test_address_element_type():
    assert Address.element_type == DomainObjects.VALUE_OBJECT


def test_create_with_all_fields():
    address = _address()
    assert address.country == "Costa Rica"
    assert address.line1 == "Avenida Central 120"
    assert address.line2 == "Local 4"
    assert address.city == "San Jose"
    assert address.state == "San Jose"
    assert address.zip_code == "10101"


def test_create_trims_every_field():
    address = Address.create("  US ", " 1 Main St ", "  Apt 2  ", " Springfield ", " IL ", " 62704 ")
    assert address.country == "US"
    assert address.line1 == "1 Main St"
    assert address.line2 == "Apt 2"
    assert address.city == "Springfield"
    assert address.state == "IL"
    assert address.zip_code == "62704"


@pytest.mark.parametrize("line2", [None, "", "   "], ids=["none", "empty", "whitespace"])
def test_line2_defaults_to_empty_string(line2):
    address = _address(line2=line2)
    assert address is not None
    assert address.line2 == ""


@pytest.mark.parametrize("field", ["country", "line1", "city", "state", "zip_code"])
@pytest.mark.parametrize("value", [None, "", "   "], ids=["none", "empty", "whitespace"])
def test_create_rejects_missing_required_field(field, value):
    assert _address(**{field: value}) is None


def test_create_accepts_long_parts():
    address = _address(city="x" * 51, line1="y" * 300)
    assert address is not None
    assert address.city == "x" * 51
    assert address.line1 == "y" * 300


def test_create_keeps_markup_characters_verbatim():
    address = _address(line1=" Calle 5 & 6 <b> ", city="San Jose > Centro")
    assert address.line1 == "Calle 5 & 6 <b>"
    assert address.city == "San Jose > Centro"
    assert address.full_address.startswith("Calle 5 & 6 <b>, Local 4, San Jose > Centro, ")


def test_full_address_lists_parts_in_order():
    address = _address()
    assert address.full_address == "Avenida Central 120, Local 4, San Jose, San Jose 10101, Costa Rica"


def test_full_address_skips_empty_line2():
    address = _address(line2=None)
    assert address.full_address == "Avenida Central 120, San Jose, San Jose 10101, Costa Rica"
    assert ", ," not in address.full_address
    assert not address.full_address.endswith(",")


def test_addresses_compare_by_value():
    assert _address() == _address(line1="  Avenida Central 120  ")
    assert _address() != _address(line2=None)


def test_address_is_immutable():
    address = _address()
    with pytest.raises(IncorrectUsageError):
        address.city = "Cartago"
