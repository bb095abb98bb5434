import pytest
from easypos.shared.phone import PhoneNumber
from protean.exceptions import IncorrectUsageError, ValidationError
from protean.utils import DomainObjects


def test_phone_number_element_type():
    assert PhoneNumber.element_type == DomainObjects.VALUE_OBJECT


def test_phone_number_requires_value():
    with pytest.raises(ValidationError):
        PhoneNumber()


def test_direct_construction_enforces_digit_count():
    with pytest.raises(ValidationError):
        PhoneNumber(value="1234567")


@pytest.mark.parametrize(
    "value",
    [
        "12345678",
        "1234-5678",
        "12-34-56-78",
        "-12345678-",
        "1-2-3-4-5-6-7-8",
        "12345678" + "-" * 13,
    ],
    ids=[
        "digits_only",
        "single_hyphen",
        "pairs",
        "leading_and_trailing_hyphen",
        "every_digit_separated",
        "long_hyphen_run",
    ],
)
def test_create_accepts_eight_digit_numbers(value):
    phone = PhoneNumber.create(value)
    assert phone is not None
    assert phone.value == value


@pytest.mark.parametrize(
    "value",
    [
        None,
        "",
        "   ",
        "123",
        "1234567",
        "123456789",
        "1234 5678",
        "1234.5678",
        "+1234567",
        "abcdefgh",
        "1234-567a",
        12345678,
    ],
    ids=[
        "none",
        "empty",
        "whitespace",
        "too_few_digits",
        "seven_digits",
        "nine_digits",
        "space_separator",
        "dot_separator",
        "plus_prefix",
        "letters",
        "letter_mixed",
        "not_a_string",
    ],
)
def test_create_rejects_malformed_numbers(value):
    assert PhoneNumber.create(value) is None


def test_create_stores_trimmed_value():
    phone = PhoneNumber.create("  1234-5678 \t")
    assert phone.value == "1234-5678"


def test_digits_strips_separators():
    assert PhoneNumber.create("12-34-5678").digits == "12345678"


def test_phone_numbers_compare_by_value():
    assert PhoneNumber.create("12345678") == PhoneNumber.create(" 12345678 ")
    assert PhoneNumber.create("12345678") != PhoneNumber.create("1234-5678")


def test_phone_number_is_immutable():
    phone = PhoneNumber.create("12345678")
    with pytest.raises(IncorrectUsageError):
        phone.value = "87654321"
