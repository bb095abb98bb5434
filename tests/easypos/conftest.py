import pytest
from easypos.customer.creation import CreateCustomer
from easypos.persistence.fake_adapter import InMemoryUnitOfWork


def valid_command_data(**overrides):
    data = {
        "name": "Ana",
        "last_name": "Torres",
        "email": "ana.torres@example.com",
        "phone_number": "12345678",
        "country": "Costa Rica",
        "line1": "Avenida Central 120",
        "line2": "Local 4",
        "city": "San Jose",
        "state": "San Jose",
        "zip_code": "10101",
    }
    data.update(overrides)
    return data


@pytest.fixture()
def command_data():
    return valid_command_data()


@pytest.fixture()
def make_command():
    def _make(**overrides):
        return CreateCustomer(**valid_command_data(**overrides))

    return _make


@pytest.fixture()
def unit_of_work():
    return InMemoryUnitOfWork()
