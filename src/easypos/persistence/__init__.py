"""Unit of work factory.

Provides get_unit_of_work() / set_unit_of_work_factory() to swap persistence:
- ProteanUnitOfWork for the running application (default)
- InMemoryUnitOfWork for development and testing
"""

from collections.abc import Callable

from easypos.persistence.protean_adapter import ProteanUnitOfWork
from easypos.shared.unit_of_work import UnitOfWork

_unit_of_work_factory: Callable[[], UnitOfWork] | None = None


def get_unit_of_work() -> UnitOfWork:
    """Return a fresh unit of work. Defaults to ProteanUnitOfWork."""
    factory = _unit_of_work_factory or ProteanUnitOfWork
    return factory()


def set_unit_of_work_factory(factory: Callable[[], UnitOfWork]) -> None:
    """Override how units of work are built (useful for tests)."""
    global _unit_of_work_factory
    _unit_of_work_factory = factory


def reset_unit_of_work_factory() -> None:
    """Reset to the default factory."""
    global _unit_of_work_factory
    _unit_of_work_factory = None
