"""Domain initialization and configuration."""

from protean.domain import Domain

from easypos.utils.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging()

logger = get_logger(__name__)

# Domain Composition Root
easypos = Domain(name="easypos")
