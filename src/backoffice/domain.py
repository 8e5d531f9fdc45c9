"""Backoffice bounded context — catalogue, customers, carts and invoicing.

A single Protean domain so that every command (notably invoice generation,
which writes an Invoice and clears a Cart) runs inside one Unit of Work.
"""

from protean.domain import Domain

from backoffice.utils.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging()

# Get logger for this module
logger = get_logger(__name__)

# Domain Composition Root
backoffice = Domain(name="backoffice")
