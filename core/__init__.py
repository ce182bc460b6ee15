"""
Domain Registry Core Library.

This package provides the transport-independent core of the registry:
entities, validation, repositories, services, database management and
logging.

Usage:
    # Database
    from core.db import db, get_db
    from core.models import AccountModel, DomainModel
    from core.repositories import SQLAccountRepository, SQLDomainRepository

    # Services
    from core.services import AccountService, DomainService

    # Config
    from core.config import get_settings, Settings

    # Logging
    from core.logging import get_logger, configure_logging
"""

__version__ = "1.0.0"

# Users should import directly from submodules:
#   from core.db import db
#   from core.config import get_settings
#   from core.logging import get_logger
