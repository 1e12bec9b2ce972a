"""vulncheck_examples package: app/components/config/core/infra.

Expose the client factory and configuration at the package level.
"""

from .app.container import provide_client
from .config.settings import AppConfig

import logging

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

__all__ = [
    "AppConfig",
    "provide_client",
]
