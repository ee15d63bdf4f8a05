"""Process entrypoint for the cookbook package.

Web or command line layers import ``service`` from here so that the storage
backend is chosen once, when the process starts.
"""

import logging

from cookbook import create_service
from cookbook.config import get_settings

logging.basicConfig(
    level=get_settings().log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

service = create_service()


__all__ = ["service"]
