"""Catalogue bounded context — the product catalog and its browsing rules.

Owns product records and the pure filter/sort pipeline the storefront runs
over them.
"""

import os

from protean.domain import Domain

from catalogue.utils.logging import configure_logging, get_logger

# Log files are skipped under test runs
configure_logging(log_dir=None if os.getenv("PROTEAN_ENV") == "test" else os.getenv("LOG_DIR", "logs"))

logger = get_logger(__name__)

# Domain Composition Root
catalogue = Domain(name="catalogue")
