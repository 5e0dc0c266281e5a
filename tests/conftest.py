"""Root conftest — shared test configuration."""

import os

# Tests must not pick up a developer's .env overrides for these
os.environ.setdefault("SEED_BOOKS", "true")
os.environ.setdefault("LOG_FORMAT", "json")
os.environ.setdefault("FORCE_HTTPS", "false")
