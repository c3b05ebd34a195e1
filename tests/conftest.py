"""Root conftest — shared test configuration."""

import os

# Keep test output readable; JSON logs are for production
os.environ.setdefault("LOG_FORMAT", "text")
