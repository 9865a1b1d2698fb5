"""Root conftest — shared test configuration."""

import os

# Keep the module-level app from mounting a developer's local static directory
os.environ.setdefault("STATIC_DIR", "tests/.no-static-dir")
os.environ.setdefault("LOG_FORMAT", "text")
