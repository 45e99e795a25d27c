"""Root conftest: shared test configuration."""

import os

# Keep tests pointed at a local address; no test opens a real connection
os.environ.setdefault("MONGODB_URI", "mongodb://localhost:27011")
os.environ.setdefault("LOG_FORMAT", "text")
