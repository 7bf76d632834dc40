"""Root conftest — shared test configuration."""

import os

# Keep tests off real databases and pin the allowed CORS origin
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///:memory:",
)
os.environ.setdefault("FRONT_END_URL", "http://localhost:5173")
os.environ.setdefault("LOG_FORMAT", "text")
