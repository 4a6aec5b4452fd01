"""Root conftest — shared test configuration."""

import os

# Tests never touch a real database file unless a fixture builds one explicitly
os.environ.setdefault("SESSION_BACKEND", "memory")
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///:memory:",
)
os.environ.setdefault("LOG_FORMAT", "text")
