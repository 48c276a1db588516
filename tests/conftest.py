"""Root conftest: shared test configuration."""

import os

# Never read the developer's real config file or history database
os.environ.setdefault("LINKHOP_CONFIG_FILE", "/nonexistent/linkhop-test-config.toml")
os.environ.setdefault("LINKHOP_HISTORY__ENABLED", "false")
os.environ.setdefault(
    "LINKHOP_HISTORY__DATABASE_URL",
    "sqlite+aiosqlite:///:memory:",
)
