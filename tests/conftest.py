"""
Shared test configuration.

Settings are read when the application package is imported, so the
environment is prepared here, before any test module imports it.
"""

import os

os.environ.setdefault("API_KEY", "test-api-key")
os.environ.setdefault("UPSTREAM_BASE_URI", "https://upstream.test")
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["RATE_LIMIT_DEFAULT"] = "5/minute"
