"""
Shared test setup.

The API suite issues more requests than the default per-minute limit
from a single TestClient address, so the module-level limiter is
switched off before anything imports it. Rate limiting itself is
tested against dedicated RateLimiter instances in test_infra.py.
"""

import os

os.environ["TRUTHSHIELD_RATE_LIMIT"] = "false"
os.environ.setdefault("TRUTHSHIELD_LOG_FORMAT", "text")
