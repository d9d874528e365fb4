"""
Pytest configuration for api-gateway tests
"""

import os

# Settings are read at import time; provide test values before app is imported
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("JWT_SECRET", "test-secret-key-with-at-least-32-bytes")
os.environ.setdefault("LOG_LEVEL", "WARNING")


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "asyncio: mark test as an asyncio test."
    )
