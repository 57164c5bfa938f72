"""Test utilities for livedev.

    from livedev.testing import TestClient
"""

from livedev.testing.client import TestClient

__all__ = ["TestClient"]
