"""Test utilities for headerecho applications."""

from headerecho.testing.client import TestClient, build_scope

__all__ = ["TestClient", "build_scope"]
