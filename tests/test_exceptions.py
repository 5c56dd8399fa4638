"""Tests for domain exception hierarchy."""

from __future__ import annotations

import unittest

from eventhub.exceptions import ConfigValidationError, EventHubError, MixTargetError


class ExceptionHierarchyTests(unittest.TestCase):
    """Validate exception inheritance contract."""

    def test_exception_hierarchy(self) -> None:
        self.assertTrue(issubclass(MixTargetError, EventHubError))
        self.assertTrue(issubclass(MixTargetError, TypeError))
        self.assertTrue(issubclass(ConfigValidationError, EventHubError))
        self.assertTrue(issubclass(EventHubError, RuntimeError))


if __name__ == "__main__":
    unittest.main()
