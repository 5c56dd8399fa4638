"""Tests for top-level package exports."""

from __future__ import annotations

import unittest

import eventhub


class PackageExportTests(unittest.TestCase):
    """Ensure __getattr__ and exported symbols behave as expected."""

    def test_exports_resolve_known_symbols(self) -> None:
        for name in eventhub.__all__:
            with self.subTest(name=name):
                self.assertIsNotNone(getattr(eventhub, name))

    def test_lazy_exports_are_callable(self) -> None:
        self.assertTrue(callable(eventhub.configure))
        self.assertTrue(callable(eventhub.load_config))
        self.assertEqual(eventhub.ALL_EVENT, "all")

    def test_unknown_symbol_raises_attribute_error(self) -> None:
        with self.assertRaises(AttributeError):
            getattr(eventhub, "THIS_DOES_NOT_EXIST")


if __name__ == "__main__":
    unittest.main()
