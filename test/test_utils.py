"""
Tests for the Unset sentinel and the small helpers in argset.utils.
"""
import unittest
from unittest import TestCase

from argset.utils import *


class UnsetTest(TestCase):

    def testSingleton(self):
        self.assertIs(UnsetType(), Unset)

    def testFalsy(self):
        self.assertFalse(Unset)
        self.assertIsNot(Unset, None)

    def testRepr(self):
        self.assertEqual(repr(Unset), "Unset")

    def testFinal(self):
        with self.assertRaises(TypeError):
            type("Sub", (UnsetType,), {})


class CoalesceTest(TestCase):

    def testUnsetReplaced(self):
        self.assertEqual(coalesce(Unset, "fallback"), "fallback")
        self.assertIsNone(coalesce(Unset))

    def testFalseyPreserved(self):
        self.assertIsNone(coalesce(None, "fallback"))
        self.assertEqual(coalesce("", "fallback"), "")
        self.assertEqual(coalesce(0, "fallback"), 0)


class MirrorTest(TestCase):

    def testReadOnly(self):
        class Holder:
            _items = "value"
            items = mirror("items")

        holder = Holder()
        self.assertEqual(holder.items, "value")
        with self.assertRaises(AttributeError):
            holder.items = "other"

    def testListsExposedAsTuples(self):
        class Holder:
            items = mirror("items")

            def __init__(self):
                self._items = [1, 2]

        holder = Holder()
        self.assertEqual(holder.items, (1, 2))
        self.assertIsNot(holder.items, holder._items)

    def testGetterName(self):
        self.assertEqual(mirror("items").fget.__name__, "items")

    def testRejectsNonString(self):
        with self.assertRaises(TypeError):
            mirror(1)


if __name__ == '__main__':
    unittest.main()
