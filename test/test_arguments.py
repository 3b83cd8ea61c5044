# python
"""
Arguments module behavioral tests.

Scope
- Validate Argument construction and name/flag sanitization.
- Validate fluent setters (each returns the argument itself).
- Validate value semantics (empty value reads back as None) and the
  expects_value()/is_option invariant.

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from argset import Argument


class TestArgumentConstruction(TestCase):
    """Construction and defaults."""

    def testDefaults(self):
        a = Argument("verbose")
        self.assertEqual(a.name, "verbose")
        self.assertIsNone(a.short)
        self.assertIsNone(a.long)
        self.assertIsNone(a.value)
        self.assertFalse(a.is_expecting_value)
        self.assertFalse(a.is_required)
        self.assertTrue(a.is_option)
        self.assertFalse(a.is_given)

    def testWithNameAlternateConstructor(self):
        a = Argument.with_name("file")
        self.assertIsInstance(a, Argument)
        self.assertEqual(a.name, "file")

    def testEmptyNameRejected(self):
        with self.assertRaises(ValueError):
            Argument("")

    def testNonStringNameRejected(self):
        with self.assertRaises(TypeError):
            Argument(3)

    def testNameIsReadOnly(self):
        a = Argument("file")
        with self.assertRaises(AttributeError):
            a.name = "other"


class TestArgumentSetters(TestCase):
    """Fluent setters and their validation."""

    def testSettersReturnSelf(self):
        a = Argument("file")
        self.assertIs(a.set_short("f"), a)
        self.assertIs(a.set_long("file"), a)
        self.assertIs(a.expects_value(), a)
        self.assertIs(a.required(), a)
        self.assertIs(a.set_value("x"), a)
        self.assertIs(a.set_given(True), a)

    def testChainedDeclaration(self):
        a = Argument("output").set_short("o").set_long("output").expects_value().required()
        self.assertEqual(a.short, "o")
        self.assertEqual(a.long, "output")
        self.assertTrue(a.is_expecting_value)
        self.assertTrue(a.is_required)

    def testShortMustBeSingleCharacter(self):
        with self.assertRaises(ValueError):
            Argument("file").set_short("fi")
        with self.assertRaises(ValueError):
            Argument("file").set_short("")
        with self.assertRaises(TypeError):
            Argument("file").set_short(1)

    def testLongMustBeNonEmptyString(self):
        with self.assertRaises(ValueError):
            Argument("file").set_long("")
        with self.assertRaises(TypeError):
            Argument("file").set_long(None)

    def testSetShortOverwrites(self):
        a = Argument("file").set_short("f").set_short("g")
        self.assertEqual(a.short, "g")

    def testExpectsValueClearsOption(self):
        a = Argument("file")
        self.assertTrue(a.is_option)
        a.expects_value()
        self.assertTrue(a.is_expecting_value)
        self.assertFalse(a.is_option)

    def testExpectsValueTwiceStaysNonOption(self):
        a = Argument("file").expects_value().set_given(True).expects_value()
        self.assertFalse(a.is_option)

    def testSetGivenCoercesToBool(self):
        a = Argument("verbose").set_given(1)
        self.assertIs(a.is_given, True)
        a.set_given(0)
        self.assertIs(a.is_given, False)


class TestArgumentValue(TestCase):
    """Value storage."""

    def testValueRoundTrip(self):
        self.assertEqual(Argument("file").set_value("input.txt").value, "input.txt")

    def testEmptyValueReadsAsAbsent(self):
        a = Argument("file").set_value("")
        self.assertIsNone(a.value)

    def testEmptyValueClearsPreviousValue(self):
        a = Argument("file").set_value("input.txt").set_value("")
        self.assertIsNone(a.value)

    def testNonStringValueRejected(self):
        with self.assertRaises(TypeError):
            Argument("file").set_value(42)


class TestArgumentRepr(TestCase):
    """Representation for diagnostics."""

    def testReprListsFields(self):
        a = Argument("file").set_short("f").expects_value()
        text = repr(a)
        self.assertTrue(text.startswith("argument(name='file', short='f', long=None"))
        self.assertIn("is_option=False", text)

    def testRichReprYieldsIntrospectableFields(self):
        names = [name for name, _ in Argument("file").__rich_repr__()]
        self.assertEqual(tuple(names), Argument.__introspectable__)


if __name__ == "__main__":
    unittest.main()
