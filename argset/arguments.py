r"""
argset argument declarations.

Overview
- Argument: one named command-line argument. It holds the declaration
  (short letter, long name, value requirement, required-ness) and the state
  written by ArgumentSet.parse() (value, given).

- Kinds
  • option (default): presence-only switch, e.g. -v/--verbose. Parsing marks it given.
  • value-taking: declared with expects_value(); the token that follows the
    matching flag becomes its value. A value-taking argument is never an option.

Fluent setters
- Every setter returns the argument itself so declarations read as one chain:
    >>> Argument("output").set_short("o").set_long("output").expects_value().required()
    argument(name='output', short='o', long='output', ...)

Value semantics
- set_value("") stores an empty string, but value reads it back as None: an
  empty value and a missing value are indistinguishable.

Public API
- Classes: Argument
"""
import functools
import operator

from .utils import *


def _sanitize_string(typename, field, object, /):
    """
    Internal: validate a string field and return it unchanged.

    Raises
    - TypeError: when object is not a string.
    - ValueError: when object is an empty string.
    """
    if not isinstance(object, str):
        raise TypeError(f"{typename} {field!r} must be a string")
    elif not object:
        raise ValueError(f"{typename} {field!r} cannot be empty")
    return object


class Argument:
    """
    Declaration and parse-time state of a single named argument.

    The name is the identifier used by ArgumentSet.get()/is_given(); it is
    unrelated to the spelling on the command line, which is configured through
    set_short() and set_long().

    Properties
    - The names listed in __introspectable__ are exposed as read-only attributes.
    """

    __typename__ = "argument"
    __introspectable__ = (
        "name",
        "short",
        "long",
        "value",
        "is_expecting_value",
        "is_required",
        "is_option",
        "is_given",
    )

    name = mirror("name")
    short = mirror("short")
    long = mirror("long")
    is_expecting_value = mirror("expecting_value")
    is_required = mirror("required")
    is_option = mirror("option")
    is_given = mirror("given")

    def __init__(self, name, /):
        self._name = _sanitize_string(self.__typename__, "name", name)
        self._short = None
        self._long = None
        self._value = ""
        self._required = False
        self._expecting_value = False
        self._option = True
        self._given = False

    @classmethod
    def with_name(cls, name, /):
        """
        Alternate constructor, reads better at the head of a fluent chain.
        """
        return cls(name)

    @property
    def value(self):
        """
        The parsed value, or None when no (or an empty) value was set.
        """
        return self._value or None

    def set_short(self, short, /):
        """
        Set the single character matched against "-x" tokens.
        """
        _sanitize_string(self.__typename__, "short", short)
        if len(short) != 1:
            raise ValueError(f"{self.__typename__} 'short' must be a single character")
        self._short = short
        return self

    def set_long(self, long, /):
        """
        Set the word matched against "--word" tokens (given without the dashes).
        """
        self._long = _sanitize_string(self.__typename__, "long", long)
        return self

    def set_value(self, value, /):
        if not isinstance(value, str):
            raise TypeError(f"{self.__typename__} 'value' must be a string")
        self._value = value
        return self

    def expects_value(self):
        """
        Make this a value-taking argument.

        The following token becomes the value when the flag is matched, and the
        argument stops being a presence-only option.
        """
        self._expecting_value = True
        self._option = False
        return self

    def required(self):
        """
        Require a value by the end of parsing (only value-taking arguments can satisfy it).
        """
        self._required = True
        return self

    def set_given(self, given, /):
        self._given = bool(given)
        return self

    def __rich_repr__(self):
        for name in type(self).__introspectable__:
            yield name, getattr(self, name)

    def __repr__(self):
        return f"{type(self).__typename__}({', '.join(map(functools.partial(operator.mod, '%s=%r'), self.__rich_repr__()))})"


__all__ = (
    # Classes
    "Argument",
)
