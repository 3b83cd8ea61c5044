"""
argset faults (errors) and termination sinks.

Scope
- FaultCode: stable numeric identifiers for user-facing issues.
- ArgumentException: base type that carries message + options and knows how to
  hand itself to a termination sink.
- MissingRequiredValueError: a required argument ended parsing without a value.
- Termination sinks: where a triggered fault ends up.
  • ProcessExit(code): print a single diagnostic line to stderr, then exit.
  • RaiseError(): raise the fault so embedding callers can recover.
- TerminationType / terminator(): select a sink by name at configuration time.
- trigger(): central entry point to surface any fault.

Integration
- ArgumentSet builds the fault and calls trigger(fault, sink=..., colorful=...).
- Hosts may pass any object with a __terminate__(fault) method as a sink.
"""
import copy
import sys
from collections import defaultdict
from enum import Enum, IntEnum
from types import MappingProxyType

from rich.console import Console
from rich.text import Text

from .utils import Unset, UnsetType

console = Console(stderr=True)


class FaultCode(IntEnum):
    """
    canonical fault codes (stable identifiers).

    - normalize() allows host remapping to custom labels through a __codes__
      mapping on __main__; the numeric value is used otherwise.
    """
    MISSING_REQUIRED_VALUE = 11117

    def normalize(self):
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


class ArgumentException(Exception):
    def __init__(self, message=Unset, /, **options):
        assert isinstance(message, str | UnsetType)
        super().__init__(message)
        self.message = message
        self.options = MappingProxyType(options)

    def __str__(self):
        return str(self.message)

    def __rich__(self):
        styles = defaultdict(str, {
            "error-label": "bold #FF4DA6",  # friendly pinky label
            "error-message": "#C8C8D0",  # soft light gray message
        } | getattr(__import__("__main__"), "__styles__", {}))

        colorful = self.options.get("colorful", False)

        return Text.assemble(
            ("Error:", styles["error-label"] if colorful else ""),
            " ",
            (str(self.message), styles["error-message"] if colorful else ""),
        )

    def __trigger__(self) -> None:
        self.options.get("sink", RaiseError()).__terminate__(self)

    def __replace__(self, *unused, **overrides):
        assert not unused, "unused arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class MissingRequiredValueError(ArgumentException):
    """
    A required argument has no value after parsing.

    The offending argument's name is available as the 'argument' attribute.
    """

    def __init__(self, message=Unset, /, **options):
        options.setdefault("code", FaultCode.MISSING_REQUIRED_VALUE)
        if message is Unset and "argument" in options:
            message = f"Missing required value for argument '{options['argument']}'"
        super().__init__(message, **options)

    @property
    def argument(self):
        return self.options.get("argument")

    @property
    def code(self):
        return self.options["code"]


class ProcessExit:
    """
    Sink that ends the process: one diagnostic line on stderr, then sys.exit(code).
    """

    def __init__(self, code=1, /):
        if not isinstance(code, int):
            raise TypeError("ProcessExit() argument must be an integer")
        self.code = code

    def __terminate__(self, fault, /):
        console.print(fault, soft_wrap=True, highlight=False)
        sys.exit(self.code)

    def __repr__(self):
        return f"{type(self).__name__}({self.code})"


class RaiseError:
    """
    Sink that raises the fault; nothing is written.
    """

    def __terminate__(self, fault, /):
        raise fault from None

    def __repr__(self):
        return f"{type(self).__name__}()"


class TerminationType(Enum):
    EXIT = "exit"
    EXCEPTION = "exception"


def terminator(object, /):
    """
    resolve a TerminationType (or a ready sink) into a termination sink.

    contract
    - TerminationType.EXIT -> ProcessExit(1)
    - TerminationType.EXCEPTION -> RaiseError()
    - any object with a callable __terminate__ is returned unchanged.
    """
    match object:
        case TerminationType.EXIT:
            return ProcessExit()
        case TerminationType.EXCEPTION:
            return RaiseError()
    if not callable(getattr(object, "__terminate__", None)):
        raise TypeError("terminator() argument must be a termination type or have a __terminate__ method")
    return object


def trigger(fault, /, **options):
    """
    surface a fault with the given runtime options.

    contract
    - fault must provide __trigger__ and __replace__ methods (see ArgumentException).
    - options are merged into the fault via copy.replace(fault, **options) before triggering.

    typical options
    - sink, colorful, argument, code.
    """
    if (
        not hasattr(fault, "__trigger__") or
        not callable(fault.__trigger__) or
        not hasattr(fault, "__replace__") or
        not callable(fault.__replace__)
    ):
        raise TypeError("trigger() argument must have a __trigger__ and __replace__ methods")
    copy.replace(fault, **options).__trigger__()


__all__ = (
    "ArgumentException",
    "MissingRequiredValueError",
    "ProcessExit",
    "RaiseError",
    "TerminationType",
    "FaultCode",
    "terminator",
    "trigger",
)
