"""
argset argument sets: own the raw tokens and the declarations, parse, query.

What this module provides
- ArgumentSet: built from a process argument vector; holds Argument
  declarations, runs the match/consume parse loop, answers get()/is_given(),
  enforces required values and renders help.

Quick start
    from argset import ArgumentSet, Argument

    args = (
        ArgumentSet.from_argv()
        .set_name("tool")
        .arg(Argument("file").set_short("f").set_long("file").expects_value().required())
        .arg(Argument("verbose").set_short("v").set_long("verbose"))
        .parse()
    )
    args.get("file")         # -> "input.txt" for: tool -f input.txt
    args.is_given("verbose")  # -> True when -v or --verbose was present

Token grammar
- "--word": long flag, matched against Argument.long.
- "-c": short flag, matched against Argument.short (only the second character counts).
- anything else: ignored (there are no positionals).
- "--help" and "-h": render help and exit with status 0.

Parsing notes
- Every matching declaration is updated, in declaration order.
- A value-taking flag consumes the next token as its value. The consumed token
  is still visited by the outer loop, so a value such as "-x" is also read as a flag.
- A value-taking flag at the very end of the tokens is skipped silently.
- After the scan, the first required declaration without a value is handed to
  terminate(); see argset.faults for the termination sinks.

Lookup notes
- get()/is_given() search by Argument.name; the first declaration wins.
- is_given() is True only for options: a value-taking argument reports False
  even when it was matched. Use get() to test for a value.
"""
import copy
import os.path
import sys
from collections import defaultdict
from collections.abc import Iterable

from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .arguments import Argument
from .faults import *
from .utils import *


class ArgumentSet:
    """
    A collection of Argument declarations bound to one argument vector.

    Lifecycle
    - construct once from the raw process arguments (element 0 is dropped),
    - register declarations with arg(),
    - parse() exactly once (it may not return, see terminate()),
    - query with get() and is_given().

    Runtime flags
    - termination: TerminationType or a sink with __terminate__ (default: EXIT).
    - colorful: style help and diagnostics (ignored when the stream is not a terminal).
    - fancy: wrap help output in a panel.
    """

    tokens = mirror("tokens")
    arguments = mirror("arguments")
    program = mirror("program")
    about = mirror("about")
    author = mirror("author")
    name = mirror("name")
    version = mirror("version")
    termination = mirror("sink")

    def __init__(self, argv, /, *, termination=TerminationType.EXIT, colorful=True, fancy=False):
        if isinstance(argv, str) or not isinstance(argv, Iterable):
            raise TypeError("ArgumentSet() argument must be an iterable of strings")
        argv = list(argv)
        for item in argv:
            if not isinstance(item, str):
                raise TypeError("ArgumentSet() argument must be an iterable of strings")

        # The first element is the invoked program, not an argument.
        self._program = argv[0] if argv else None
        self._tokens = argv[1:]
        self._arguments = []
        self._sink = terminator(termination)
        self._about = None
        self._author = None
        self._name = None
        self._version = "0.0.1"
        self.colorful = bool(colorful)
        self.fancy = bool(fancy)

    @classmethod
    def from_argv(cls, argv=Unset, /, **options):
        """
        Build a set from a raw argument vector (sys.argv when omitted).
        """
        return cls(coalesce(argv, sys.argv), **options)

    @property
    def count(self):
        """
        Number of tokens after the program name (never negative).
        """
        return len(self._tokens)

    def arg(self, argument, /):
        """
        Register a copy of an Argument declaration and return the set.

        No deduplication is done: a later declaration with the same flag is
        updated alongside the earlier one, and lookups by name find the earlier one.
        """
        if not isinstance(argument, Argument):
            raise TypeError("arg() argument must be an Argument")
        self._arguments.append(copy.copy(argument))
        return self

    def get(self, name, /):
        """
        Value of the first declaration called name, or None.
        """
        for argument in self._arguments:
            if argument.name == name:
                return argument.value
        return None

    def is_given(self, name, /):
        """
        True if the first declaration called name is an option that was matched.
        """
        for argument in self._arguments:
            if argument.name == name:
                return argument.is_option and argument.is_given
        return False

    def parse(self):
        """
        Scan the tokens, update the declarations, then check required values.
        """
        for index in range(self.count):
            token = self._tokens[index]
            if token.startswith("--"):
                self._read_long(index)
            elif token.startswith("-"):
                self._read_short(index)

        if (argument := self.missing()) is not None:
            self.terminate(argument)

        return self

    def missing(self):
        """
        First required declaration without a value, or None.
        """
        for argument in self._arguments:
            if argument.is_required and argument.value is None:
                return argument
        return None

    def _read_long(self, index):
        # "--name" -> "name"
        name = self._tokens[index][2:]
        if not name:
            return

        if name == "help":
            self.show_help()

        self._update(index, lambda argument: argument.long == name)

    def _read_short(self, index):
        token = self._tokens[index]
        if len(token) < 2:
            return

        if (short := token[1]) == "h":
            self.show_help()

        self._update(index, lambda argument: argument.short == short)

    def _update(self, index, match):
        for argument in self._arguments:
            if not match(argument):
                continue
            if argument.is_expecting_value:
                # Nothing follows the flag; leave the value unset.
                if index + 1 >= self.count:
                    return
                argument.set_value(self._tokens[index + 1])
            if argument.is_option:
                argument.set_given(True)

    def set_termination_type(self, termination, /):
        """
        Select the termination sink (a TerminationType or an object with __terminate__).
        """
        self._sink = terminator(termination)
        return self

    def set_about(self, about, /):
        self._about = about
        return self

    def set_author(self, author, /):
        self._author = author
        return self

    def set_name(self, name, /):
        self._name = name
        return self

    def set_version(self, version, /):
        self._version = version
        return self

    def terminate(self, argument, /):
        """
        Report argument as missing its required value through the configured sink.

        With ProcessExit this prints "Error: Missing required value for argument '<name>'"
        to stderr and exits; with RaiseError a MissingRequiredValueError is raised.
        """
        trigger(
            MissingRequiredValueError(argument=argument.name),
            sink=self._sink,
            colorful=self.colorful,
        )

    def show_help(self):
        """
        Render help to stdout and exit with status 0.

        Palette keys
        - usage-label, program-name, program-version, about-section, author-section
        - option-name, metavar, required, argument-name, panel-title

        Customization
        - Define a mapping named __styles__ in __main__ to override any palette entry.
        - Define __prog__ in __main__ to override the program name when set_name() was not called.
        """
        main = __import__("__main__")
        console = Console()
        styles = defaultdict(str, {
            # === Head sections ===
            "usage-label": "bold #00E6FF",  # CYAN → signature info color
            "program-name": "bold #FF4D94",  # MAGENTA-PINK → brand pop
            "program-version": "bold #00E6FF",
            "about-section": "italic #A3A3A3",  # Neutral gray
            "author-section": "#737373",  # Dim footer gray

            # === Arguments ===
            "option-name": "bold #22C55E",  # GREEN for flags
            "metavar": "bold #FFD600",  # AMBER for values
            "required": "bold #EF4444",  # RED required marker
            "argument-name": "#9CA3AF",  # Muted gray

            # === Fancy panel ===
            "panel-title": "bold #FF4D94",
        } | getattr(main, "__styles__", {}))

        def styler(style):
            return styles[style] if self.colorful else ""

        def text(fragment, style=""):
            if not fragment:
                return Text("")
            return Text(str(fragment), styler(style))

        program = self._name or getattr(main, "__prog__", None) or (
            os.path.basename(self._program) if self._program else "program"
        )

        def flags(argument):
            names = []
            if argument.short is not None:
                names.append(text("-" + argument.short, "option-name"))
            if argument.long is not None:
                names.append(text("--" + argument.long, "option-name"))
            rendered = Text(", ").join(names)
            if argument.is_expecting_value:
                rendered.append(" ").append(text(f"<{argument.name.upper()}>", "metavar"))
            return rendered

        renders = []

        header = text(program, "program-name")
        if self._version:
            header.append(" ").append(text(self._version, "program-version"))
        renders.append(header)

        if self._about:
            renders.append(text(self._about, "about-section"))
        if self._author:
            renders.append(text(self._author, "author-section"))

        usage = Text()
        usage.append(text("usage", "usage-label")).append(":")
        usage.append(" ")
        usage.append(text(program, "program-name"))
        for argument in self._arguments:
            if argument.is_required:
                usage.append(" ").append(flags(argument))
        usage.append(" [options]")
        renders.append(Text(""))
        renders.append(usage)

        declared = [argument for argument in self._arguments if argument.short or argument.long]
        table = Table.grid(padding=(0, 2))
        table.add_column()
        table.add_column()
        table.add_column()
        table.add_row(text("-h, --help", "option-name"), text("help", "argument-name"), Text(""))
        for argument in declared:
            table.add_row(
                flags(argument),
                text(argument.name, "argument-name"),
                text("required", "required") if argument.is_required else Text(""),
            )
        renders.append(Text(""))
        renders.append(table)

        renderable = Group(*renders)
        if self.fancy:
            renderable = Panel(
                renderable,
                title=Text.assemble("[", " ", f"{program} HELP".upper(), " ", "]", style=styler("panel-title")),
                title_align="left",
            )

        console.print(renderable, highlight=False)
        sys.exit(0)

    def __rich_repr__(self):
        yield "tokens", self.tokens
        yield "arguments", self.arguments
        yield "termination", self.termination

    def __repr__(self):
        return f"{type(self).__name__}(tokens={self.tokens!r}, arguments={self.arguments!r})"


__all__ = (
    "ArgumentSet",
)
