r"""
Pennant arguments: declare flags, parse argv once, resolve typed values.

Overview
- Arguments(flags, argv=Unset, *, description=None, colorful=False)
  • flags: declaration specs (see pennant.declarations).
  • argv: the raw items to parse; sys.argv[1:] when left Unset.
  Tokens and declarations are fixed at construction and never re-parsed.

- Lookups
  • get(name): the converted value of the first matching Flag token (long or short
    name), else a fresh default, else None. Undeclared names raise NotDeclaredError.
  • get_flags(): {long_name: value} for every declaration.

- Help
  • is_help_requested(): whether the reserved help flag resolved to True.
  • compute_help_message(): the rendered help text.
  • trigger_help(): raise HelpInterruption carrying the help text.
  • parse(): Continue(values) or HelpRequested(text), without raising for help.

Quick example:
    >>> arguments = Arguments({
    ...     **Arguments.create_help(),
    ...     "port, p": {"convertor": Arguments.number_convertor, "default": lambda: 8080},
    ... }, ["-p", "9090"])
    >>> arguments.get("port")
    9090
"""
import atexit
import sys
import warnings
from typing import NamedTuple, Any

from .convertors import boolean_convertor, string_convertor, number_convertor
from .declarations import HELP_NAMES, build_declarations, create_help, normalize_name
from .faults import HelpInterruption, NotDeclaredError, is_printable, rethrow_unprintable
from .helps import render
from .tokens import Flag, tokenize
from .utils import Unset, view


class Continue(NamedTuple):
    values: dict[str, Any]


class HelpRequested(NamedTuple):
    text: str


class Arguments:
    tokens = view("tokens")
    declarations = view("declarations")

    def __init__(self, flags, /, argv=Unset, *, description=None, colorful=False):
        self._declarations = build_declarations(flags)
        self._tokens = tokenize(sys.argv[1:] if argv is Unset else argv)
        self._description = None
        self._alive = False
        self.colorful = colorful
        if description is not None:
            self.set_description(description)

    def __repr__(self):
        return "%s(%s)" % (type(self).__name__, ", ".join(self._declarations))

    @property
    def description(self):
        return self._description

    def set_description(self, description, /):
        if not isinstance(description, str):
            raise TypeError("set_description() argument must be a string")
        self._description = description.strip()
        return self

    def _find(self, declaration):
        for token in self._tokens:
            if isinstance(token, Flag) and declaration.matches(token.name):
                return token
        return None

    def get(self, name, /):
        """
        resolve the typed value of a declared flag.

        lookup
        - the first Flag token matching the long or the short name (case-insensitive).
        - without a token, the default supplier is called (on every lookup); without a
          default, None is returned.
        - with a token, its raw value goes through the convertor; convertor errors
          propagate as they are.

        errors
        - NotDeclaredError when the name was never declared.
        """
        try:
            declaration = self._declarations[normalize_name(name)]
        except KeyError:
            raise NotDeclaredError(name) from None

        token = self._find(declaration)
        if token is None:
            return declaration.default() if declaration.default is not None else None
        return declaration.convertor(token.value)

    def get_flags(self):
        return {name: self.get(name) for name in self._declarations}

    def is_help_requested(self):
        if HELP_NAMES[0] not in self._declarations:
            return False
        return self.get(HELP_NAMES[0]) is True

    def should_help(self):
        warnings.warn("should_help() is deprecated, use is_help_requested() instead", DeprecationWarning, stacklevel=2)
        return self.is_help_requested()

    def keep_process_alive(self, message="Press Enter key to exit the process...", /):
        """
        wait for one line of input when the interpreter exits (registered once).
        """
        if self._alive:
            return
        self._alive = True

        def prompt():
            try:
                input(message)
            except EOFError:  # stdin closed
                pass

        atexit.register(prompt)

    def compute_help_message(self):
        return render(self._description, self._declarations, colorful=self.colorful)

    def trigger_help(self):
        raise HelpInterruption(self.compute_help_message())

    def parse(self):
        """
        resolve everything at once, branching on help without exceptions.

        returns
        - HelpRequested(text) when the help flag is set.
        - Continue(values) with get_flags() otherwise.
        """
        if self.is_help_requested():
            return HelpRequested(self.compute_help_message())
        return Continue(self.get_flags())

    @staticmethod
    def is_printable_exception(error, /):
        return is_printable(error)

    @staticmethod
    def rethrow_unprintable_exception(error, /):
        rethrow_unprintable(error)

    create_help = staticmethod(create_help)

    boolean_convertor = staticmethod(boolean_convertor)
    number_convertor = staticmethod(number_convertor)
    string_convertor = staticmethod(string_convertor)


__all__ = (
    "Arguments",
    "Continue",
    "HelpRequested",
)
