"""
Pennant faults (errors and interruptions) and rendering.

Scope
- ConfigurationError: programmer mistakes found while declaring or querying flags
  (undeclared names, colliding declarations, malformed options). Never meant for
  the end user; they abort program startup.
- PrintableException: user-facing interruptions that know how to render themselves
  through rich and how to end the process (__rich__ / __trigger__).
  • ValidationError: a convertor rejected a raw value.
  • HelpInterruption: help was requested; not an error, ends with status 0.
- trigger(): boundary helper that prints printable faults and re-raises the rest.

Integration
- Convertors raise ValidationError; Arguments.trigger_help() raises HelpInterruption.
- The program's outermost frame catches exceptions and hands them to trigger(),
  which exits for printable faults and lets genuine bugs propagate with a traceback.
"""
import sys
from collections import defaultdict

from rich.console import Console
from rich.text import Text

console = Console(stderr=True)


class ConfigurationError(Exception):
    """Base class of the programmer-mistake faults."""


class NotDeclaredError(ConfigurationError, LookupError):
    def __init__(self, name, /):
        super().__init__("argument %r is not declared" % name)
        self.name = name


class DuplicateDeclarationError(ConfigurationError):
    def __init__(self, name, /):
        super().__init__("argument %r is declared more than once" % name)
        self.name = name


class PrintableException(Exception):
    """
    Base class of the faults meant to be shown to the end user.

    attributes
    - message: the text to print, without traceback.
    - status: the process exit status used by __trigger__.
    - stderr: whether the message belongs on stderr (errors) or stdout (help).
    """
    status = 1
    stderr = True

    def __init__(self, message, /):
        if not isinstance(message, str):
            raise TypeError("%s() argument must be a string" % type(self).__name__)
        super().__init__(message)
        self.message = message

    def __rich__(self):
        styles = defaultdict(str, {
            "message": "bold #FF4DA6",
        } | getattr(__import__("__main__"), "__styles__", {}))
        return Text(self.message, styles["message"])

    def __trigger__(self, *, colorful=False):
        output = console if self.stderr else Console()
        if colorful:
            output.print(self, soft_wrap=True)
        else:
            output.print(self.message, markup=False, highlight=False, soft_wrap=True)
        sys.exit(self.status)


class ValidationError(PrintableException):
    def __init__(self, message, /, value=None):
        super().__init__(message)
        self.value = value


class HelpInterruption(PrintableException):
    status = 0
    stderr = False

    def __rich__(self):
        # the help message carries its own ANSI styling when it was rendered colorful
        return Text.from_ansi(self.message)


def is_printable(error, /):
    """
    tell printable faults (help, validation messages) apart from arbitrary errors.
    """
    return isinstance(error, PrintableException)


def rethrow_unprintable(error, /):
    """
    re-raise the given error unless it is meant for user-facing display.
    """
    if not is_printable(error):
        raise error


def trigger(error, /, *, colorful=False):
    """
    surface a fault at the outermost boundary of a program.

    contract
    - anything that is not a PrintableException is re-raised unchanged.
    - printable faults are printed (help on stdout, the rest on stderr) and
      terminate the process via SystemExit with the fault's status.

    typical usage
        try:
            main(Arguments(flags))
        except Exception as error:
            trigger(error)
    """
    rethrow_unprintable(error)
    error.__trigger__(colorful=colorful)


__all__ = (
    "ConfigurationError",
    "NotDeclaredError",
    "DuplicateDeclarationError",
    "PrintableException",
    "ValidationError",
    "HelpInterruption",
    "is_printable",
    "rethrow_unprintable",
    "trigger",
)
