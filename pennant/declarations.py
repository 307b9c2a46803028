"""
Declaration registry: user flag specs to normalized, read-only declarations.

Spec shape
- name: "port" or "config, c" (the second comma segment is an inline short name).
- options: a mapping with the recognized keys
  • convertor: Callable[[str | bool | None], T | None] (defaults to string_convertor)
  • short_name: str, one character kept; wins over the inline short name
  • description: str, split into lines for help rendering
  • default: Callable[[], T], invoked on every lookup that falls back to it
  • exclude_from_help: bool, hides the flag from the rendered help

Normalization
- long names are stripped and lower-cased; short names too, then cut to one character.
- two specs normalizing to the same long name fail with DuplicateDeclarationError.
"""
from collections.abc import Callable, Iterable, Mapping
from types import MappingProxyType
from typing import NamedTuple, Any

from .convertors import boolean_convertor, string_convertor
from .faults import ConfigurationError, DuplicateDeclarationError

HELP_NAMES = ("help", "h")

_OPTIONS = frozenset(("convertor", "short_name", "description", "default", "exclude_from_help"))


class FlagDeclaration(NamedTuple):
    long_name: str
    short_name: str | None
    description: tuple[str, ...]
    default: Callable[[], Any] | None
    convertor: Callable[[Any], Any]
    exclude_from_help: bool

    def matches(self, name, /):
        name = normalize_name(name)
        return name == self.long_name or (self.short_name is not None and name == self.short_name)


def normalize_name(name, /):
    return name.strip().lower()


def normalize_short_name(name, /):
    return normalize_name(name)[:1] or None


def _declare(name, options):
    if not isinstance(name, str):
        raise ConfigurationError("argument name must be a string, got %r" % (name,))
    if not isinstance(options, Mapping):
        raise ConfigurationError("options of argument %r must be a mapping" % name)
    if unknown := set(options) - _OPTIONS:
        raise ConfigurationError("unknown option(s) %s for argument %r" % (", ".join(sorted(map(repr, unknown))), name))

    long_name, _, inline = name.partition(",")
    if not (long_name := normalize_name(long_name)):
        raise ConfigurationError("argument name %r has no long name" % name)

    # an explicit short_name option takes precedence over the inline form
    short_name = options.get("short_name") or inline
    if not isinstance(short_name, str):
        raise ConfigurationError("short_name of argument %r must be a string" % long_name)
    short_name = normalize_short_name(short_name) if short_name else None

    convertor = options.get("convertor", string_convertor)
    if not callable(convertor):
        raise ConfigurationError("convertor of argument %r must be callable" % long_name)

    default = options.get("default")
    if default is not None and not callable(default):
        raise ConfigurationError("default of argument %r must be a zero-argument callable" % long_name)

    description = options.get("description")
    if description is not None and not isinstance(description, str):
        raise ConfigurationError("description of argument %r must be a string" % long_name)
    description = tuple(description.strip().split("\n")) if description else ()

    return FlagDeclaration(
        long_name=long_name,
        short_name=short_name,
        description=description,
        default=default,
        convertor=convertor,
        exclude_from_help=bool(options.get("exclude_from_help", False)),
    )


def build_declarations(specs, /):
    """
    build the read-only mapping of declarations, keyed by normalized long name.

    parameters
    - specs: Mapping[str, Mapping] or Iterable[tuple[str, Mapping]], in declaration order.

    returns
    - MappingProxyType[str, FlagDeclaration] preserving declaration order.

    errors
    - ConfigurationError for malformed specs.
    - DuplicateDeclarationError when two specs share a normalized long name.
    """
    if isinstance(specs, Mapping):
        specs = specs.items()
    elif isinstance(specs, str) or not isinstance(specs, Iterable):
        raise ConfigurationError("flag specs must be a mapping or an iterable of (name, options) pairs")

    declarations = {}
    for name, options in specs:
        declaration = _declare(name, options)
        if declaration.long_name in declarations:
            raise DuplicateDeclarationError(declaration.long_name)
        declarations[declaration.long_name] = declaration

    return MappingProxyType(declarations)


def create_help():
    """
    the reserved help/h boolean flag spec, hidden from its own listing.

    usage
        Arguments({**Arguments.create_help(), "port": {...}})
    """
    return {
        HELP_NAMES[0]: {
            "convertor": boolean_convertor,
            "short_name": HELP_NAMES[1],
            "description": "Show this help message.",
            "exclude_from_help": True,
        }
    }


__all__ = (
    "FlagDeclaration",
    "normalize_name",
    "normalize_short_name",
    "build_declarations",
    "create_help",
    "HELP_NAMES",
)
