r"""
Pennant tokenizer: raw argv items to ordered, immutable tokens.

Tokens
- Flag(name, value): a dash-prefixed item. name carries no dashes and keeps its
  original casing; value is the literal string after '=' (or the following item),
  or True when the flag stands alone.
- Command(name): a bare item without a dash prefix.

Rules (applied left to right)
- '--name=value' → Flag('name', 'value'); the split happens once, on the first '='.
- '--name value' → Flag('name', 'value') when the next item does not start with '-';
  otherwise Flag('name', True) and the next item is classified on its own.
- '-abc'         → Flag('a', True), Flag('b', True), Flag('c', ...) where the last
  character of the bundle follows the '--name' rule above ('-p 9090' carries '9090').
- '-abc=value'   → Flag('a', 'value'); the characters between the first one and '='
  are discarded.
- '--'           → skipped, produces no token.
- '-'            → Command('-').
- anything else  → Command(item).

The tokenizer never fails on string input; validation belongs to the convertors.
The literal texts 'true'/'false' are kept as strings.
"""
from collections.abc import Iterable
from typing import NamedTuple


class Flag(NamedTuple):
    name: str
    value: str | bool = True


class Command(NamedTuple):
    name: str


def _flagged(item):
    return item.startswith("-")


def tokenize(argv, /):
    """
    classify raw argv items into a tuple of Flag and Command tokens.

    parameters
    - argv: Iterable[str]
      the raw items, without the program name (e.g. sys.argv[1:]).

    returns
    - tuple[Flag | Command, ...] in input order.

    errors
    - TypeError when argv is a plain string or holds a non-string item.
    """
    if isinstance(argv, str) or not isinstance(argv, Iterable):
        raise TypeError("tokenize() argument must be an iterable of strings")

    items = list(argv)
    for item in items:
        if not isinstance(item, str):
            raise TypeError("tokenize() argument must be an iterable of strings")

    tokens = []
    index = 0
    while index < len(items):
        item = items[index]
        index += 1

        if item == "--":
            continue

        if item == "-" or not _flagged(item):
            tokens.append(Command(item))
            continue

        if item.startswith("--"):
            body = item[2:]
            if "=" in body:
                name, value = body.split("=", 1)
                tokens.append(Flag(name, value))
                continue
            names = [body]
        else:
            body = item[1:]
            if "=" in body:
                name, value = body.split("=", 1)
                # '-=value' has no short name to keep
                tokens.append(Flag(name[:1], value))
                continue
            names = list(body)

        *bundled, last = names
        tokens.extend(Flag(name, True) for name in bundled)

        if index < len(items) and not _flagged(items[index]):
            tokens.append(Flag(last, items[index]))
            index += 1
        else:
            tokens.append(Flag(last, True))

    return tuple(tokens)


__all__ = (
    "Flag",
    "Command",
    "tokenize",
)
