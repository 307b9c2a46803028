"""
Built-in convertors: raw token values to typed values.

A convertor receives the raw value of a matched Flag token (a string, or True when
the flag stood alone) and returns the typed value. Convertors reject bad input by
raising ValidationError, which reaches the caller of Arguments.get() unchanged.
"""
from .faults import ValidationError

_TRUTHY = frozenset(("true", "1", "yes", "on"))
_FALSY = frozenset(("false", "0", "no", "off"))


def boolean_convertor(value, /):
    """
    True for bare presence and 'true'/'1'/'yes'/'on'; False for None and
    'false'/'0'/'no'/'off'. Any other text is rejected.
    """
    if value is None or value is False:
        return False
    if value is True:
        return True

    text = str(value).strip().lower()
    if text in _TRUTHY:
        return True
    if text in _FALSY:
        return False
    raise ValidationError("expected a boolean value (true/false), got %r" % value, value)


def string_convertor(value, /):
    if value is None:
        return None
    return str(value)


def number_convertor(value, /):
    """
    Integers stay int ('9090' → 9090), anything else numeric becomes float.
    A flag given without a value is rejected.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValidationError("expected a number, got no value", value)

    text = str(value).strip()
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        raise ValidationError("expected a number, got %r" % value, value) from None


__all__ = (
    "boolean_convertor",
    "string_convertor",
    "number_convertor",
)
