"""CSS tokens parsers."""

import functools

import tinycss2
from tinycss2.color3 import parse_color

from .units import ANGLE_UNITS, LENGTH_UNITS, to_number, to_pixels


class InvalidValues(ValueError):  # noqa: N818
    """Invalid or unsupported values for a known CSS property."""


def tokenize(value):
    """Split a raw declaration value into significant tokens.

    ``value`` is a string or a list of component values. Strings are
    unescaped and function calls are kept as single tokens, with their
    arguments available through :func:`function_arguments`.

    """
    if isinstance(value, str):
        value = tinycss2.parse_component_value_list(value)
    return remove_whitespace(value)


def _split_on_literal(tokens, literal):
    parts = []
    this_part = []
    for token in tokens:
        if token.type == 'literal' and token.value == literal:
            parts.append(this_part)
            this_part = []
        else:
            this_part.append(token)
    parts.append(this_part)
    return tuple(parts)


def split_on_comma(tokens):
    """Split a list of tokens on commas, ie ``LiteralToken(',')``.

    Only "top-level" comma tokens are splitting points, not commas inside a
    function or blocks.

    """
    return _split_on_literal(tokens, ',')


def split_on_semicolon(tokens):
    """Split the content of a ``{}`` block on top-level semicolons."""
    return _split_on_literal(tokens, ';')


def remove_whitespace(tokens):
    """Remove any top-level whitespace and comments in a token list."""
    return tuple(
        token for token in tokens
        if token.type not in ('whitespace', 'comment'))


def function_arguments(token):
    """Return the arguments of a function token.

    Arguments are separated by commas, each argument is a tuple of tokens
    without whitespace. Return ``None`` if ``token`` is not a function or if
    an argument is empty.

    """
    if getattr(token, 'type', None) != 'function':
        return
    arguments = tuple(
        remove_whitespace(part) for part in split_on_comma(token.arguments))
    if arguments == ((),):
        return ()
    if () not in arguments:
        return arguments


def classify_token(token):
    """Return the kind of ``token``.

    Kinds are tried in a fixed order, so that a unitless zero is a
    ``'length'`` and a color name is a ``'color'`` rather than a
    ``'keyword'``.

    """
    if token.type == 'string':
        return 'string'
    elif get_length(token) is not None:
        return 'length'
    elif token.type == 'number':
        return 'number'
    elif token.type == 'percentage':
        return 'percentage'
    elif get_color(token) is not None:
        return 'color'
    elif token.type == 'ident':
        return 'keyword'
    elif token.type == 'function':
        return 'function'
    elif token.type == 'dimension':
        return 'dimension'
    return 'literal'


def serialize_token(token):
    """Return the text of ``token``, as written in the stylesheet."""
    return token.serialize()


def get_keyword(token):
    """If ``token`` is a keyword, return its lowercase name.

    Otherwise return ``None``.

    """
    if token.type == 'ident':
        return token.lower_value


def get_single_keyword(tokens):
    """If ``values`` is a 1-element list of keywords, return its name.

    Otherwise return ``None``.

    """
    if len(tokens) == 1:
        token = tokens[0]
        if token.type == 'ident':
            return token.lower_value


def get_string(token):
    """Parse a <string> token."""
    if token.type == 'string':
        return token.value


def get_number(token, negative=True):
    """Parse a <number> token."""
    if token.type == 'number':
        if negative or token.value >= 0:
            if token.int_value is not None:
                return token.int_value
            return to_number(token.value)


def get_length(token, negative=True, percentage=False, auto=False):
    """Parse a <length> token into a number of pixels.

    Percentages are kept as strings, eg. ``'10%'``, and ``auto`` as the
    ``'auto'`` string, when they are allowed.

    """
    if percentage and token.type == 'percentage':
        if negative or token.value >= 0:
            return f'{token.representation}%'
    if token.type == 'dimension' and token.lower_unit in LENGTH_UNITS:
        if negative or token.value >= 0:
            return to_pixels(token.value, token.lower_unit)
    if token.type == 'number' and token.value == 0:
        return 0
    if auto and get_keyword(token) == 'auto':
        return 'auto'


def get_angle(token):
    """Parse an <angle> token, keeping its unit."""
    if token.type == 'dimension' and token.lower_unit in ANGLE_UNITS:
        return f'{token.representation}{token.lower_unit}'


def get_color(token):
    """Parse a <color> token, keeping its text as written."""
    if parse_color(token) is not None:
        return serialize_token(token)


def single_token(function):
    """Decorator for validators that only accept a single token."""
    @functools.wraps(function)
    def single_token_validator(tokens, *args):
        """Validate a property whose token is single."""
        if len(tokens) == 1:
            return function(tokens[0], *args)
    single_token_validator.__func__ = function
    return single_token_validator


def single_keyword(function):
    """Decorator for validators that only accept a single keyword."""
    @functools.wraps(function)
    def keyword_validator(tokens):
        """Wrap a validator to call get_single_keyword on tokens."""
        keyword = get_single_keyword(tokens)
        if function(keyword):
            return keyword
    return keyword_validator
