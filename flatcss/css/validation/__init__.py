"""Validate properties and expanders, map them to attribute names."""

import re

import tinycss2
from tinycss2 import serialize

from ...logger import LOGGER
from ..tokens import InvalidValues, split_on_semicolon, tokenize
from .expanders import EXPANDERS
from .properties import validate_non_shorthand

HYPHENATED_LETTER = re.compile(r'-([a-z])')


class DeclarationParseError(ValueError):
    """Declaration whose value can't be turned into attributes.

    :attr name:
        the medial-capital name of the property, or ``None`` when the
        declaration is too broken to have a name.
    :attr value:
        the value of the declaration as written, or the whole source text of
        the declaration when it has no name.
    :attr reason: the reason why the declaration is invalid, or ``None``.

    """
    def __init__(self, name, value, reason=None):
        declaration = value if name is None else f'{name}: {value}'
        super().__init__(f'Failed to parse declaration "{declaration}"')
        self.name = name
        self.value = value
        self.reason = reason


def to_attribute_name(name):
    """Map a hyphenated property name to its medial-capital attribute name.

    >>> to_attribute_name('border-top-left-radius')
    'borderTopLeftRadius'

    """
    return HYPHENATED_LETTER.sub(lambda match: match.group(1).upper(), name)


def preprocess_declarations(content):
    """Expand shorthand properties and map names to attribute names.

    ``content`` is the content of a ``{}`` block, as a string or as a list of
    component values. Log a message for every ignored declaration, raise
    :exc:`DeclarationParseError` for the first invalid one, syntax errors and
    nested rules included.

    Return a iterable of ``(attribute_name, value)`` tuples.

    """
    if isinstance(content, str):
        content = tinycss2.parse_component_value_list(content)
    for part in split_on_semicolon(content):
        part = [token for token in part if token.type != 'comment']
        nodes = tinycss2.parse_blocks_contents(
            part, skip_comments=True, skip_whitespace=True)
        for node in nodes:
            if node.type == 'declaration':
                yield from _preprocess_declaration(node)
                continue

            if node.type == 'error':
                reason = node.message
            else:
                reason = 'nested rules are not supported'
            source = serialize(part).strip()
            LOGGER.debug(
                'Invalid `%s` at %d:%d, %s.',
                source, node.source_line, node.source_column, reason)
            raise DeclarationParseError(None, source, reason)


def _preprocess_declaration(declaration):
    name = declaration.name
    if not name.startswith('--'):
        name = declaration.lower_name
    value = serialize(declaration.value).strip()

    def validation_error(reason):
        LOGGER.debug(
            'Ignored `%s: %s` at %d:%d, %s.',
            declaration.name, value,
            declaration.source_line, declaration.source_column, reason)

    if name.startswith('--'):
        validation_error('custom properties are not supported')
        return

    if name.startswith('-'):
        validation_error('prefixed properties are ignored')
        return

    validator = EXPANDERS.get(name, validate_non_shorthand)
    tokens = tokenize(declaration.value)
    try:
        # Having no tokens is allowed by grammar but refused by all
        # properties and expanders.
        if not tokens:
            raise InvalidValues('no value')
        # Use list() to consume generators now and catch any error.
        result = list(validator(tokens, name))
    except InvalidValues as exception:
        reason = (
            exception.args[0] if exception.args and exception.args[0]
            else 'invalid value')
        LOGGER.debug(
            'Invalid `%s: %s` at %d:%d, %s.',
            declaration.name, value,
            declaration.source_line, declaration.source_column, reason)
        raise DeclarationParseError(
            to_attribute_name(name), value, reason) from exception

    for long_name, long_value in result:
        yield to_attribute_name(long_name), long_value
