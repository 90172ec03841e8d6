"""Turn stylesheets into attribute mappings.

This module takes care of merging the declarations of rules into one mapping
per selector, in source order, and of bucketing the rules found in ``@media``
blocks.

Declarations are expanded by the :mod:`flatcss.css.validation` package.

"""

import copy

import tinycss2

from ..logger import LOGGER
from .tokens import split_on_comma
from .validation import DeclarationParseError, preprocess_declarations

# Prefix of the top-level keys holding the styles of @media blocks.
MEDIA_PREFIX = '@media '


def _strip_whitespace(tokens):
    """Remove leading and trailing whitespace in a token list."""
    tokens = list(tokens)
    while tokens and tokens[0].type == 'whitespace':
        tokens.pop(0)
    while tokens and tokens[-1].type == 'whitespace':
        tokens.pop()
    return tokens


def parse_selectors(prelude):
    """Return the names of the class selectors in a selector list.

    Only simple class selectors like ``.name`` are supported, their name is
    returned without the leading dot. Other selectors are ignored with a
    warning.

    """
    names = []
    for part in split_on_comma(prelude):
        tokens = _strip_whitespace(part)
        if (len(tokens) == 2 and tokens[0] == '.' and
                tokens[1].type == 'ident'):
            names.append(tokens[1].value)
        else:
            LOGGER.warning(
                'Invalid or unsupported selector, %r',
                tinycss2.serialize(part).strip())
    return names


def preprocess_stylesheet(stylesheet_rules, styles, parse_media_queries=False,
                          in_media=False):
    """Merge the declarations of ``stylesheet_rules`` into ``styles``.

    ``styles`` maps selector names to dicts of attributes. Later
    declarations override earlier ones, including between rules sharing a
    selector.

    When ``parse_media_queries`` is ``True``, the rules of ``@media`` blocks
    are merged into a mapping stored in ``styles`` under ``'@media '``
    followed by the condition of the block. Otherwise, these blocks are
    dropped. ``in_media`` is set for the rules of a ``@media`` block, where
    nested ``@media`` blocks are not supported.

    Raise :exc:`DeclarationParseError` for syntax errors and invalid
    declarations.

    """
    for rule in stylesheet_rules:
        if rule.type == 'error':
            LOGGER.debug(
                'Parse error at %d:%d: %s',
                rule.source_line, rule.source_column, rule.message)
            raise DeclarationParseError(None, rule.message, rule.message)

        if rule.type == 'qualified-rule':
            # Declarations are validated even for unsupported selectors.
            declarations = list(preprocess_declarations(rule.content))
            for selector in parse_selectors(rule.prelude):
                style = styles.setdefault(selector, {})
                style.update(copy.deepcopy(declarations))

        elif rule.type == 'at-rule' and rule.lower_at_keyword == 'media':
            condition = tinycss2.serialize(rule.prelude).strip()
            if rule.content is None:
                LOGGER.warning(
                    'Empty @media rule %r ignored at %d:%d.',
                    condition, rule.source_line, rule.source_column)
                continue
            if in_media:
                LOGGER.warning(
                    'Nested @media rule %r ignored at %d:%d, '
                    'nested at-rules are not supported.',
                    condition, rule.source_line, rule.source_column)
                continue
            if not parse_media_queries:
                LOGGER.debug(
                    '@media %s rule ignored at %d:%d, '
                    'media queries are not parsed.',
                    condition, rule.source_line, rule.source_column)
                continue
            content_rules = tinycss2.parse_rule_list(
                rule.content, skip_comments=True, skip_whitespace=True)
            media_styles = styles.setdefault(f'{MEDIA_PREFIX}{condition}', {})
            preprocess_stylesheet(
                content_rules, media_styles, parse_media_queries,
                in_media=True)

        elif rule.type == 'at-rule':
            LOGGER.warning(
                'Unsupported @%s rule ignored at %d:%d.',
                rule.at_keyword, rule.source_line, rule.source_column)
