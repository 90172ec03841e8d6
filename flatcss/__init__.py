"""Shorthand-free styles for native UI frameworks.

The public API is what is accessible from this "root" packages without
importing sub-modules.

"""

import re

import tinycss2

VERSION = __version__ = '1.0.0'

#: Default values for Python API options. See :func:`transform` to learn more
#: about options.
#:
#: :param bool parse_media_queries:
#:     Whether the rules of ``@media`` blocks are kept, in mappings stored
#:     under ``'@media <condition>'`` keys. They are dropped otherwise.
DEFAULT_OPTIONS = {
    'parse_media_queries': False,
}

# Capital letters of option names given in medial-capital form.
CAPITAL_LETTER = re.compile(r'[A-Z]')

__all__ = [
    'DEFAULT_OPTIONS', 'DeclarationParseError', 'VERSION', '__version__',
    'transform']


# Import after setting the version, as the version is used in other modules
from .logger import LOGGER  # noqa: I001, E402
from .css import preprocess_stylesheet  # noqa: E402
from .css.validation import DeclarationParseError  # noqa: E402


def transform(css, **options):
    """Turn a stylesheet into a mapping of shorthand-free attributes.

    :type css: str or list
    :param css:
        A string of CSS source, or a list of rules already parsed by
        :func:`tinycss2.parse_stylesheet`.
    :param options:
        The ``options`` parameter includes by default the
        :data:`DEFAULT_OPTIONS` values.
    :returns:
        A dict mapping class names (without their leading dot) to dicts of
        medial-capital attribute names and values.
    :raises DeclarationParseError:
        If a declaration can't be parsed, broken syntax and nested rules
        included. No partial result is given.

    """
    for unknown in sorted(set(options) - set(DEFAULT_OPTIONS)):
        suggestion = CAPITAL_LETTER.sub(
            lambda match: f'_{match.group(0).lower()}', unknown)
        if suggestion in DEFAULT_OPTIONS:
            LOGGER.warning(
                'Unknown option: %s, did you mean %s?', unknown, suggestion)
        else:
            LOGGER.warning('Unknown option: %s.', unknown)
    new_options = DEFAULT_OPTIONS.copy()
    new_options.update(options)
    options = new_options

    if isinstance(css, str):
        rules = tinycss2.parse_stylesheet(
            css, skip_comments=True, skip_whitespace=True)
    else:
        rules = css
    styles = {}
    preprocess_stylesheet(rules, styles, options['parse_media_queries'])
    return styles
