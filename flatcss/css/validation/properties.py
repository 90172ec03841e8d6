"""Validate properties.

Validators take a tuple of tokens without whitespace and return the value of
the attribute, or ``None`` for invalid tokens.

"""

from ..tokens import (
    InvalidValues, classify_token, get_color, get_keyword, get_length, get_number,
    get_string, serialize_token, single_keyword, single_token)

BORDER_STYLES = {
    'solid', 'dashed', 'dotted', 'double', 'groove', 'ridge', 'inset',
    'outset', 'none'}
FONT_STYLES = {'normal', 'italic', 'oblique'}
FONT_WEIGHTS = {'normal', 'bold', 'bolder', 'lighter'}
FONT_VARIANTS = {
    'small-caps', 'all-small-caps', 'petite-caps', 'all-petite-caps',
    'unicase', 'titling-caps', 'oldstyle-nums', 'lining-nums',
    'tabular-nums', 'proportional-nums', 'diagonal-fractions',
    'stacked-fractions', 'ordinal', 'slashed-zero'}
# Order of line keywords in text-decoration-line values.
TEXT_DECORATION_LINES = ('underline', 'line-through')
TEXT_DECORATION_STYLES = {'solid', 'double', 'dotted', 'dashed'}

# Maps property names to functions taking a value list and returning a value
# or None for invalid.
PROPERTIES = {}


def property(property_name=None):
    """Decorator adding a function to the ``PROPERTIES``.

    The name of the property covered by the decorated function is set to
    ``property_name`` if given, or is inferred from the function name
    (replacing underscores by hyphens).

    """
    def decorator(function):
        """Add ``function`` to the ``PROPERTIES``."""
        if property_name is None:
            name = function.__name__.replace('_', '-')
        else:
            name = property_name
        assert name not in PROPERTIES, name
        PROPERTIES[name] = function
        return function
    return decorator


def validate_non_shorthand(tokens, name):
    """Default validator for non-shorthand properties."""
    function = PROPERTIES.get(name, passthrough)
    value = function(tokens)
    if value is None:
        raise InvalidValues
    return ((name, value),)


def passthrough(tokens):
    """Validator for properties without a dedicated grammar.

    Lengths are converted to pixels, keywords are lowercased, quoted strings
    are unquoted, anything else is kept as written.

    """
    if len(tokens) != 1:
        return ' '.join(serialize_token(token) for token in tokens)
    token, = tokens
    kind = classify_token(token)
    if kind == 'length':
        return get_length(token)
    elif kind == 'percentage':
        return get_length(token, percentage=True)
    elif kind == 'number':
        # Non-zero numbers need a unit.
        return None
    elif kind == 'string':
        return get_string(token)
    elif kind == 'keyword':
        return get_keyword(token)
    return serialize_token(token)


def decoration_line(lines, none=False):
    """Return the text-decoration-line value for a set of line keywords."""
    if none or not lines:
        return 'none'
    return ' '.join(line for line in TEXT_DECORATION_LINES if line in lines)


@property('opacity')
@property('z-index')
@property('elevation')
@property('flex-grow')
@property('flex-shrink')
@property('shadow-opacity')
@single_token
def unitless_number(token):
    return get_number(token)


@property()
def aspect_ratio(tokens):
    """``aspect-ratio`` property validation."""
    if len(tokens) == 1:
        return get_number(tokens[0], negative=False)
    elif len(tokens) == 3 and tokens[1] == '/':
        numerator = get_number(tokens[0], negative=False)
        denominator = get_number(tokens[2], negative=False)
        if numerator is not None and denominator:
            return numerator / denominator


@property('color')
@property('background-color')
@property('border-top-color')
@property('border-right-color')
@property('border-bottom-color')
@property('border-left-color')
@property('shadow-color')
@property('text-shadow-color')
@property('text-decoration-color')
@single_token
def other_colors(token):
    return get_color(token)


@property('margin-top')
@property('margin-right')
@property('margin-bottom')
@property('margin-left')
@single_token
def length_percentage_or_auto(token):
    return get_length(token, percentage=True, auto=True)


@property('padding-top')
@property('padding-right')
@property('padding-bottom')
@property('padding-left')
@property('border-top-left-radius')
@property('border-top-right-radius')
@property('border-bottom-right-radius')
@property('border-bottom-left-radius')
@single_token
def length_or_percentage(token):
    return get_length(token, percentage=True)


@property('border-top-width')
@property('border-right-width')
@property('border-bottom-width')
@property('border-left-width')
@single_token
def border_width(token):
    return get_length(token)


@property()
@single_keyword
def border_style(keyword):
    """``border-style`` property validation."""
    return keyword in BORDER_STYLES


@property()
@single_keyword
def font_style(keyword):
    """``font-style`` property validation."""
    return keyword in FONT_STYLES


@property()
@single_token
def font_weight(token):
    """``font-weight`` property validation.

    The value is always a string, numeric weights included.

    """
    keyword = get_keyword(token)
    if keyword in FONT_WEIGHTS:
        return keyword
    number = get_number(token)
    if number in range(100, 1000, 100):
        return str(number)


@property()
def font_variant(tokens):
    """``font-variant`` property validation, giving a list of keywords."""
    keywords = [get_keyword(token) for token in tokens]
    if keywords == ['normal']:
        return []
    if all(keyword in FONT_VARIANTS for keyword in keywords):
        return keywords


@property()
def font_family(tokens):
    """``font-family`` property validation.

    Only one family is allowed, given as a quoted string or as a sequence of
    identifiers.

    """
    if len(tokens) == 1 and tokens[0].type == 'string':
        return tokens[0].value
    if tokens and all(token.type == 'ident' for token in tokens):
        return ' '.join(token.value for token in tokens)


@property()
@single_token
def font_size(token):
    return get_length(token, negative=False)


@property()
@single_keyword
def flex_direction(keyword):
    """``flex-direction`` property validation."""
    return keyword in ('row', 'row-reverse', 'column', 'column-reverse')


@property()
@single_keyword
def flex_wrap(keyword):
    """``flex-wrap`` property validation."""
    return keyword in ('nowrap', 'wrap', 'wrap-reverse')


@property()
def text_decoration_line(tokens):
    """``text-decoration-line`` property validation."""
    lines = set()
    none = False
    for token in tokens:
        keyword = get_keyword(token)
        if keyword == 'none':
            none = True
        elif keyword in TEXT_DECORATION_LINES:
            lines.add(keyword)
        else:
            return None
    return decoration_line(lines, none)


@property()
@single_keyword
def text_decoration_style(keyword):
    """``text-decoration-style`` property validation."""
    return keyword in TEXT_DECORATION_STYLES


@property('shadow-offset')
@property('text-shadow-offset')
def shadow_offset(tokens):
    """Validation for offsets of shadows, giving a width and a height."""
    if len(tokens) == 2:
        width, height = (get_length(token) for token in tokens)
        if width is not None and height is not None:
            return {'width': width, 'height': height}
