"""Validate properties expanders."""

import copy
import functools

from ..tokens import (
    InvalidValues, function_arguments, get_angle, get_color, get_keyword,
    get_length, get_number, get_single_keyword, serialize_token)
from ..units import to_number
from .properties import (
    FONT_VARIANTS, TEXT_DECORATION_LINES, border_style, decoration_line,
    flex_direction, flex_wrap, font_style, font_weight, shadow_offset,
    text_decoration_style, validate_non_shorthand)

EXPANDERS = {}

# Shorthands giving a single attribute when they have a single value.
COLLAPSED_SHORTHANDS = {'border-color', 'border-radius', 'border-width'}

# Canonical names of transform functions.
TRANSFORM_FUNCTIONS = {
    name.lower(): name for name in (
        'perspective', 'rotate', 'rotateX', 'rotateY', 'rotateZ', 'scaleX',
        'scaleY', 'translateX', 'translateY', 'skewX', 'skewY')}


def expander(property_name):
    """Decorator adding a function to the ``EXPANDERS``."""
    def expander_decorator(function):
        """Add ``function`` to the ``EXPANDERS``."""
        assert property_name not in EXPANDERS, property_name
        EXPANDERS[property_name] = function
        return function
    return expander_decorator


def generic_expander(*expanded_names, defaults=None):
    """Decorator helping expanders to handle defaults and repeated values.

    Wrap an expander so that it can just yield name suffixes and values, in
    any order. Missing suffixes get their value from ``defaults``, or are not
    set when they have no default. Suffixes are set in the order given by
    ``expanded_names``.

    """
    defaults = defaults or {}

    def generic_expander_decorator(wrapped):
        """Decorate the ``wrapped`` expander."""
        @functools.wraps(wrapped)
        def generic_expander_wrapper(tokens, name):
            """Wrap the expander."""
            results = {}
            for new_name, value in wrapped(tokens, name):
                assert new_name in expanded_names, new_name
                if new_name in results:
                    raise InvalidValues(
                        f'got multiple {new_name.strip("-")} values '
                        f'in a {name} shorthand')
                results[new_name] = value

            for new_name in expanded_names:
                if new_name.startswith('-'):
                    # new_name is a suffix
                    actual_new_name = f'{name}{new_name}'
                else:
                    actual_new_name = new_name

                if new_name in results:
                    yield actual_new_name, results[new_name]
                elif new_name in defaults:
                    yield actual_new_name, copy.copy(defaults[new_name])
        return generic_expander_wrapper
    return generic_expander_decorator


def four_values(tokens):
    """Apply the 1, 2, 3 or 4 values rule of box shorthands to ``tokens``."""
    if len(tokens) == 1:
        return tokens * 4
    elif len(tokens) == 2:
        return tokens * 2  # (bottom, left) defaults to (top, right)
    elif len(tokens) == 3:
        return tokens + (tokens[1],)  # left defaults to right
    elif len(tokens) == 4:
        return tokens
    raise InvalidValues(
        f'Expected 1 to 4 token components got {len(tokens)}')


def _expand_box_edges(tokens, name, expanded_names):
    if len(tokens) == 1 and name in COLLAPSED_SHORTHANDS:
        # eg. border-width: 1px gives border-width, not the four sides
        (_, value), = validate_non_shorthand(tokens, expanded_names[0])
        yield name, value
        return
    for expanded_name, token in zip(expanded_names, four_values(tokens)):
        # validate_non_shorthand returns ((name, value),), we want
        # to yield (name, value).
        result, = validate_non_shorthand((token,), expanded_name)
        yield result


@expander('border-color')
@expander('border-width')
@expander('margin')
@expander('padding')
def expand_four_sides(tokens, name):
    """Expand properties setting a token for the four sides of a box."""
    expanded_names = []
    for suffix in ('-top', '-right', '-bottom', '-left'):
        if (i := name.rfind('-')) == -1:
            expanded_names.append(f'{name}{suffix}')
        else:
            # eg. border-color becomes border-*-color, not border-color-*
            expanded_names.append(f'{name[:i]}{suffix}{name[i:]}')
    yield from _expand_box_edges(tokens, name, expanded_names)


@expander('border-radius')
def expand_border_radius(tokens, name):
    """Expand the ``border-radius`` property to the four corners."""
    corners = ('top-left', 'top-right', 'bottom-right', 'bottom-left')
    expanded_names = [f'border-{corner}-radius' for corner in corners]
    yield from _expand_box_edges(tokens, name, expanded_names)


@expander('border')
@generic_expander('-width', '-style', '-color', defaults={
    '-width': 1, '-style': 'solid', '-color': 'black'})
def expand_border(tokens, name):
    """Expand the ``border`` shorthand property.

    See https://www.w3.org/TR/CSS21/box.html#propdef-border

    """
    if len(tokens) > 3:
        raise InvalidValues(f'Expected 1 to 3 token components got {len(tokens)}')
    for token in tokens:
        if (width := get_length(token)) is not None:
            yield '-width', width
        elif (style := border_style([token])) is not None:
            yield '-style', style
        elif (color := get_color(token)) is not None:
            yield '-color', color
        else:
            raise InvalidValues


@expander('font')
@generic_expander(
    '-family', '-size', '-weight', '-style', '-variant', 'line-height',
    defaults={'-weight': 'normal', '-style': 'normal', '-variant': []})
def expand_font(tokens, name):
    """Expand the ``font`` shorthand property.

    https://www.w3.org/TR/css-fonts-3/#font-prop

    """
    tokens = list(tokens)
    variants = []
    # Keywords before the mandatory font size, in any order.
    while tokens:
        token = tokens.pop(0)
        if (size := get_length(token, negative=False)) is not None:
            break
        if get_keyword(token) == 'normal':
            continue
        if (weight := font_weight([token])) is not None:
            yield '-weight', weight
        elif (style := font_style([token])) is not None:
            yield '-style', style
        elif get_keyword(token) in FONT_VARIANTS:
            variants.append(get_keyword(token))
        else:
            raise InvalidValues
    else:
        raise InvalidValues('font size is missing')
    yield '-size', size
    if variants:
        yield '-variant', variants

    # Then line-height is optional, but font-family is not so the list
    # must not be empty yet
    if tokens and tokens[0] == '/':
        tokens.pop(0)
        if not tokens:
            raise InvalidValues('line height is missing')
        token = tokens.pop(0)
        if (multiplier := get_number(token, negative=False)) is not None:
            yield 'line-height', to_number(size * multiplier)
        elif (line_height := get_length(token, negative=False)) is not None:
            yield 'line-height', line_height
        else:
            raise InvalidValues

    if not tokens:
        raise InvalidValues('font family is missing')
    yield '-family', _font_family_list(tokens)


def _font_family_list(tokens):
    """Join family tokens, keeping commas stuck to the previous family."""
    family = ''
    for token in tokens:
        if token == ',':
            family += ','
            continue
        if family:
            family += ' '
        family += token.value if token.type == 'string' else (
            serialize_token(token))
    return family


def _expand_shadow(tokens):
    """Yield the offset, radius and color suffixes of a shadow."""
    offset = shadow_offset(tokens[:2])
    if offset is None:
        raise InvalidValues('expected horizontal and vertical offsets')
    yield '-offset', offset

    tokens = list(tokens[2:])
    if tokens and (radius := get_length(tokens[0], negative=False)) is not None:
        tokens.pop(0)
        yield '-radius', radius

    if len(tokens) > 1:
        raise InvalidValues('multiple colors')
    elif tokens:
        if (color := get_color(tokens[0])) is None:
            raise InvalidValues
        yield '-color', color


@expander('box-shadow')
@generic_expander(
    'shadow-offset', 'shadow-radius', 'shadow-color', 'shadow-opacity',
    defaults={'shadow-radius': 0, 'shadow-color': 'black'})
def expand_box_shadow(tokens, name):
    """Expand the ``box-shadow`` property."""
    for suffix, value in _expand_shadow(tokens):
        yield f'shadow{suffix}', value
    yield 'shadow-opacity', 1


@expander('text-shadow')
@generic_expander(
    '-offset', '-radius', '-color', defaults={'-radius': 0, '-color': 'black'})
def expand_text_shadow(tokens, name):
    """Expand the ``text-shadow`` property."""
    yield from _expand_shadow(tokens)


@expander('text-decoration')
@generic_expander('-line', '-style', '-color', defaults={
    '-line': 'none', '-style': 'solid', '-color': 'black'})
def expand_text_decoration(tokens, name):
    """Expand the ``text-decoration`` shorthand property."""
    lines = set()
    none = False
    for token in tokens:
        keyword = get_keyword(token)
        if keyword in TEXT_DECORATION_LINES:
            lines.add(keyword)
        elif keyword == 'none':
            none = True
        elif (style := text_decoration_style([token])) is not None:
            yield '-style', style
        elif (color := get_color(token)) is not None:
            yield '-color', color
        else:
            raise InvalidValues
    if lines or none:
        yield '-line', decoration_line(lines, none)


@expander('flex')
@generic_expander('-grow', '-shrink', '-basis', defaults={
    '-grow': 1, '-shrink': 1})
def expand_flex(tokens, name):
    """Expand the ``flex`` property."""
    keyword = get_single_keyword(tokens)
    if keyword == 'auto':
        yield '-grow', 1
        yield '-shrink', 1
        return
    elif keyword == 'none':
        yield '-grow', 0
        yield '-shrink', 0
        return

    if len(tokens) > 3:
        raise InvalidValues(f'Expected 1 to 3 token components got {len(tokens)}')
    factors = []
    basis_found = previous_is_factor = False
    for token in tokens:
        factor = get_number(token, negative=False)
        # "A unitless zero that is not already preceded by two flex factors
        # must be interpreted as a flex factor."
        if factor is not None and not (factor == 0 and len(factors) == 2):
            if len(factors) == 2 or (factors and not previous_is_factor):
                raise InvalidValues
            factors.append(factor)
            previous_is_factor = True
            continue
        basis = get_length(token, negative=False, percentage=True, auto=True)
        if basis is None or basis_found:
            raise InvalidValues
        basis_found = True
        previous_is_factor = False
        if basis != 'auto':
            yield '-basis', basis
    if factors:
        yield '-grow', factors[0]
    if len(factors) == 2:
        yield '-shrink', factors[1]
    if not basis_found:
        yield '-basis', 0


@expander('flex-flow')
@generic_expander('flex-direction', 'flex-wrap', defaults={
    'flex-direction': 'row', 'flex-wrap': 'nowrap'})
def expand_flex_flow(tokens, name):
    """Expand the ``flex-flow`` property."""
    if len(tokens) > 2:
        raise InvalidValues
    for token in tokens:
        if (direction := flex_direction([token])) is not None:
            yield 'flex-direction', direction
        elif (wrap := flex_wrap([token])) is not None:
            yield 'flex-wrap', wrap
        else:
            raise InvalidValues


def _transform_argument(function_name, token):
    if function_name.startswith(('translate', 'perspective')):
        value = get_length(token, percentage=True)
    elif function_name.startswith('scale'):
        value = get_number(token)
    else:
        value = get_angle(token)
        if value is None:
            value = get_number(token)
    if value is None:
        raise InvalidValues(f'invalid argument for {function_name}()')
    return value


def _transform_operations(function_name, arguments):
    """Return the list of operations given by a transform function."""
    if function_name in ('scale', 'translate', 'skew'):
        if len(arguments) > 2:
            raise InvalidValues(f'too many arguments for {function_name}()')
        x = _transform_argument(function_name, arguments[0])
        if len(arguments) == 2:
            y = _transform_argument(function_name, arguments[1])
        elif function_name == 'scale':
            y = x
        elif function_name == 'translate':
            y = 0
        else:
            y = '0deg' if isinstance(x, str) else 0
        return [{f'{function_name}X': x}, {f'{function_name}Y': y}]
    elif function_name in TRANSFORM_FUNCTIONS:
        if len(arguments) != 1:
            raise InvalidValues(f'expected one argument for {function_name}()')
        value = _transform_argument(function_name, arguments[0])
        return [{TRANSFORM_FUNCTIONS[function_name]: value}]
    raise InvalidValues(f'unsupported transform function {function_name}()')


@expander('transform')
def expand_transform(tokens, name):
    """Expand the ``transform`` property into a list of operations.

    Operations are listed in reverse order: the last function of the value
    is the first operation of the list.

    """
    operations = []
    for token in tokens:
        arguments = function_arguments(token)
        if not arguments or any(len(argument) != 1 for argument in arguments):
            raise InvalidValues
        operations.extend(_transform_operations(
            token.lower_name, [argument for argument, in arguments]))
    operations.reverse()
    yield name, operations


@expander('background')
@generic_expander('-color')
def expand_background(tokens, name):
    """Expand the ``background`` property, only colors are supported."""
    if len(tokens) != 1 or (color := get_color(tokens[0])) is None:
        raise InvalidValues('only background colors are supported')
    yield '-color', color
