"""Constants and helpers for units."""

# Size of the root font, used for root-relative units.
ROOT_FONT_SIZE = 16

# How many CSS pixels is one <unit>?
# https://www.w3.org/TR/CSS21/syndata.html#length-units
LENGTHS_TO_PIXELS = {
    'px': 1,
    'pt': 1 / 0.75,
    'pc': 16,
    'in': 96,
    'cm': 96 / 2.54,
    'mm': 96 / 25.4,
    'q': 96 / 25.4 / 4,
}

# How many root font sizes is one <unit>?
ROOT_UNITS = {
    'rem': 1,
}

# Sets of units.
# https://drafts.csswg.org/css-values-4/#lengths
ABSOLUTE_UNITS = set(LENGTHS_TO_PIXELS)
LENGTH_UNITS = ABSOLUTE_UNITS | set(ROOT_UNITS)
# https://drafts.csswg.org/css-values-4/#angles
ANGLE_UNITS = {'deg', 'grad', 'rad', 'turn'}


def to_number(value):
    """Return ``value`` as an integer when it has no fractional part."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def to_pixels(value, unit):
    """Get number of pixels corresponding to a length."""
    if value == 0:
        return 0
    unit = unit.lower()
    if unit in LENGTHS_TO_PIXELS:
        return to_number(value * LENGTHS_TO_PIXELS[unit])
    return to_number(value * ROOT_UNITS[unit] * ROOT_FONT_SIZE)
