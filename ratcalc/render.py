'''
Decimal rendering of exact fractions.

Every rendering here rounds outward in a requested direction, so a rendered
value is always a true bound of the exact quotient.
'''

import decimal
from enum import StrEnum

class Rounding(StrEnum):
  CEILING = 'ceiling'
  FLOOR   = 'floor'

ROUNDING_MODES = {
  Rounding.CEILING: decimal.ROUND_CEILING,
  Rounding.FLOOR:   decimal.ROUND_FLOOR,
}

POS_INFINITY = decimal.Decimal('Infinity')
NEG_INFINITY = decimal.Decimal('-Infinity')
INDETERMINATE = decimal.Decimal('NaN')

def sentinel(num : int) -> decimal.Decimal:
  '''
  Decimal stand-in for a fraction with a zero denominator.
  '''
  if num > 0:
    return POS_INFINITY
  elif num < 0:
    return NEG_INFINITY
  return INDETERMINATE

def to_decimal(num : int, den : int, rounding : Rounding, precision : int = 5) -> decimal.Decimal:
  '''
  Divide num by den to at most `precision` significant digits.

  Rounding is directed: CEILING never lands below the exact value,
  FLOOR never lands above it.
  '''
  if den == 0:
    raise ZeroDivisionError('decimal rendering needs a non-zero denominator')
  if not isinstance(precision, int) or precision <= 0:
    raise ValueError('precision must be a positive integer, got {!r}'.format(precision))

  mode = ROUNDING_MODES[Rounding(rounding)]
  with decimal.localcontext() as ctx:
    ctx.prec = precision
    ctx.rounding = mode
    return decimal.Decimal(num) / decimal.Decimal(den)

def ceil_places(num : int, den : int, places : int) -> decimal.Decimal:
  '''
  Smallest decimal with `places` fractional digits that is >= num/den.

  Computed on integers, so it is exact for any magnitude.
  '''
  if den <= 0:
    raise ZeroDivisionError('fixed-place rendering needs a positive denominator')

  scaled = -((-num * 10 ** places) // den)
  return decimal.Decimal('{}E-{}'.format(scaled, places))

def raw_string(value : decimal.Decimal) -> str:
  '''
  Scientific text of a decimal without normalizing its exponent.

  >>> raw_string(decimal.Decimal('3.1052632'))
  '31052632E-7'
  '''
  if value.is_nan():
    return 'NaN'
  if value.is_infinite():
    return '-Infinity' if value.is_signed() else '+Infinity'

  sign, digits, exponent = value.as_tuple()
  coefficient = ''.join(str(d) for d in digits)
  text = '-' + coefficient if sign else coefficient
  if exponent == 0:
    return text
  return '{}E{}'.format(text, exponent)

__all__ = (
  'Rounding',
  'POS_INFINITY',
  'NEG_INFINITY',
  'INDETERMINATE',
  'sentinel',
  'to_decimal',
  'ceil_places',
  'raw_string',
)
