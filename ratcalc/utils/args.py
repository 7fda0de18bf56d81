from ratcalc.types import Fraction, Interval

def parse_fraction(text : str) -> Fraction:
  '''
  Reads `n/d` or a bare integer `n`. Zero denominators are allowed.
  '''
  num, sep, den = text.strip().partition('/')
  try:
    if not sep:
      return Fraction(int(num), 1)
    return Fraction(int(num), int(den))
  except ValueError:
    raise ValueError('{}, not a fraction.'.format(text)) from None

def parse_interval(text : str) -> Interval:
  '''
  Reads two fractions separated by a comma, in either order.
  '''
  parts = text.split(',')
  if len(parts) != 2:
    raise ValueError('{}, not an interval.'.format(text))

  return Interval.new(*(parse_fraction(part) for part in parts))

def positive_int(text : str) -> int:
  value = int(text)
  if value <= 0:
    raise ValueError('{}, not a positive integer.'.format(text))

  return value

__all__ = (
  'parse_fraction',
  'parse_interval',
  'positive_int',
)
