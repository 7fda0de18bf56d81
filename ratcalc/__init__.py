'''
Exact fraction and interval arithmetic over the extended rational line.
'''

__version__ = '0.1.0'

from .types import (
  Fraction,
  Interval,
  Relation,
  Rounding,
)

__all__ = (
  'Fraction',
  'Interval',
  'Relation',
  'Rounding',
  '__version__',
)
