from .fraction import (
  Fraction,
  Relation,
  Rounding,
  ZERO,
  ONE,
  HALF,
  INDETERMINATE,
  POS_INFINITY,
  NEG_INFINITY,
  as_fraction,
)
from .interval import Interval

__all__ = (
  'Fraction',
  'Interval',
  'Relation',
  'Rounding',
  'ZERO',
  'ONE',
  'HALF',
  'INDETERMINATE',
  'POS_INFINITY',
  'NEG_INFINITY',
  'as_fraction',
)
