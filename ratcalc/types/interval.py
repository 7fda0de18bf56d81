import decimal
import logging
from dataclasses import dataclass, field, InitVar

from .. import debug_flags
from .. import render
from .fraction import (
  Fraction,
  Relation,
  ZERO,
  as_fraction,
)

log = logging.getLogger(__name__)

def _trace(operation, region, *intervals):
  if debug_flags.SHOW_INTERVAL_CASES:
    log.debug('%s: %s region for %s', operation, region, ', '.join(map(str, intervals)))

@dataclass(slots=True, frozen=True)
class Interval():
  '''
  Closed interval [lower, upper] of fractions bounding an unknown value.

  length is derived from the endpoints: the outward four-place decimal
  width, or +Infinity when the endpoints cannot be ordered (either one
  is 0/0, or both are the same infinity) or were declared unordered.
  In that case the endpoints are only nominally ordered.

  Build intervals with Interval.new() or Interval.from_ints().
  '''

  lower : Fraction
  upper : Fraction
  length : decimal.Decimal = field(init=False)
  unordered : InitVar[bool] = False

  def __post_init__(self, unordered):
    if not all(isinstance(x, Fraction) for x in (self.lower, self.upper)):
      raise TypeError('Interval endpoints must be Fraction')

    if unordered or self.lower.unk(self.upper):
      length = render.POS_INFINITY
    else:
      length = self.upper.distance(self.lower)
    object.__setattr__(self, 'length', length)

  @classmethod
  def new(cls, p, q, relation : Relation | str | None = None) -> 'Interval':
    '''
    Interval between p and q.

    Without a relation both endpoints are reduced and compared first.
    With one, the caller vouches for the order:

    - EQ keeps p alone as a singleton,
    - LT keeps (p, q) as given,
    - UNK keeps (p, q) as given with an infinite length,
    - GT swaps them,
    - RLT is LT with both endpoints reduced.
    '''
    p, q = as_fraction(p), as_fraction(q)
    if relation is None:
      p, q = p.reduce(), q.reduce()
      relation = p.cmp(q)

    relation = Relation(relation)
    if relation is Relation.EQ:
      return cls(p, p)
    elif relation is Relation.GT:
      return cls(q, p)
    elif relation is Relation.RLT:
      return cls(p.reduce(), q.reduce())
    elif relation is Relation.UNK:
      return cls(p, q, unordered=True)
    return cls(p, q)

  @classmethod
  def from_ints(cls, pnum : int, pden : int, qnum : int, qden : int) -> 'Interval':
    return cls.new(Fraction(pnum, pden), Fraction(qnum, qden))

  def add(self, other : 'Interval') -> 'Interval':
    # addition is monotone in both arguments
    return Interval.new(
      self.lower.add(other.lower),
      self.upper.add(other.upper),
      Relation.RLT,
    )

  def neg(self) -> 'Interval':
    return Interval.new(self.upper.neg(), self.lower.neg(), Relation.LT)

  def sub(self, other : 'Interval') -> 'Interval':
    return Interval.new(
      self.lower.sub(other.upper),
      self.upper.sub(other.lower),
      Relation.RLT,
    )

  def mul(self, other : 'Interval') -> 'Interval':
    '''
    Product of two intervals.

    Two positive intervals multiply corner to corner, two negative ones
    cross over. Any other sign mix takes the min and max of all four
    corner products.
    '''
    a, b = self, other
    if a.lower.num > 0 and b.lower.num > 0:
      _trace('mul', 'positive', a, b)
      return Interval.new(a.lower.mul(b.lower), a.upper.mul(b.upper), Relation.RLT)
    if a.upper.num < 0 and b.upper.num < 0:
      _trace('mul', 'negative', a, b)
      return Interval.new(a.upper.mul(b.upper), a.lower.mul(b.lower), Relation.RLT)

    _trace('mul', 'mixed', a, b)
    corners = (
      a.lower.mul(b.lower),
      a.upper.mul(b.upper),
      a.upper.mul(b.lower),
      a.lower.mul(b.upper),
    )
    high = low = corners[0]
    for corner in corners[1:]:
      high = high.maxf(corner)
      low = low.minf(corner)
    return Interval.new(low, high, Relation.RLT)

  def flip(self) -> 'Interval':
    '''
    Reciprocal. An interval touching zero flips to the whole line.
    '''
    if self.lower.num * self.upper.num <= 0:
      _trace('flip', 'zero', self)
      return Interval.from_ints(-1, 0, 1, 0)
    return Interval.new(self.upper.flip(), self.lower.flip(), Relation.LT)

  def divi(self, other : 'Interval') -> 'Interval':
    return self.mul(other.flip())

  def pow(self, exponent : int) -> 'Interval':
    '''
    Integer power of every point of the interval.

    This is not repeated mul(), which would pair up different points.
    '''
    if not isinstance(exponent, int):
      raise TypeError('Interval only supports integer exponents')

    if exponent < 0:
      return self.flip().pow(-exponent)
    if exponent == 0:
      return Interval.new(self.lower.pow(0), self.upper.pow(0))

    lower, upper = self.lower, self.upper
    odd = exponent % 2 == 1
    if lower.num > 0 or (upper.num < 0 and odd):
      _trace('pow', 'increasing', self)
      return Interval.new(lower.pow(exponent), upper.pow(exponent), Relation.LT)
    if upper.num < 0:
      _trace('pow', 'decreasing', self)
      return Interval.new(lower.pow(exponent), upper.pow(exponent), Relation.GT)
    if not odd:
      _trace('pow', 'even across zero', self)
      widest = lower.neg().maxf(upper)
      return Interval.new(ZERO, widest.pow(exponent), Relation.LT)

    # odd powers are increasing across zero as well
    _trace('pow', 'odd across zero', self)
    return Interval.new(lower.pow(exponent), upper.pow(exponent), Relation.LT)

  def contains(self, value) -> bool:
    value = as_fraction(value)
    return self.lower.lte(value) and value.lte(self.upper)

  def is_singleton(self) -> bool:
    return self.lower.eq(self.upper)

  def midpoint(self) -> Fraction:
    return Fraction.average(self.lower, self.upper)

  def print(self, tex : bool = False) -> str:
    return '[{}, {}]'.format(self.lower.print(tex), self.upper.print(tex))

  def __add__(self, other):
    other = _coerce(other)
    if other is None:
      return NotImplemented
    return self.add(other)
  def __sub__(self, other):
    other = _coerce(other)
    if other is None:
      return NotImplemented
    return self.sub(other)
  def __mul__(self, other):
    other = _coerce(other)
    if other is None:
      return NotImplemented
    return self.mul(other)
  def __truediv__(self, other):
    other = _coerce(other)
    if other is None:
      return NotImplemented
    return self.divi(other)
  def __pow__(self, exponent):
    if not isinstance(exponent, int):
      return NotImplemented
    return self.pow(exponent)

  def __radd__(self, other):
    other = _coerce(other)
    if other is None:
      return NotImplemented
    return other.add(self)
  def __rsub__(self, other):
    other = _coerce(other)
    if other is None:
      return NotImplemented
    return other.sub(self)
  def __rmul__(self, other):
    other = _coerce(other)
    if other is None:
      return NotImplemented
    return other.mul(self)
  def __rtruediv__(self, other):
    other = _coerce(other)
    if other is None:
      return NotImplemented
    return other.divi(self)

  def __neg__(self):
    return self.neg()

  def __contains__(self, value) -> bool:
    return self.contains(value)

  def __repr__(self):
    return 'Interval({0.lower.num}/{0.lower.den}, {0.upper.num}/{0.upper.den}, length={0.length})'.format(self)
  def __str__(self):
    return self.print()

def _coerce(value):
  '''
  Intervals pass through; fraction-like values become singletons.
  '''
  if isinstance(value, Interval):
    return value
  try:
    point = as_fraction(value)
  except TypeError:
    return None
  return Interval.new(point, point, Relation.EQ)

__all__ = (
  'Interval',
)
