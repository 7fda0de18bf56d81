import math
import functools
from dataclasses import dataclass
from enum import StrEnum

from .. import render
from ..render import Rounding

# interval length is kept to this many decimal places
LENGTH_PLACES = 4

class Relation(StrEnum):
  LT  = 'lt'
  GT  = 'gt'
  EQ  = 'eq'
  UNK = 'unk'
  # known lower-first, endpoints still to be reduced
  RLT = 'rlt'

def is_tuple_of_fraction(value):
  return isinstance(value, tuple) and \
    tuple(type(x) for x in value) == (int, int)

def _coerce(value):
  if isinstance(value, Fraction):
    return value
  elif is_tuple_of_fraction(value):
    return Fraction(value[0], value[1])
  elif isinstance(value, int):
    return Fraction(value, 1)
  return None

def as_fraction(value):
  '''
  Accepts a Fraction, an integer or a (numerator, denominator) tuple.
  '''
  fraction = _coerce(value)
  if fraction is None:
    raise TypeError('cannot interpret {!r} as a Fraction'.format(value))
  return fraction

def _as_rounding(direction):
  if direction == Relation.GT:
    return Rounding.CEILING
  elif direction == Relation.LT:
    return Rounding.FLOOR
  return Rounding(direction)

@dataclass(slots=True, frozen=True)
class Fraction():
  '''
  Exact fraction over the extended rational line.

  Construction normalizes every integer pair into one region:
  indeterminate 0/0, signed infinity +-1/0, zero 0/1, or an
  ordinary fraction with a positive denominator. Ordinary fractions
  are kept unreduced until reduce() is asked for.

  Equality (==) is structural; use eq() for numeric equality.
  '''

  num : int
  den : int = 1

  def __post_init__(self):
    if any(
      not isinstance(expected_int, int)
      for expected_int in (self.num, self.den)
    ):
      raise TypeError('Fraction only supports integer-values')

    num, den = int(self.num), int(self.den)
    if den < 0:
      num, den = -num, -den
    if den == 0:
      num = (num > 0) - (num < 0)
    elif num == 0:
      den = 1

    object.__setattr__(self, 'num', num)
    object.__setattr__(self, 'den', den)

  @classmethod
  def new(cls, num : int, den : int = 1) -> 'Fraction':
    return cls(num, den)

  def is_indeterminate(self) -> bool:
    return self.den == 0 and self.num == 0
  def is_infinite(self) -> bool:
    return self.den == 0 and self.num != 0
  def is_finite(self) -> bool:
    return self.den != 0
  def is_zero(self) -> bool:
    return self.den != 0 and self.num == 0

  def add(self, other : 'Fraction') -> 'Fraction':
    '''
    Sum without reduction.

    Opposite infinities, or an infinity met with 0/0, give 0/0.
    Shared denominators are kept as they are.
    '''
    if self.den == 0 and other.den == 0 and self.num * other.num <= 0:
      return INDETERMINATE
    if self.den == other.den:
      return Fraction(self.num + other.num, self.den)
    return Fraction(
      self.num * other.den + other.num * self.den,
      self.den * other.den,
    )
  def sub(self, other : 'Fraction') -> 'Fraction':
    return self.add(other.neg())
  def mul(self, other : 'Fraction') -> 'Fraction':
    return Fraction(self.num * other.num, self.den * other.den)
  def divf(self, other : 'Fraction') -> 'Fraction':
    return self.mul(other.flip())

  def neg(self) -> 'Fraction':
    return Fraction(-self.num, self.den)
  def abs(self) -> 'Fraction':
    return Fraction(abs(self.num), self.den)
  def flip(self) -> 'Fraction':
    '''
    Reciprocal. Zero has no signed reciprocal, so it flips to 0/0.
    '''
    if self.num == 0:
      return INDETERMINATE
    return Fraction(self.den, self.num)

  def gcf(self) -> int:
    return math.gcd(self.num, self.den)

  def reduce(self, factor : int | None = None) -> 'Fraction':
    '''
    Divide both components by factor, or by their gcd when omitted.

    The factor is trusted to divide both components. A zero factor
    gives 0/0, which also makes 0/0 its own reduction.
    '''
    if factor is None:
      factor = self.gcf()
    if factor == 0:
      return INDETERMINATE
    return Fraction(self.num // factor, self.den // factor)

  def scale(self, factor : int) -> 'Fraction':
    return Fraction(self.num * factor, self.den * factor)

  def common(self, other : 'Fraction') -> tuple['Fraction', 'Fraction']:
    '''
    Rescale both fractions onto a shared denominator.

    Pairs involving a zero denominator come back untouched. Zero is
    always stored as 0/1, so it never takes the shared denominator.
    '''
    if self.den == 0 or other.den == 0:
      return self, other

    factor = math.gcd(self.den, other.den)
    other_factor = other.den // factor
    self_factor = self.den // factor
    den = other_factor * self.den
    return (
      Fraction(other_factor * self.num, den),
      Fraction(self_factor * other.num, den),
    )

  def cmp(self, other : 'Fraction') -> Relation:
    '''
    Total comparison with an explicit unknown outcome.

    Anything against 0/0 is UNK, as are two infinities of the same sign.
    '''
    if self.is_indeterminate() or other.is_indeterminate():
      return Relation.UNK
    if self.den == 0 and other.den == 0:
      if self.num == other.num:
        return Relation.UNK
      return Relation.GT if self.num > other.num else Relation.LT

    diff = self.num * other.den - other.num * self.den
    if diff > 0:
      return Relation.GT
    elif diff < 0:
      return Relation.LT
    return Relation.EQ

  def gt(self, other : 'Fraction') -> bool:
    return self.cmp(other) is Relation.GT
  def gte(self, other : 'Fraction') -> bool:
    return self.cmp(other) in (Relation.GT, Relation.EQ)
  def lt(self, other : 'Fraction') -> bool:
    return self.cmp(other) is Relation.LT
  def lte(self, other : 'Fraction') -> bool:
    return self.cmp(other) in (Relation.LT, Relation.EQ)
  def eq(self, other : 'Fraction') -> bool:
    return self.cmp(other) is Relation.EQ
  def unk(self, other : 'Fraction') -> bool:
    return self.cmp(other) is Relation.UNK

  def maxf(self, other : 'Fraction') -> 'Fraction':
    '''
    Larger of the two. 0/0 loses to anything; ties and unknown keep self.
    '''
    if other.is_indeterminate():
      return self
    if self.is_indeterminate():
      return other
    return other if other.gt(self) else self
  def minf(self, other : 'Fraction') -> 'Fraction':
    if other.is_indeterminate():
      return self
    if self.is_indeterminate():
      return other
    return other if other.lt(self) else self

  def pow(self, exponent : int) -> 'Fraction':
    '''
    Integer power. 0/0 absorbs every exponent, an infinity to the
    zeroth power is 0/0, and negative exponents go through flip().
    '''
    if not isinstance(exponent, int):
      raise TypeError('Fraction only supports integer exponents')

    if self.is_indeterminate():
      return self
    if exponent == 0 and self.den == 0:
      return INDETERMINATE
    if exponent < 0:
      return self.flip().pow(-exponent)

    base = self.reduce()
    return Fraction(base.num ** exponent, base.den ** exponent)

  def mediant(self, other : 'Fraction') -> 'Fraction':
    '''
    (a+c)/(b+d). Against an infinity this steps the numerator by one
    toward it; against 0/0 it stays put.
    '''
    return Fraction(self.num + other.num, self.den + other.den)

  def distance(self, other : 'Fraction'):
    '''
    Ceiling of |self - other| to LENGTH_PLACES decimal places.
    '''
    diff = self.sub(other).abs()
    if diff.den == 0:
      return render.POS_INFINITY
    return render.ceil_places(diff.num, diff.den, LENGTH_PLACES)

  def deci(self, rounding, precision : int = 5):
    '''
    Decimal bound of the fraction to `precision` significant digits.

    rounding takes Relation.GT (an upper bound) or Relation.LT (a lower
    bound), or a Rounding mode directly. Zero denominators render as
    the +Infinity, -Infinity or NaN sentinels.
    '''
    mode = _as_rounding(rounding)
    if self.den == 0:
      return render.sentinel(self.num)
    return render.to_decimal(self.num, self.den, mode, precision)

  def print(self, tex : bool = False) -> str:
    if tex:
      return '\\frac{{{0.num}}}{{{0.den}}}'.format(self)
    return '{0.num}/{0.den}'.format(self)

  @classmethod
  def sum(cls, fractions) -> tuple['Fraction', int]:
    '''
    Sum of an iterable, reduced once at the end.

    Returns the reduced sum and the number of terms.
    '''
    fractions = [as_fraction(x) for x in fractions]
    if any(x.den == 0 for x in fractions):
      # infinities need add() to cancel or absorb properly
      total = functools.reduce(cls.add, fractions, ZERO)
      return total.reduce(), len(fractions)

    num, den = 0, 1
    for x in fractions:
      num, den = num * x.den + x.num * den, den * x.den
    return cls(num, den).reduce(), len(fractions)

  @classmethod
  def prod(cls, fractions) -> tuple['Fraction', int]:
    '''
    Product of an iterable, reduced once at the end.
    '''
    num, den, count = 1, 1, 0
    for x in fractions:
      x = as_fraction(x)
      num, den = num * x.num, den * x.den
      count += 1
    return cls(num, den).reduce(), count

  @classmethod
  def average(cls, values, other : 'Fraction | None' = None) -> 'Fraction':
    '''
    Average of two fractions, or of an iterable of fractions.

    An empty iterable averages to 0/0.
    '''
    if other is not None:
      return as_fraction(values).add(as_fraction(other)).mul(HALF)

    total, count = cls.sum(values)
    return total.mul(cls(1, count))

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
    return self.divf(other)
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
    return other.divf(self)

  def __lt__(self, other):
    other = _coerce(other)
    if other is None:
      return NotImplemented
    return self.lt(other)
  def __le__(self, other):
    other = _coerce(other)
    if other is None:
      return NotImplemented
    return self.lte(other)
  def __ge__(self, other):
    other = _coerce(other)
    if other is None:
      return NotImplemented
    return self.gte(other)
  def __gt__(self, other):
    other = _coerce(other)
    if other is None:
      return NotImplemented
    return self.gt(other)

  def __pos__(self):
    return self
  def __neg__(self):
    return self.neg()
  def __abs__(self):
    return self.abs()

  def __repr__(self):
    return 'Fraction({0.num}/{0.den})'.format(self)
  def __str__(self):
    return self.print()

  def __iter__(self):
    return iter((self.num, self.den))

ZERO          = Fraction(0, 1)
ONE           = Fraction(1, 1)
HALF          = Fraction(1, 2)
INDETERMINATE = Fraction(0, 0)
POS_INFINITY  = Fraction(1, 0)
NEG_INFINITY  = Fraction(-1, 0)

__all__ = (
  'Fraction',
  'Relation',
  'Rounding',
  'LENGTH_PLACES',
  'ZERO',
  'ONE',
  'HALF',
  'INDETERMINATE',
  'POS_INFINITY',
  'NEG_INFINITY',
  'as_fraction',
)
