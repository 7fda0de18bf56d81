from decimal import Decimal

import pytest

from .fraction import (
  Fraction,
  Relation,
  Rounding,
  ZERO,
  ONE,
  INDETERMINATE,
  POS_INFINITY,
  NEG_INFINITY,
)
from ..render import raw_string

new = Fraction.new

ORDINARY = [new(2, 3), new(-5, 7), new(120, 48), new(1, 1), new(-3, 1), new(43, 18)]
SPECIAL = [ZERO, INDETERMINATE, POS_INFINITY, NEG_INFINITY]

def test_makes_a_fraction():
  p = new(7, 22)
  assert (p.num, p.den) == (7, 22)
  assert Fraction(7, 22) == p
  assert Fraction(7) == new(7, 1)

def test_canonical_regions():
  assert tuple(new(23, 0)) == (1, 0)
  assert tuple(new(-12, 0)) == (-1, 0)
  assert tuple(new(0, 0)) == (0, 0)
  assert tuple(new(0, 7)) == (0, 1)
  assert tuple(new(0, -3)) == (0, 1)
  assert tuple(new(12, -3)) == (-12, 3)
  # not reduced
  assert tuple(new(27, 9)) == (27, 9)

@pytest.mark.parametrize('num', [-120, -7, -1, 0, 1, 5, 48])
@pytest.mark.parametrize('den', [-48, -3, -1, 0, 1, 2, 7])
def test_normalization(num, den):
  p = new(num, den)
  assert new(p.num, p.den) == p
  assert p.den >= 0
  if den < 0:
    assert p == new(-num, -den)
  if p.den == 0:
    assert p.num in (-1, 0, 1)
  if p.num == 0:
    assert p.den in (0, 1)

def test_rejects_non_integers():
  with pytest.raises(TypeError):
    Fraction(1.5, 2)
  with pytest.raises(TypeError):
    Fraction(1, '2')

def test_predicates():
  assert INDETERMINATE.is_indeterminate()
  assert not INDETERMINATE.is_infinite()
  assert POS_INFINITY.is_infinite() and NEG_INFINITY.is_infinite()
  assert ZERO.is_zero() and ZERO.is_finite()
  assert not INDETERMINATE.is_zero()
  assert new(2, 3).is_finite()

def test_easy_fraction_arithmetic():
  p = new(2, 3)
  q = new(5, 7)
  assert p.add(q) == new(29, 21)
  assert p.mul(q) == new(10, 21)
  assert p.neg() == new(-2, 3)
  assert p.flip() == new(3, 2)
  assert p.sub(q) == new(-1, 21)
  assert p.divf(q) == new(14, 15)

def test_operators():
  p = new(2, 3)
  q = new(5, 7)
  assert p + q == p.add(q)
  assert p - q == p.sub(q)
  assert p * q == p.mul(q)
  assert p / q == p.divf(q)
  assert -p == p.neg()
  assert abs(new(-2, 3)) == p
  assert p ** 2 == new(4, 9)
  assert 1 + p == new(5, 3)
  assert p + (1, 3) == new(3, 3)
  assert 1 - p == new(1, 3)
  assert 2 / p == new(6, 2)

def test_add():
  assert new(2, 3).add(new(4, 6)) == new(24, 18)
  assert new(4, 6).add(new(-4, 6)) == new(0, 1)
  assert new(4, 6).add(new(-8, 6)) == new(-4, 6)
  assert new(-4, 6).add(new(-8, 6)) == new(-12, 6)
  assert new(4, 6).add(new(1, 0)) == new(1, 0)
  assert new(1, 0).add(new(-4, 0)) == new(0, 0)
  assert new(2, 3).add(new(-4, 0)) == new(-1, 0)
  assert new(2, 3).add(new(0, 0)) == new(0, 0)
  assert new(0, 0).add(new(0, 0)) == new(0, 0)
  assert new(43, 18).add(new(-123, 120)) == new(2946, 2160)
  assert new(-123, 120).add(new(5, -23)) == new(-3429, 2760)
  assert new(5, -23).add(new(-8, -12)) == new(124, 276)

def test_add_infinities():
  assert new(5, 0).add(new(-7, 0)) == INDETERMINATE
  assert new(5, 0).add(new(8, 0)) == POS_INFINITY
  assert new(-5, 0).add(new(-8, 0)) == NEG_INFINITY
  assert INDETERMINATE.add(POS_INFINITY) == INDETERMINATE
  assert new(5, 0).add(new(7, 3)) == POS_INFINITY

def test_mul():
  assert new(2, 3).mul(new(4, 6)) == new(8, 18)
  assert new(4, 6).mul(new(6, 4)) == new(24, 24)
  assert new(4, 6).mul(new(-8, 6)) == new(-32, 36)
  assert new(6, 4).mul(new(-8, 6)) == new(-48, 24)
  assert new(4, 6).mul(new(1, 0)) == new(1, 0)
  assert new(1, 0).mul(new(-4, 0)) == new(-1, 0)
  assert new(2, 3).mul(new(-4, 0)) == new(-1, 0)
  assert new(2, 3).mul(new(0, 0)) == new(0, 0)
  assert new(0, 0).mul(new(0, 0)) == new(0, 0)
  assert new(43, 18).mul(new(-123, 120)) == new(-5289, 2160)
  assert new(-123, 120).mul(new(5, -23)) == new(615, 2760)
  assert new(5, -23).mul(new(-8, -12)) == new(-40, 276)
  assert ZERO.mul(POS_INFINITY) == INDETERMINATE

def test_undef():
  p = new(2, 0)
  q = new(-5, 0)
  assert p.add(q) == new(0, 0)
  assert p.mul(q) == new(-10, 0)
  assert p.flip() == new(0, 1)

@pytest.mark.parametrize('p', ORDINARY + SPECIAL)
def test_indeterminate_absorbs_mul(p):
  assert INDETERMINATE.mul(p) == INDETERMINATE
  assert p.mul(INDETERMINATE) == INDETERMINATE

@pytest.mark.parametrize('p', ORDINARY)
@pytest.mark.parametrize('q', ORDINARY)
def test_commutativity(p, q):
  assert p.add(q) == q.add(p)
  assert p.mul(q) == q.mul(p)

@pytest.mark.parametrize('p', ORDINARY)
def test_flip_involution(p):
  assert p.flip().flip() == p

@pytest.mark.parametrize('k', [1, -5, 9])
def test_flip_of_zero_loses_sign(k):
  assert new(0, k).flip() == INDETERMINATE

def test_neg_and_flip_specials():
  assert POS_INFINITY.neg() == NEG_INFINITY
  assert ZERO.neg() == ZERO
  assert INDETERMINATE.neg() == INDETERMINATE
  assert POS_INFINITY.flip() == ZERO
  assert NEG_INFINITY.flip() == ZERO
  assert INDETERMINATE.flip() == INDETERMINATE

def test_reduce():
  assert new(120, 48).reduce() == new(5, 2)
  assert new(0, 0).reduce() == new(0, 0)
  assert new(3, 0).reduce() == new(1, 0)
  assert new(-6, 4).reduce() == new(-3, 2)

def test_reduce_by_factor():
  assert new(120, 48).reduce(12) == new(10, 4)
  assert new(10, 4).reduce(-2) == new(5, 2)
  assert new(10, 4).reduce(0) == INDETERMINATE

def test_scale_and_gcf():
  assert tuple(new(2, 3).scale(4)) == (8, 12)
  assert new(2, 3).scale(-1) == new(2, 3)
  assert new(2, 3).scale(0) == INDETERMINATE
  assert new(120, 48).gcf() == 24
  assert new(-6, 4).gcf() == 2
  assert INDETERMINATE.gcf() == 0
  assert POS_INFINITY.gcf() == 1

def test_common():
  assert new(1, 4).common(new(1, 6)) == (new(3, 12), new(2, 12))
  assert new(2, 3).common(new(5, 3)) == (new(2, 3), new(5, 3))
  # zero stays 0/1
  assert ZERO.common(new(2, 3)) == (ZERO, new(2, 3))

@pytest.mark.parametrize('other', [new(2, 3), POS_INFINITY, NEG_INFINITY, INDETERMINATE])
def test_common_with_zero_denominator_is_unchanged(other):
  assert POS_INFINITY.common(other) == (POS_INFINITY, other)
  assert other.common(INDETERMINATE) == (other, INDETERMINATE)

def test_cmp():
  assert new(1, 2).cmp(new(2, 3)) is Relation.LT
  assert new(2, 3).cmp(new(1, 2)) is Relation.GT
  assert new(2, 4).cmp(new(1, 2)) is Relation.EQ
  assert new(-1, 2).cmp(ZERO) is Relation.LT
  assert INDETERMINATE.cmp(new(1, 2)) is Relation.UNK
  assert ZERO.cmp(INDETERMINATE) is Relation.UNK
  assert POS_INFINITY.cmp(new(8, 3)) is Relation.GT
  assert POS_INFINITY.cmp(POS_INFINITY) is Relation.UNK
  assert NEG_INFINITY.cmp(NEG_INFINITY) is Relation.UNK
  assert POS_INFINITY.cmp(NEG_INFINITY) is Relation.GT
  assert NEG_INFINITY.cmp(POS_INFINITY) is Relation.LT
  assert POS_INFINITY.cmp(new(10 ** 50, 1)) is Relation.GT
  assert NEG_INFINITY.cmp(ZERO) is Relation.LT

@pytest.mark.parametrize('p', ORDINARY + SPECIAL)
@pytest.mark.parametrize('q', ORDINARY + SPECIAL)
def test_comparison_totality(p, q):
  assert p.cmp(q) in (Relation.LT, Relation.GT, Relation.EQ, Relation.UNK)
  assert [p.gt(q), p.lt(q), p.eq(q), p.unk(q)].count(True) == 1
  assert p.gte(q) == (p.gt(q) or p.eq(q))
  assert p.lte(q) == (p.lt(q) or p.eq(q))

def test_unknown_is_never_ordered():
  assert not POS_INFINITY.gte(POS_INFINITY)
  assert not INDETERMINATE.eq(INDETERMINATE)
  assert not INDETERMINATE.lte(ZERO)
  assert POS_INFINITY.unk(POS_INFINITY)

def test_comparison_operators():
  assert new(1, 2) < new(2, 3)
  assert new(2, 4) <= new(1, 2)
  assert new(2, 3) > 0
  assert new(2, 3) >= (4, 6)
  assert not (INDETERMINATE < ZERO)
  # == is structural
  assert new(2, 4) != new(1, 2)
  assert new(2, 4).eq(new(1, 2))
  assert len({new(1, 2), new(1, 2), new(2, 4)}) == 2

def test_maxf_minf():
  assert new(1, 2).maxf(new(2, 3)) == new(2, 3)
  assert new(1, 2).minf(new(2, 3)) == new(1, 2)
  assert INDETERMINATE.maxf(new(1, 2)) == new(1, 2)
  assert new(1, 2).minf(INDETERMINATE) == new(1, 2)
  assert NEG_INFINITY.minf(new(-10 ** 9, 1)) == NEG_INFINITY
  assert new(2, 4).maxf(new(1, 2)) == new(2, 4)

def test_pow():
  assert new(2, 3).pow(3) == new(8, 27)
  assert new(4, 6).pow(2) == new(4, 9)
  assert new(2, 3).pow(-2) == new(9, 4)
  assert new(5, 7).pow(0) == ONE
  assert new(3, 1).pow(200).num == 3 ** 200

def test_pow_specials():
  assert INDETERMINATE.pow(5) == INDETERMINATE
  assert INDETERMINATE.pow(0) == INDETERMINATE
  assert POS_INFINITY.pow(0) == INDETERMINATE
  assert NEG_INFINITY.pow(3) == NEG_INFINITY
  assert NEG_INFINITY.pow(2) == POS_INFINITY
  assert POS_INFINITY.pow(-1) == ZERO
  assert ZERO.pow(-1) == INDETERMINATE

def test_pow_rejects_non_integer_exponent():
  with pytest.raises(TypeError):
    new(1, 2).pow(0.5)
  with pytest.raises(TypeError):
    new(1, 2) ** 0.5

def test_sum():
  assert Fraction.sum([new(5, 6), new(7, 9), new(-3, 1)]) == (new(-25, 18), 3)
  assert Fraction.sum([]) == (ZERO, 0)
  assert Fraction.sum([new(1, 2), (1, 2), 1]) == (new(2, 1), 3)

def test_sum_with_infinities():
  assert Fraction.sum([new(1, 2), POS_INFINITY, new(3, 1)]) == (POS_INFINITY, 3)
  assert Fraction.sum([POS_INFINITY, POS_INFINITY]) == (POS_INFINITY, 2)
  assert Fraction.sum([POS_INFINITY, NEG_INFINITY]) == (INDETERMINATE, 2)

def test_prod():
  assert Fraction.prod([new(2, 3), new(3, 4), new(4, 5)]) == (new(2, 5), 3)
  assert Fraction.prod([]) == (ONE, 0)
  assert Fraction.prod([ZERO, POS_INFINITY]) == (INDETERMINATE, 2)
  assert Fraction.prod([new(7, 3)] * 50) == (new(7 ** 50, 3 ** 50), 50)

def test_average():
  p = new(5, 6)
  q = new(7, 9)
  r = new(-3, 1)
  assert Fraction.average(p, q) == new(87, 108)
  assert Fraction.average([p, q, r]) == new(-25, 54)
  assert Fraction.average([p, q, r]).eq(p.add(q).add(r).mul(new(1, 3)))
  assert Fraction.average([]) == INDETERMINATE

def test_mediant():
  p = new(123, 7)
  q = new(32, -6)
  m = p.mediant(q)
  assert m == q.mediant(p)
  assert raw_string(m.deci('gt', 8)) == '7'
  assert m.mediant(q) == new(59, 19)
  assert raw_string(m.mediant(q).deci('gt', 8)) == '31052632E-7'
  assert raw_string(m.mediant(q).deci('lt', 8)) == '31052631E-7'

def test_mediant_specials():
  assert INDETERMINATE.mediant(INDETERMINATE) == INDETERMINATE
  assert new(3, 1).mediant(POS_INFINITY) == new(4, 1)
  assert new(3, 1).mediant(NEG_INFINITY) == new(2, 1)

def test_deci_bounds():
  p = new(59, 19)
  high = p.deci(Relation.GT, 8)
  low = p.deci(Relation.LT, 8)
  assert low < high
  assert high - low == Decimal('1E-7')
  assert new(-2, 3).deci('gt', 3) == Decimal('-0.666')
  assert new(-2, 3).deci(Rounding.FLOOR, 3) == Decimal('-0.667')
  assert new(2, 3).deci('ceiling') == Decimal('0.66667')

def test_deci_sentinels():
  assert POS_INFINITY.deci('gt') == Decimal('Infinity')
  assert NEG_INFINITY.deci('lt') == Decimal('-Infinity')
  assert INDETERMINATE.deci('lt').is_nan()
  assert raw_string(POS_INFINITY.deci('gt')) == '+Infinity'
  assert raw_string(NEG_INFINITY.deci('gt')) == '-Infinity'

def test_deci_rejects_unknown_direction():
  with pytest.raises(ValueError):
    new(1, 2).deci('up')

def test_distance():
  assert new(4, 3).distance(new(5, 7)) == Decimal('0.6191')
  assert new(5, 7).distance(new(4, 3)) == Decimal('0.6191')
  assert new(1, 1).distance(new(3, 5)) == Decimal('0.4')
  assert new(1, 2).distance(new(2, 4)) == 0
  assert POS_INFINITY.distance(ZERO) == Decimal('Infinity')
  assert INDETERMINATE.distance(ZERO) == Decimal('Infinity')

def test_print():
  assert new(2, 3).print(tex=True) == '\\frac{2}{3}'
  assert new(12, -32).print(tex=True) == '\\frac{-12}{32}'
  assert new(2, 3).print() == '2/3'
  assert new(12, -32).print() == '-12/32'
  assert str(INDETERMINATE) == '0/0'
  assert repr(new(2, 3)) == 'Fraction(2/3)'
