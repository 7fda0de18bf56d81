import logging

from ratcalc.types import Fraction
from ratcalc import render

log = logging.getLogger(__name__)

def _emit(value, result):
  '''
  Print a fraction (or plain value) on stdout and return it.
  '''
  if isinstance(value, Fraction):
    print(value.print(tex=getattr(result, 'tex', False)))
  else:
    print(value)
  return value

def _binary(operation):
  def execute(result):
    value = getattr(result.left, operation)(result.right)
    log.debug('%s %s %s = %s', result.left, operation, result.right, value)
    return _emit(value, result)
  execute.__name__ = 'execute_' + operation
  return execute

execute_add     = _binary('add')
execute_sub     = _binary('sub')
execute_mul     = _binary('mul')
execute_div     = _binary('divf')
execute_mediant = _binary('mediant')

def execute_show(result):
  for fraction in result.fractions:
    _emit(fraction, result)
  return result.fractions

def execute_reduce(result):
  return _emit(result.fraction.reduce(result.factor), result)

def execute_pow(result):
  return _emit(result.fraction.pow(result.exponent), result)

def execute_compare(result):
  relation = result.left.cmp(result.right)
  return _emit(relation.value, result)

def execute_average(result):
  fractions = result.fractions
  if len(fractions) == 2:
    return _emit(Fraction.average(*fractions), result)
  return _emit(Fraction.average(fractions), result)

def execute_sum(result):
  total, count = Fraction.sum(result.fractions)
  log.info('Summed %d fractions', count)
  return _emit(total, result)

def execute_prod(result):
  total, count = Fraction.prod(result.fractions)
  log.info('Multiplied %d fractions', count)
  return _emit(total, result)

def execute_deci(result):
  value = result.fraction.deci(result.direction, result.precision)
  return _emit(render.raw_string(value), result)
