import time
import functools
import logging

import numpy as np

from ratcalc.types import Fraction
from ratcalc import debug_flags

log = logging.getLogger(__name__)

FLOAT_STEP = 1.0234

def case_frac_add(count):
  # doubling keeps the denominator shared
  return functools.reduce(lambda acc, _: acc.add(acc), range(count), Fraction(5, 2))

def case_frac_add_fixed(count):
  step = Fraction(7, 3)
  return functools.reduce(lambda acc, _: acc.add(step), range(count), Fraction(5, 2))

def case_frac_add_new(count):
  return functools.reduce(lambda acc, _: acc.add(Fraction(7, 3)), range(count), Fraction(5, 2))

def case_frac_quick_add(count):
  return Fraction.sum([Fraction(7, 3)] * count)[0]

def case_frac_quick_mul(count):
  return Fraction.prod([Fraction(7, 3)] * count)[0]

def case_float_add(count):
  return functools.reduce(lambda acc, _: acc + FLOAT_STEP, range(count), 3)

def case_float_mul(count):
  return functools.reduce(lambda acc, _: acc * FLOAT_STEP, range(count), 3)

CASES = {
  'frac_add':       case_frac_add,
  'frac_add_fixed': case_frac_add_fixed,
  'frac_add_new':   case_frac_add_new,
  'frac_quick_add': case_frac_quick_add,
  'frac_quick_mul': case_frac_quick_mul,
  'float_add':      case_float_add,
  'float_mul':      case_float_mul,
}

def measure(case, count : int, repeat : int) -> np.ndarray:
  '''
  Wall-clock seconds of `repeat` runs of a case.
  '''
  samples = np.empty(repeat, dtype=float)
  for i in range(repeat):
    start = time.perf_counter()
    case(count)
    samples[i] = time.perf_counter() - start
    if debug_flags.SHOW_BENCH_SAMPLES:
      log.info('  sample %d: %.6fs', i, samples[i])
  return samples

def execute_fraction(result):
  names = result.cases or list(CASES)
  summary = {}
  for name in names:
    samples = measure(CASES[name], result.count, result.repeat)
    summary[name] = {
      'mean': float(np.mean(samples)),
      'min':  float(np.min(samples)),
      'std':  float(np.std(samples)),
    }
    log.info(
      '%-16s mean %.6fs  min %.6fs  std %.6fs',
      name, summary[name]['mean'], summary[name]['min'], summary[name]['std'],
    )
  return summary
