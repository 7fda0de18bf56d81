import argparse

from ratcalc.shared import parser_new_group
from ratcalc import utils

def option_mixin_one_fraction():
  '''
  Parser option mixin to receive a single fraction.
  '''
  parser = argparse.ArgumentParser(add_help=False)
  parser.add_argument(
    'fraction',
    action='store', type=utils.parse_fraction, metavar='n/d',
    help='Fraction operand.',
  )

  return parser

def option_mixin_two_fractions():
  '''
  Parser option mixin to receive a pair of fractions.
  '''
  parser = argparse.ArgumentParser(add_help=False)
  parser.add_argument(
    'left',
    action='store', type=utils.parse_fraction, metavar='n/d',
    help='Left operand.',
  )
  parser.add_argument(
    'right',
    action='store', type=utils.parse_fraction, metavar='n/d',
    help='Right operand.',
  )

  return parser

def option_mixin_set_of_fractions():
  '''
  Parser option mixin to receive any number of fractions.
  '''
  parser = argparse.ArgumentParser(add_help=False)
  parser.add_argument(
    'fractions',
    action='extend', nargs='*', type=utils.parse_fraction, metavar='n/d',
    help='Fraction operands.',
  )

  return parser

def option_action_binary(group_parser, name, description, *mixin_parsers):
  group_parser.add_parser(
    name,
    description=description,
    parents=mixin_parsers,
  )

def option_action_reduce(group_parser, *mixin_parsers):
  '''
  Option definition for reduction.
  '''
  parser = group_parser.add_parser(
    'reduce',
    description='Reduces a fraction by its gcd, or by a given factor.',
    parents=mixin_parsers,
  )
  parser.add_argument(
    '--factor',
    action='store', dest='factor',
    default=None, type=int, metavar='k',
    help='Factor dividing both numerator and denominator.',
  )

def option_action_pow(group_parser, *mixin_parsers):
  '''
  Option definition for integer powers.
  '''
  parser = group_parser.add_parser(
    'pow',
    description='Raises a fraction to an integer power.',
    parents=mixin_parsers,
  )
  parser.add_argument(
    'exponent',
    action='store', type=int, metavar='n',
    help='Integer exponent, any sign.',
  )

def option_action_deci(group_parser, *mixin_parsers):
  '''
  Option definition for decimal rendering.
  '''
  parser = group_parser.add_parser(
    'deci',
    description='Renders a fraction as a decimal bound.',
    parents=mixin_parsers,
  )
  parser.add_argument(
    '-d', '--direction',
    action='store', dest='direction',
    default='gt', choices=('gt', 'lt', 'ceiling', 'floor'),
    help='gt/ceiling for an upper bound, lt/floor for a lower bound.',
  )
  parser.add_argument(
    '-p', '--precision',
    action='store', dest='precision',
    default=5, type=utils.positive_int, metavar='digits',
    help='Significant digits to keep.',
  )

def define_parser(g):
  '''
  Create parser definition.
  '''
  group_parser = parser_new_group(
    'fraction', 'Fraction',
    key_options = {
      'description': 'Exact fraction arithmetic',
    },
  )

  one_mixin = option_mixin_one_fraction()
  two_mixin = option_mixin_two_fractions()
  set_mixin = option_mixin_set_of_fractions()

  option_action_binary(group_parser, 'show', 'Prints fractions in canonical form.', set_mixin)
  option_action_reduce(group_parser, one_mixin)
  option_action_binary(group_parser, 'add', 'Adds two fractions.', two_mixin)
  option_action_binary(group_parser, 'sub', 'Subtracts two fractions.', two_mixin)
  option_action_binary(group_parser, 'mul', 'Multiplies two fractions.', two_mixin)
  option_action_binary(group_parser, 'div', 'Divides two fractions.', two_mixin)
  option_action_pow(group_parser, one_mixin)
  option_action_binary(group_parser, 'mediant', 'Mediant of two fractions.', two_mixin)
  option_action_binary(group_parser, 'compare', 'Compares two fractions.', two_mixin)
  option_action_binary(group_parser, 'average', 'Averages fractions.', set_mixin)
  option_action_binary(group_parser, 'sum', 'Sums fractions, reduced once.', set_mixin)
  option_action_binary(group_parser, 'prod', 'Multiplies fractions, reduced once.', set_mixin)
  option_action_deci(group_parser, one_mixin)

  delete = set(['define_parser'])
  delete.update(
    k
    for k in g.keys()
    if k.startswith('option_')
  )
  for delete_key in delete:
    del g[delete_key]

def fetch_action(action_name : str):
  '''
  Get group action.
  '''
  from . import action as action_module
  return getattr(action_module, action_name, None)

define_parser(globals())
