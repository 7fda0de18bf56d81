import argparse

from ratcalc.shared import parser_new_group
from ratcalc import utils

def option_mixin_one_interval():
  '''
  Parser option mixin to receive a single interval.
  '''
  parser = argparse.ArgumentParser(add_help=False)
  parser.add_argument(
    'interval',
    action='store', type=utils.parse_interval, metavar='p,q',
    help='Interval operand as two comma separated fractions.',
  )

  return parser

def option_mixin_two_intervals():
  '''
  Parser option mixin to receive a pair of intervals.
  '''
  parser = argparse.ArgumentParser(add_help=False)
  parser.add_argument(
    'left',
    action='store', type=utils.parse_interval, metavar='p,q',
    help='Left operand.',
  )
  parser.add_argument(
    'right',
    action='store', type=utils.parse_interval, metavar='p,q',
    help='Right operand.',
  )

  return parser

def option_action_simple(group_parser, name, description, *mixin_parsers):
  group_parser.add_parser(
    name,
    description=description,
    parents=mixin_parsers,
  )

def option_action_pow(group_parser, *mixin_parsers):
  '''
  Option definition for interval powers.
  '''
  parser = group_parser.add_parser(
    'pow',
    description='Raises every point of an interval to an integer power.',
    parents=mixin_parsers,
  )
  parser.add_argument(
    'exponent',
    action='store', type=int, metavar='n',
    help='Integer exponent, any sign.',
  )

def define_parser(g):
  '''
  Create parser definition.
  '''
  group_parser = parser_new_group(
    'interval', 'Interval',
    key_options = {
      'description': 'Closed interval arithmetic over fractions',
    },
  )

  one_mixin = option_mixin_one_interval()
  two_mixin = option_mixin_two_intervals()

  option_action_simple(group_parser, 'show', 'Prints an interval and its length.', one_mixin)
  option_action_simple(group_parser, 'add', 'Adds two intervals.', two_mixin)
  option_action_simple(group_parser, 'sub', 'Subtracts two intervals.', two_mixin)
  option_action_simple(group_parser, 'mul', 'Multiplies two intervals.', two_mixin)
  option_action_simple(group_parser, 'div', 'Divides two intervals.', two_mixin)
  option_action_simple(group_parser, 'neg', 'Negates an interval.', one_mixin)
  option_action_simple(group_parser, 'flip', 'Reciprocal of an interval.', one_mixin)
  option_action_pow(group_parser, one_mixin)

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
