from ratcalc.shared import parser_new_group
from ratcalc import utils

def option_action_fraction(group_parser):
  '''
  Option definition for fraction benchmarks.
  '''
  from .action import CASES

  parser = group_parser.add_parser(
    'fraction',
    description='Times repeated fraction sums and products.',
  )
  parser.add_argument(
    '-c', '--case',
    action='extend', nargs='+', dest='cases',
    choices=sorted(CASES), metavar='case',
    help='Cases to run, all by default: {}.'.format(', '.join(sorted(CASES))),
  )
  parser.add_argument(
    '-n', '--count',
    action='store', dest='count',
    default=10000, type=utils.positive_int, metavar='n',
    help='Operations per run.',
  )
  parser.add_argument(
    '-r', '--repeat',
    action='store', dest='repeat',
    default=5, type=utils.positive_int, metavar='n',
    help='Runs per case.',
  )

def define_parser(g):
  '''
  Create parser definition.
  '''
  group_parser = parser_new_group(
    'bench', 'Benchmark',
    key_options = {
      'description': 'Timing of fraction arithmetic',
    },
  )

  option_action_fraction(group_parser)

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
