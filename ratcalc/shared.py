import argparse

parser = argparse.ArgumentParser(
  description='Exact fraction and interval calculator.',
)
parser.add_argument(
  '--tex',
  action='store_true', dest='tex',
  help='Print fractions as TeX \\frac macros.',
)
parser.add_argument(
  '--versions',
  action='store_true', dest='show_versions',
  help='Log Python, ratcalc and NumPy versions before running.',
)

def create_subparser(g):
  from typing import Any
  from ratcalc import cli as cli_extensions

  subparser = parser.add_subparsers(
    dest='group',
    parser_class=cli_extensions.SubparserExtensionParser,
  )
  def parser_new_group(
    key_name : str,
    title : str,
    *,
    key_options : dict[str, Any] = dict(),
    parser_options : dict[str, Any] = dict(),
  ):
    '''
    Defines a new command group attached from the base subparser.
    '''
    if not isinstance(key_options, dict):
      key_options = dict()
    if not isinstance(parser_options, dict):
      parser_options = dict()

    parser_options['parser_class'] = argparse.ArgumentParser

    group_parser = subparser.add_parser(key_name, **key_options)
    action_parser = group_parser.add_subparsers(
      title=title,
      dest='action',
      **parser_options,
    )
    return action_parser

  g['parser_new_group'] = parser_new_group
  del g['create_subparser']

create_subparser(globals())
