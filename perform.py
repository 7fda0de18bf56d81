#!/usr/bin/env python3
# ruff: noqa: D103
import logging
import argparse

from ratcalc.utils import (
  setup_logging,
  print_versions,
)

from calc_modules import cli

log = logging.getLogger()

def underscore(s):
  return s.replace('-', '_') if isinstance(s, str) else None

def action_selection(argv=None):
  from ratcalc.shared import parser

  result = argparse.Namespace(group=None, action=None)
  parser.parse_args(argv, namespace=result)

  if result.show_versions:
    print_versions()

  filtered_result = argparse.Namespace(**{
    k: v for k, v in vars(result).items()
    if k not in ('group', 'action', 'show_versions')
  })

  try:
    return cli.process_action(underscore(result.group), underscore(result.action), filtered_result)
  except (cli.CalcActionNotFound, cli.CalcActionInvalid):
    log.error('Action %s on group %s not found', result.action, result.group)
    group_parser = next(
      group.choices[result.group]
      for group in parser._subparsers._group_actions
      if group.dest == 'group'
    )
    group_parser.print_help()
  except cli.CalcModuleNotFound:
    log.error('Group %s not found', result.group)
    parser.print_help()

def main(argv=None):
  setup_logging(log)
  action_selection(argv)

if __name__ == '__main__':
  main()
