'''
CLI extension module.

Lists command groups one per line with their description
in the root help output.
'''

import argparse

def describe_group(self, group_name : str, group_parser) -> str:
  '''
  One help line naming a command group and its description.
  '''
  description = (group_parser.description or '').strip()
  if not description:
    return '%*s%s\n' % (self._current_indent, '', group_name)

  extra_pad = self._action_max_length - len(group_name)
  return '%*s%s%*s%s\n' % (
    self._current_indent, '', group_name,
    extra_pad, '', description,
  )

def describe_subparser_groups(self, action):
  '''
  Format a group-level subparser action as a vertical listing.
  '''
  if action.help is argparse.SUPPRESS:
    return

  width = max(map(len, action.choices), default=0) + self._current_indent
  self._action_max_length = max(self._action_max_length, width)

  for group_name, group_parser in action.choices.items():
    self._add_item(describe_group, [self, group_name, group_parser])

class SubparserDescribeMixin():
  def format_help(self):
    formatter = self._get_formatter()

    formatter.add_usage(
      self.usage, self._actions,
      self._mutually_exclusive_groups,
    )
    formatter.add_text(self.description)

    for action_group in self._action_groups:
      formatter.start_section(action_group.title)
      for action in action_group._group_actions:
        if isinstance(action, argparse._SubParsersAction):
          describe_subparser_groups(formatter, action)
        else:
          formatter.add_argument(action)
      formatter.end_section()
    formatter.add_text(self.epilog)

    return formatter.format_help()

class SubparserExtensionParser(SubparserDescribeMixin, argparse.ArgumentParser):
  pass
