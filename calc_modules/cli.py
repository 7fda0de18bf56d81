from . import utils

utils.scan_calc_package(globals(), 'cli')

class CalcModuleNotFound(KeyError):
  pass
class CalcActionNotFound(KeyError):
  pass
class CalcActionInvalid(TypeError):
  pass

def process_action(group_name : str, action_name : str, result : object):
  import types
  g = globals()

  # modules left on this namespace are command group CLI modules
  group_mod = g.get(group_name, None)
  if not isinstance(group_mod, types.ModuleType):
    raise CalcModuleNotFound(group_name)

  if action_name is None:
    raise CalcActionNotFound(group_name, action_name)
  action = group_mod.fetch_action('execute_' + action_name)
  if action is None:
    raise CalcActionNotFound(group_name, action_name)

  if not callable(action):
    raise CalcActionInvalid(group_name, action_name)

  return action(result)
