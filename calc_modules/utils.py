def scan_calc_package(g, mod):
  '''
  Import the `mod` submodule of every command group package.
  '''
  assert g['__package__'] == __package__, f"Only for {__package__} module."

  import os
  import glob
  import types
  import importlib

  dirname = os.path.dirname(g['__file__'])
  for pkg_file in sorted(glob.iglob(f'*/{mod}.py', root_dir = dirname)):
    module_pkg = os.path.dirname(pkg_file)
    module = importlib.import_module(f'.{module_pkg}.{mod}', package=__package__)
    # expose each group under its package name
    g[module_pkg] = module

  util_keys = set(
    k
    for k, v in g.items()
    if isinstance(v, types.ModuleType) and \
      v.__file__ == __file__
  )

  for k in util_keys:
    del g[k]
