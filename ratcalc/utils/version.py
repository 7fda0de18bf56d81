import logging

log = logging.getLogger(__name__)

def python_version():
  import sys
  version = sys.version_info
  log.info('Python version: %d.%d.%d', version.major, version.minor, version.micro)

def package_version():
  from ratcalc import __version__
  log.info('ratcalc version: %s', __version__)

def numpy_version():
  import numpy as np
  log.info('NumPy version: %s', np.__version__)

def print_versions():
  python_version()
  package_version()
  numpy_version()

__all__ = (
  'print_versions',
  'python_version',
  'package_version',
  'numpy_version',
)
