import sys
import logging

from .. import debug_flags

LOG_FORMAT = '[{asctime}] [{levelname:<8}] {name}: {message}'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

class RatcalcHandler(logging.StreamHandler):
  pass

def setup_logging(log, stream=None):
  '''
  Attaches the ratcalc stderr handler to log.

  Level follows debug_flags.DEBUG_LOGGING, so interval case traces
  and benchmark samples only surface when it is set.
  Calling it again on the same logger does not stack handlers.
  '''
  if not any(isinstance(h, RatcalcHandler) for h in log.handlers):
    handler = RatcalcHandler(stream=stream or sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT, style='{'))
    log.addHandler(handler)
  log.setLevel(logging.DEBUG if debug_flags.DEBUG_LOGGING else logging.INFO)
  return log

__all__ = (
  'setup_logging',
)
