import logging

log = logging.getLogger(__name__)

def _emit(interval, result):
  '''
  Print an interval with its length on stdout and return it.
  '''
  print('{} length={}'.format(
    interval.print(tex=getattr(result, 'tex', False)),
    interval.length,
  ))
  return interval

def _binary(operation):
  def execute(result):
    value = getattr(result.left, operation)(result.right)
    log.debug('%s %s %s = %s', result.left, operation, result.right, value)
    return _emit(value, result)
  execute.__name__ = 'execute_' + operation
  return execute

def _unary(operation):
  def execute(result):
    return _emit(getattr(result.interval, operation)(), result)
  execute.__name__ = 'execute_' + operation
  return execute

execute_add  = _binary('add')
execute_sub  = _binary('sub')
execute_mul  = _binary('mul')
execute_div  = _binary('divi')
execute_neg  = _unary('neg')
execute_flip = _unary('flip')

def execute_show(result):
  return _emit(result.interval, result)

def execute_pow(result):
  return _emit(result.interval.pow(result.exponent), result)
