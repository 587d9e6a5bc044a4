# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
utest is a tiny unit testing library.
Test modules are plain scripts named `*.ut.py`; each call below counts as one test.
Failures are reported to stderr, and the process exits with status 1 at exit if any test failed.
'''


import atexit as _atexit
import inspect as _inspect
from math import isclose as _isclose
from os.path import relpath as _rel_path
from sys import stderr as _stderr
from traceback import print_exception as _print_exception
from typing import Any, Callable, TypeVar


__all__ = [
  'utest',
  'utest_approx',
  'utest_call',
  'utest_exc',
  'utest_symmetric',
  'utest_val',
  'utest_val_approx',
]


_utest_test_count = 0
_utest_failure_count = 0

default_rel_tol = 1e-9


_C = TypeVar('_C', bound=Callable)
def utest_call(callable:_C) -> _C:
  'A function decorator to call the defined function immediately. Useful for wrapping test state in a local function scope.'
  callable()
  return callable


def utest(exp:Any, fn:Callable, *args:Any, _utest_depth=0, **kwargs:Any) -> None:
  '''
  Invoke `fn` with `args` and `kwargs`.
  Log a test failure if an exception is raised or the returned value does not equal `exp`.
  '''
  global _utest_test_count
  _utest_test_count += 1
  try: ret = fn(*args, **kwargs)
  except BaseException as exc:
    _utest_failure(_utest_depth, exp_label='value', exp=exp, exc=exc, subj=fn, args=args, kwargs=kwargs)
  else:
    if exp != ret:
      _utest_failure(_utest_depth, exp_label='value', exp=exp, ret_label='value', ret=ret, subj=fn, args=args, kwargs=kwargs)


def utest_approx(exp:Any, fn:Callable, *args:Any, _rel_tol=default_rel_tol, _abs_tol=0.0, _utest_depth=0, **kwargs:Any) -> None:
  '''
  Invoke `fn` with `args` and `kwargs`.
  Log a test failure if an exception is raised or the returned value is not close to `exp`.
  `exp` may be a number or a sequence of numbers (including Point and other iterable values);
  sequences are compared element by element with `math.isclose`.
  '''
  global _utest_test_count
  _utest_test_count += 1
  try: ret = fn(*args, **kwargs)
  except BaseException as exc:
    _utest_failure(_utest_depth, exp_label='approximate value', exp=exp, exc=exc, subj=fn, args=args, kwargs=kwargs)
  else:
    if not _approx_eq(exp, ret, rel_tol=_rel_tol, abs_tol=_abs_tol):
      _utest_failure(_utest_depth, exp_label='approximate value', exp=exp, ret_label='value', ret=ret,
        subj=fn, args=args, kwargs=kwargs)


def utest_exc(exp_exc:Any, fn:Callable, *args:Any, _utest_depth=0, **kwargs:Any) -> None:
  '''
  Invoke `fn` with `args` and `kwargs`.
  Log a test failure if an exception is not raised or if the raised exception type and args not match `exp_exc`.
  '''
  global _utest_test_count
  _utest_test_count += 1
  try: ret = fn(*args, **kwargs)
  except BaseException as exc:
    if not _compare_exceptions(exp_exc, exc):
      _utest_failure(_utest_depth, exp_label='exception', exp=exp_exc, exc=exc, subj=fn, args=args, kwargs=kwargs)
  else:
    _utest_failure(_utest_depth, exp_label='exception', exp=exp_exc, ret_label='value', ret=ret, subj=fn, args=args, kwargs=kwargs)


def utest_val(exp_val:Any, act_val:Any, desc='<value>') -> None:
  '''
  Log a test failure if `exp_val` does not equal `act_val`.
  Describe the test with the optional `desc`.
  '''
  global _utest_test_count
  _utest_test_count += 1
  if exp_val != act_val:
    _utest_failure(depth=0, exp_label='value', exp=exp_val, ret_label='value', ret=act_val, subj=repr(desc))


def utest_val_approx(exp_val:Any, act_val:Any, desc='<value>', rel_tol=default_rel_tol, abs_tol=0.0) -> None:
  '''
  Log a test failure if `act_val` is not close to `exp_val`.
  Describe the test with the optional `desc`.
  '''
  global _utest_test_count
  _utest_test_count += 1
  if not _approx_eq(exp_val, act_val, rel_tol=rel_tol, abs_tol=abs_tol):
    _utest_failure(depth=0, exp_label='approximate value', exp=exp_val, ret_label='value', ret=act_val, subj=repr(desc))


def utest_symmetric(test_fn:Callable, exp:Any, fn:Callable, *args:Any, _utest_depth=0, **kwargs:Any) -> None:
  '''
  Apply `test_fn` to the provided arguments,
  then again to the same arguments but with the last two positional parameters swapped.
  '''
  head = args[:-2]
  argA, argB = args[-2:]
  args_swapped = head + (argB, argA)
  test_fn(exp, fn, *args, _utest_depth=_utest_depth+1, **kwargs)
  test_fn(exp, fn, *args_swapped, _utest_depth=_utest_depth+1, **kwargs)


def _approx_eq(exp:Any, act:Any, rel_tol:float, abs_tol:float) -> bool:
  if isinstance(exp, (int, float)):
    return isinstance(act, (int, float)) and _isclose(exp, act, rel_tol=rel_tol, abs_tol=abs_tol)
  if exp is None or act is None: return exp is act
  try:
    exp_items = list(exp)
    act_items = list(act)
  except TypeError:
    return bool(exp == act)
  return len(exp_items) == len(act_items) and all(
    _approx_eq(e, a, rel_tol=rel_tol, abs_tol=abs_tol) for e, a in zip(exp_items, act_items))


def _utest_failure(depth:int, exp_label:str, exp:Any, ret_label:str|None=None, ret:Any=None, exc:Any=None, subj:Any=None,
 args:tuple[Any,...]=(), kwargs:dict[str,Any]={}) -> None:

  global _utest_failure_count
  assert subj is not None
  _utest_failure_count += 1

  frame_record = _inspect.stack()[2 + depth] # caller of caller.
  frame = frame_record[0]
  info = _inspect.getframeinfo(frame)

  try: name = subj.__qualname__
  except AttributeError: name = str(subj)

  path = _rel_path(info.filename)
  if '/' not in path: path = f'./{path}'
  _errL(f'\n{path}:{info.lineno}: utest failure: {name}')

  for i, el in enumerate(args):
    _errL(f'  arg {i} = {el!r}')

  for name, val, in kwargs.items():
    _errL(f'  arg {name} = {val!r}')

  exp_label_colon = f'expected {exp_label}:'
  res_label_colon = f'returned {ret_label}:'
  res = ret
  if exc is not None: # Unexpected exception.
    res_label_colon = 'raised exception:'
    res = exc
  width = max(len(exp_label_colon), len(res_label_colon))

  _errL(f'  {exp_label_colon:{width}} {exp!r}')
  _errL(f'  {res_label_colon:{width}} {res!r}')
  if exc is not None:
    for i, arg in enumerate(exc.args):
      _errL(f'    exc arg {i}: {arg!r}')
    _errL()
    _print_exception(exc, file=_stderr)
  _errL()


def _compare_exceptions(exp:Any, act:Any) -> bool:
  '''
  Compare two exceptions for approximate value equality.
  Since Python exceptions do not implement value equality, we offer several methods of comparison:
  * if `exp` is a string, then compare it to the repr of `act`.
  * if `exp` is a type, then test if `act` is an instance of `exp`.
  * otherwise, compare the types and args of `act` (which must be an exception instance) to `exp`.
  '''
  if isinstance(exp, str): return exp == repr(act)
  if isinstance(exp, type): return isinstance(act, exp)
  return type(exp) == type(act) and exp.args == act.args


def _errL(*items:Any) -> None: print(*items, sep='', file=_stderr)


@_atexit.register
def report() -> None:
  'At process exit, if any test failures occured, print a summary message and force process to exit with status code 1.'
  from os import _exit
  if _utest_failure_count > 0:
    _errL(f'\nutest ran: {_utest_test_count}; failed: {_utest_failure_count}')
    _stderr.flush()
    _exit(1) # raising SystemExit has no effect in an atexit handler.
