# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

import sys
from traceback import print_stack
from types import FrameType
from typing import Any

# `sys.stderr` is looked up on each call, since it may be redirected.


def errL(*items:Any, sep='', flush=False) -> None:
  "Write items to std err; sep='', end='\\n'."
  print(*items, sep=sep, end='\n', file=sys.stderr, flush=flush)


def err_stack(*items:Any, frame:FrameType|None=None) -> None:
  '''
  Write items to std err, followed by the call stack starting at `frame`.
  This is a warning with a backtrace; it does not raise.
  '''
  errL(*items)
  print_stack(f=frame, file=sys.stderr)
  sys.stderr.flush()
