#!/usr/bin/env python3
# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from argparse import ArgumentParser
from os import environ, getcwd, makedirs, walk
from os.path import abspath, isfile, join as path_join, relpath
from subprocess import run
from sys import executable


def main() -> None:
  arg_parser = ArgumentParser(description='Find and run utest unit tests with the extension ".ut.py", defaulting to "test/".')
  arg_parser.add_argument('paths', nargs='*', default=['test'])
  args = arg_parser.parse_args()

  env = dict(environ)
  env.setdefault('UTEST_WORK_DIR', getcwd())

  utest_cwd = '_build/_utest'
  makedirs(utest_cwd, exist_ok=True)
  ok = True
  for path in walk_ut_files(args.paths):
    print(path)
    c = run([executable, abspath(path)], cwd=utest_cwd, env=env).returncode
    if c != 0:
      ok = False
      print()

  exit(0 if ok else 1)


def walk_ut_files(paths:list[str]) -> list[str]:
  'Return the sorted paths of all files ending in ".ut.py" found in or at `paths`.'
  found:list[str] = []
  for path in paths:
    if isfile(path):
      found.append(path)
      continue
    for dir_path, dir_names, file_names in walk(path):
      dir_names[:] = sorted(d for d in dir_names if not d.startswith(('.', '_')))
      found.extend(relpath(path_join(dir_path, n)) for n in sorted(file_names) if n.endswith('.ut.py'))
  return found


if __name__ == '__main__': main()
