#!/usr/bin/env python3
# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from argparse import ArgumentParser
from os import environ, getcwd, pathsep, walk
from os.path import isfile, join as path_join
from subprocess import run
from sys import executable


def main() -> None:
  arg_parser = ArgumentParser(description='Find and run utest unit tests with the extension ".ut.py", defaulting to "test/".')
  arg_parser.add_argument('paths', nargs='*', default=['test'])
  args = arg_parser.parse_args()

  env = dict(environ)
  work_dir = getcwd()
  # Make the packages in the working directory importable without installation.
  env['PYTHONPATH'] = pathsep.join(p for p in (work_dir, environ.get('PYTHONPATH')) if p)

  paths = list(find_tests(args.paths))
  if not paths: exit(f'utest: no tests found in: {" ".join(args.paths)}')

  failed = []
  for path in paths:
    print(path)
    c = run([executable, path], env=env).returncode
    if c != 0:
      failed.append(path)
      print()

  if failed:
    print(f'utest: {len(failed)} of {len(paths)} test files failed.')
  exit(1 if failed else 0)


def find_tests(roots:list[str]):
  'Yield the `.ut.py` files in `roots`, in sorted order.'
  for root in roots:
    if isfile(root):
      yield root
      continue
    for dir_path, dir_names, file_names in walk(root):
      dir_names.sort()
      for name in sorted(file_names):
        if name.endswith('.ut.py'):
          yield path_join(dir_path, name)


if __name__ == '__main__': main()
