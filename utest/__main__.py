#!/usr/bin/env python3
# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from argparse import ArgumentParser
from os import environ, getcwd, pathsep
from pathlib import Path
from subprocess import run
from sys import executable


def main() -> None:
  arg_parser = ArgumentParser(description='Find and run utest unit tests with the extension ".ut.py", defaulting to "test/".')
  arg_parser.add_argument('paths', nargs='*', default=['test'])
  args = arg_parser.parse_args()
  paths = sorted(p for arg in args.paths for p in walk_ut_files(Path(arg)))

  env = dict(environ)
  env.setdefault('UTEST_WORK_DIR', getcwd())
  pythonpath = env.get('PYTHONPATH')
  env['PYTHONPATH'] = getcwd() + (pathsep + pythonpath if pythonpath else '')
  #^ The project root is importable from every test script.

  ok = True
  for path in paths:
    print(path)
    c = run([executable, str(path)], env=env).returncode
    if c != 0:
      ok = False
      print()

  exit(0 if ok else 1)


def walk_ut_files(path:Path) -> list[Path]:
  if path.is_file(): return [path] if path.name.endswith('.ut.py') else []
  return [p for p in path.rglob('*.ut.py') if p.is_file()]


if __name__ == '__main__': main()
