"""CLI entry point for the Minnow interpreter.

Usage:
    python -m minnow [-v|-vv|-vvv] [--debug-file PATH] [<program_file>]
    python -m minnow [-v...] --emit-ast <program_file>
    python -m minnow [-v...] --ast <ast_json_file>

Options:
  -v            Increase debug verbosity (can be repeated)
  --debug-file  Where to write the debug trace (default: debug.txt)
  --emit-ast    Parse the given .minnow file and emit an AST JSON file
  --ast         Execute a previously emitted AST JSON file

Without a program file the interpreter starts an interactive session.
The process exit code is the value of the first `exit` statement reached;
a program that never exits leaves it at 0. Syntax and runtime errors are
reported on stderr and end a file run with status 1.
"""

import argparse
import json
import sys
from pathlib import Path
from .ast_json import ast_to_obj, ast_from_obj
from .errors import MinnowError
from .interpreter import Interpreter
from .parser import parse_program
from .shell import Shell


def read_source(path: Path) -> str:
    if not path.exists():
        print(f"Error: file {path} not found", file=sys.stderr)
        sys.exit(1)
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Minnow language interpreter")
    parser.add_argument('-v', action='count', default=0, help='increase debug verbosity (can be repeated)')
    parser.add_argument('--debug-file', default='debug.txt', help='debug trace file (default: debug.txt)')
    group = parser.add_mutually_exclusive_group()
    group.add_argument('--emit-ast', metavar='MINNOW_FILE', help='emit AST JSON for the given .minnow file')
    group.add_argument('--ast', metavar='AST_JSON_FILE', help='execute AST from a JSON file')
    parser.add_argument('program', nargs='?', help='Minnow program file (.minnow) to execute')
    args = parser.parse_args(argv)

    # Emit AST mode
    if args.emit_ast:
        program_file = Path(args.emit_ast)
        source = read_source(program_file)
        try:
            ast_program = parse_program(source)
        except MinnowError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        try:
            obj = ast_to_obj(ast_program)
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        out_path = program_file.with_name(program_file.name + '.ast.json')
        with open(out_path, 'w', encoding='utf-8') as out:
            json.dump(obj, out, ensure_ascii=False, indent=2)
        print(str(out_path))
        return

    # Execute from AST JSON
    if args.ast:
        ast_path = Path(args.ast)
        source = read_source(ast_path)
        # json.loads raises RecursionError on input nested past its own limit
        try:
            ast_program = ast_from_obj(json.loads(source))
        except (TypeError, ValueError, KeyError, RecursionError) as e:
            print(f"Error: invalid AST file {ast_path}: {e}", file=sys.stderr)
            sys.exit(1)
        execute(ast_program, args)
        return

    # No program: interactive session
    if not args.program:
        interpreter = Interpreter(debug_level=args.v, debug_file=args.debug_file)
        Shell(interpreter).cmdloop()
        return

    source = read_source(Path(args.program))
    try:
        ast_program = parse_program(source)
    except MinnowError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    execute(ast_program, args)


def execute(ast_program, args) -> None:
    interpreter = Interpreter(debug_level=args.v, debug_file=args.debug_file)
    try:
        interpreter.run(ast_program)
    except MinnowError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
