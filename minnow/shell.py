"""Interactive mode for the Minnow interpreter. Uses cmd as backend."""

from __future__ import annotations

import cmd
import sys

from .errors import MinnowError
from .interpreter import Interpreter
from .parser import parse_program


class Shell(cmd.Cmd):
    """Minnow line-at-a-time session.

    Every line is parsed and evaluated against the same interpreter, so a
    ``let`` on one line is visible to the next. Failures are reported and
    the session carries on; only an ``exit`` statement or end of input
    ends it.
    """
    intro = "Running REPL. Type 'exit <num>;' to quit."
    prompt = ">>> "

    def __init__(self, interpreter: Interpreter | None = None, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.interpreter = interpreter if interpreter is not None else Interpreter()

    def cmdloop(self, intro=None):
        """Reads lines until end of input.

        cmd.Cmd reports end of input as the line 'EOF', which is also a valid
        Minnow identifier, so the loop tracks it separately.
        """
        self.preloop()
        if intro is not None:
            self.intro = intro
        if self.intro:
            self.stdout.write(str(self.intro) + "\n")
        stop = False
        while not stop:
            line = self.read_line()
            if line is None:
                stop = self.do_EOF('')
            else:
                stop = self.onecmd(line)
        self.postloop()

    def read_line(self):
        """Returns the next input line, or None at end of input."""
        if self.use_rawinput:
            try:
                return input(self.prompt)
            except EOFError:
                return None
        self.stdout.write(self.prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            return None
        return line.rstrip('\r\n')

    def onecmd(self, line):
        # 'exit 3;' and 'let x = 1;' are programs, not shell commands
        line = line.strip()
        if not line:
            return self.emptyline()
        return self.default(line)

    def default(self, line):
        """Evaluates one line of Minnow source."""
        try:
            program = parse_program(line)
            result = self.interpreter.eval_program(program)
        except MinnowError as e:
            print(f"Error: {e}", file=sys.stderr)
            return False
        print(result, file=self.stdout)
        return False

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        return False

    def do_EOF(self, arg):
        """Exits interpreter."""
        print(file=self.stdout)
        self.interpreter.close()
        return True
