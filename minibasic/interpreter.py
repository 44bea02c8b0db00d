"""Interpreter for minibasic programs.

The interpreter walks a parsed `Program` one line at a time. Its only
state is a cursor, the position of the next line to run, and the
variable `Environment`, which starts out empty for every run. `GO TO`
moves the cursor to the first line carrying the target number; the
program itself is never modified, so one `Program` can be run any
number of times.

There is no step limit: `10 GO TO 10` runs until the host
stops it. Hosts that need a bound can drive `Interpreter.steps` and stop
consuming it.

Undefined variables and jumps to missing lines raise `BasicError`. The
interpreter does not catch them; it is up to the caller to report the
error, abort or carry on.
"""

from __future__ import annotations

from typing import Iterator, Optional

from .ast import Assign, Comment, Empty, Jump, Line, Literal, Print, VariableRef
from .environment import Environment
from .errors import BasicError
from .parser import parse_program
from .program import Program
from .types import ErrorVal, to_string, type_name


class Interpreter:
    """Executes a minibasic `Program`."""
    def __init__(self, debug_level: int = 0, debug_file: str = 'debug.txt'):
        self.env = Environment()
        self.cursor: Optional[int] = None
        self.debug_level = debug_level
        self.debug_file = debug_file
        self.debug_fp = None
        self.debug_opened = False

    def open_debug(self):
        # The first run truncates the debug file, later runs append to it
        if self.debug_level > 0 and self.debug_fp is None:
            self.debug_fp = open(self.debug_file, 'a' if self.debug_opened else 'w')
            self.debug_opened = True

    def debug(self, msg: str):
        if self.debug_level > 0 and self.debug_fp:
            self.debug_fp.write(msg + '\n')
            self.debug_fp.flush()

    def close(self):
        if self.debug_fp:
            self.debug_fp.close()
            self.debug_fp = None

    # Public API
    def run(self, program: Program) -> Environment:
        try:
            for _ in self.steps(program):
                pass
            return self.env
        finally:
            self.close()

    def steps(self, program: Program) -> Iterator[Line]:
        """Run `program`, yielding each line after it has executed."""
        self.env = Environment()
        self.cursor = 0
        self.open_debug()
        if self.debug_level >= 1:
            self.debug(f"run {len(program)} lines")
        while self.cursor is not None and self.cursor < len(program):
            line = program[self.cursor]
            self.cursor += 1
            if self.debug_level >= 3:
                self.debug(f"line {line.number}: {line.command}")
            self.execute(line, program)
            yield line
        self.cursor = None
        if self.debug_level >= 1:
            self.debug("finished")

    def execute(self, line: Line, program: Program):
        command = line.command
        try:
            if isinstance(command, Print):
                print(self.print_text(command))
                return
            if isinstance(command, Jump):
                self.jump(command.line_number, program)
                return
            if isinstance(command, Assign):
                value = self.env.resolve(command.value)
                self.env.set(command.name, value)
                if self.debug_level >= 2:
                    self.debug(f"assign {command.name}: {type_name(value)} = {to_string(value)}")
                return
            if isinstance(command, (Comment, Empty)):
                return
        except BasicError as e:
            if e.line_number is None:
                raise BasicError(e.err, line.number) from None
            raise
        raise NotImplementedError(f"execute: unexpected command type {type(command)}")

    def print_text(self, command: Print) -> str:
        target = command.target
        if isinstance(target, Literal):
            return target.text
        if isinstance(target, VariableRef):
            return to_string(self.env.get(target.name))
        raise NotImplementedError(f"print: unexpected target type {type(target)}")

    def jump(self, number: int, program: Program):
        pos = program.find_line(number)
        if pos is None:
            raise BasicError(ErrorVal('JumpError', f'no line numbered {number}'))
        if self.debug_level >= 1:
            self.debug(f"jump to {number}")
        self.cursor = pos


def run_program(source: str, debug_level: int = 0) -> Environment:
    """Convenience function to parse and run a minibasic program from source string."""
    program = parse_program(source)
    interpreter = Interpreter(debug_level=debug_level)
    return interpreter.run(program)


def compile_module(file_path: str, debug_level: int = 0) -> Interpreter:
    """Parse and execute a minibasic file, returning the interpreter instance."""
    with open(file_path, 'r', encoding='utf-8') as f:
        source = f.read()
    program = parse_program(source)
    interpreter = Interpreter(debug_level=debug_level)
    interpreter.run(program)
    return interpreter
