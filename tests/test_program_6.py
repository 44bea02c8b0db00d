from pathlib import Path

import pytest

from minibasic.errors import BasicError
from minibasic.interpreter import parse_program, Interpreter

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_6_missing_jump_target_aborts(capsys):
    with open(EXAMPLES / 'program_6.bas', 'r', encoding='utf-8') as f:
        source = f.read()
    program = parse_program(source)
    interp = Interpreter()
    with pytest.raises(BasicError) as exc_info:
        interp.run(program)
    assert exc_info.value.err.name == 'JumpError'
    assert exc_info.value.line_number == 20
    out = capsys.readouterr().out
    # Output before the bad jump is kept, nothing after it runs
    assert out.splitlines() == ['before']
