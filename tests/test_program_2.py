from pathlib import Path
from minibasic.interpreter import parse_program, Interpreter

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_2_prints_integer_variable(capsys):
    with open(EXAMPLES / 'program_2.bas', 'r', encoding='utf-8') as f:
        source = f.read()
    program = parse_program(source)
    interp = Interpreter()
    interp.run(program)
    out = capsys.readouterr().out
    # Line 20 refers to the integer variable a by name
    assert out == '1\n'
