from pathlib import Path
from minibasic.interpreter import parse_program, Interpreter

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_1_hello_world(capsys):
    with open(EXAMPLES / 'program_1.bas', 'r', encoding='utf-8') as f:
        source = f.read()
    program = parse_program(source)
    interp = Interpreter()
    interp.run(program)
    out = capsys.readouterr().out
    assert out == 'Hello, world\n'
