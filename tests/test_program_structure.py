from minibasic.ast import Comment, Jump, Line, Literal, Print
from minibasic.program import Program


def make_program():
    return Program.build([
        Line(10, Print(Literal('a'))),
        Line(20, Comment()),
        Line(30, Jump(10)),
    ])


def test_find_line_returns_position():
    program = make_program()
    assert program.find_line(10) == 0
    assert program.find_line(30) == 2
    assert program.find_line(40) is None


def test_from_line_returns_the_rest_of_the_program():
    program = make_program()
    assert program.from_line(20) == (Line(20, Comment()), Line(30, Jump(10)))
    assert program.from_line(99) == ()


def test_duplicate_line_numbers_resolve_to_first():
    program = Program.build([
        Line(10, Comment()),
        Line(10, Print(Literal('second'))),
    ])
    assert program.find_line(10) == 0
    assert len(program) == 2


def test_program_is_immutable_sequence():
    program = make_program()
    assert isinstance(program.lines, tuple)
    assert list(program) == list(program.lines)
    assert program[1] == Line(20, Comment())


def test_programs_compare_by_lines():
    assert make_program() == make_program()
    assert make_program() != Program()
