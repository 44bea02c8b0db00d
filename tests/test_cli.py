import json
from pathlib import Path

import pytest

from minibasic.__main__ import main

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_runs_a_program_file(capsys):
    main([str(EXAMPLES / 'program_4.bas')])
    assert capsys.readouterr().out.splitlines() == ['start', 'end']


def test_runtime_error_exits_with_status_1(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main([str(EXAMPLES / 'program_6.bas')])
    assert exc_info.value.code == 1
    captured = capsys.readouterr()
    assert captured.out == 'before\n'
    assert captured.err.startswith('Runtime error: BasicError: JumpError')


def test_parse_error_exits_with_status_1(tmp_path, capsys):
    path = tmp_path / 'bad.bas'
    path.write_text('10 LET 0a=1\n', encoding='utf-8')
    with pytest.raises(SystemExit) as exc_info:
        main([str(path)])
    assert exc_info.value.code == 1
    assert capsys.readouterr().err.startswith('Parse error: expected')


def test_missing_file_exits_with_status_1(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main([str(tmp_path / 'absent.bas')])
    assert exc_info.value.code == 1
    assert 'not found' in capsys.readouterr().err


def test_emit_and_run_ast(tmp_path, capsys):
    source = tmp_path / 'prog.bas'
    source.write_text('10 LET a$="via json"\n20 PRINT a$\n', encoding='utf-8')
    main(['--emit-ast', str(source)])
    out_path = Path(capsys.readouterr().out.strip())
    assert out_path == tmp_path / 'prog.bas.ast.json'
    assert json.loads(out_path.read_text(encoding='utf-8'))['type'] == 'Program'

    main(['--ast', str(out_path)])
    assert capsys.readouterr().out == 'via json\n'


@pytest.mark.parametrize('content', [
    '{not json',
    '{"type": "Loop"}',
    '{"type": "Program", "lines": [{"type": "Line", "number": 10}]}',
])
def test_bad_ast_file_exits_with_status_1(tmp_path, capsys, content):
    path = tmp_path / 'prog.bas.ast.json'
    path.write_text(content, encoding='utf-8')
    with pytest.raises(SystemExit) as exc_info:
        main(['--ast', str(path)])
    assert exc_info.value.code == 1
    captured = capsys.readouterr()
    assert captured.out == ''
    assert captured.err.startswith('AST error:')
