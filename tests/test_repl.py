import io

from ctredit.repl import main, run_repl


def _run(text):
    out = io.StringIO()
    run_repl(io.StringIO(text), out)
    return out.getvalue()


def test_banner_and_exit():
    text = _run("exit\n")
    assert text.startswith("Mini REPL (tape 'exit' pour quitter)\n> ")
    assert text.endswith("Sortie du REPL\n")
    assert "Parsing done." not in text


def test_end_of_input():
    text = _run("")
    assert text.endswith("\nFin du REPL\n")


def test_each_valid_line_is_parsed():
    text = _run("1 + 2\nx * (3.5 - y)\nexit\n")
    assert text.count("Parsing done.\n") == 2
    assert text.count("> ") == 3


def test_lines_after_exit_are_not_read():
    text = _run("exit\n1+2\n")
    assert "Parsing done." not in text


def test_syntax_error_reported_and_loop_continues():
    text = _run("(1\n$\n2\n")
    assert text.count("[Syntax error]") == 2
    assert "unexpected token '$'" in text
    assert text.count("Parsing done.\n") == 1
    assert text.endswith("Fin du REPL\n")


def test_main_uses_standard_streams(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("4\nexit\n"))
    assert main([]) == 0
    captured = capsys.readouterr().out
    assert "Parsing done." in captured
    assert captured.endswith("Sortie du REPL\n")