from breezelang.cli import main, tokenize_file
from breezelang.lexer import TokenType


def test_tokenize_file(tmp_path):
    path = tmp_path / "prog.bl"
    path.write_text("using foo::bar\n", encoding="utf-8")
    tokens = tokenize_file(path)
    assert [t.text() for t in tokens] == ["using", "foo", "::", "bar"]
    assert tokens[1].type is TokenType.NAME
    assert tokens[0].where.filename == str(path)


def test_main_prints_blank_line(tmp_path, capsys):
    path = tmp_path / "prog.bl"
    path.write_text("func main", encoding="utf-8")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == "\n"


def test_main_defaults_to_main_bl(tmp_path, monkeypatch, capsys):
    (tmp_path / "main.bl").write_text("foo", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    assert main([]) == 0
    assert capsys.readouterr().out == "\n"


def test_main_debug_describes_tokens(tmp_path, capsys):
    path = tmp_path / "prog.bl"
    path.write_text("using foo", encoding="utf-8")
    assert main(["--debug", str(path)]) == 0
    out = capsys.readouterr().out
    assert out.startswith(f"using @ {path}(1:1); ")
    assert "NAME{id=3(foo)}" in out


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.bl")]) == 1
    assert "breezelang:" in capsys.readouterr().err


def test_main_reports_lex_error(tmp_path, capsys):
    path = tmp_path / "bad.bl"
    path.write_text('"open', encoding="utf-8")
    assert main([str(path)]) == 1
    assert "unterminated string literal" in capsys.readouterr().err