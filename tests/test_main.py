import minargs
from minargs import const


def test_main_version(capsys):
    assert minargs.main(["-V"]) == const.EXIT_OK
    assert capsys.readouterr().out == f"minargs v{const.VERSION_STR}\n"


def test_main_help(capsys):
    assert minargs.main(["--help", "--number", "oops"]) == const.EXIT_OK
    out = capsys.readouterr().out
    assert "Usage" in out
    assert "--opt-number" in out


def test_main_parse(capsys):
    code = minargs.main(
        ["-I", "a", "--opt-number", "2", "--number", "1", "--include", "b", "file.txt"]
    )
    assert code == const.EXIT_OK
    out = capsys.readouterr().out
    assert "number=1" in out
    assert "optNumber=2" in out
    assert "input='file.txt'" in out


def test_main_parse_app():
    app = minargs.parse(minargs.Arguments(["--number", "-3", "-I", "x"]))
    assert app.number == -3
    assert app.optNumber is None
    assert [str(p) for p in app.includes] == ["x"]
    assert app.input is None


def test_main_parse_app_include_order():
    app = minargs.parse(
        minargs.Arguments(["--number", "1", "-I", "a", "--include", "b", "-I", "c"])
    )
    assert [str(p) for p in app.includes] == ["b", "a", "c"]


def test_main_forwarded(capsys):
    assert minargs.main(["--number", "1", "--", "--number", "2"]) == const.EXIT_OK
    assert "Forwarded: ['--number', '2']" in capsys.readouterr().out


def test_main_missing_required(capsys):
    assert minargs.main(["--opt-number", "2"]) == const.EXIT_ERROR
    captured = capsys.readouterr()
    assert "missing required option '--number'" in captured.err
    assert captured.out.startswith("Usage:")


def test_main_unused_arguments(capsys):
    assert minargs.main(["--number", "1", "in", "extra"]) == const.EXIT_UNUSED_ARGS
    assert "Unused arguments: extra" in capsys.readouterr().err


def test_main_verbose(capsys):
    assert minargs.main(["--verbose", "--number", "1"]) == const.EXIT_OK
    assert "number=1" in capsys.readouterr().out
