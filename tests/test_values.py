from pathlib import Path

from minargs import values


def test_try_int():
    assert values.tryInt("1") == 1
    assert values.tryInt("+2") == 2
    assert values.tryInt("-2") == -2
    assert values.tryInt("0") == 0
    assert values.tryInt("q") is None
    assert values.tryInt("1.5") is None


def test_try_float():
    assert values.tryFloat("1.5") == 1.5
    assert values.tryFloat("-3.14") == -3.14
    assert values.tryFloat("x") is None


def test_try_true():
    for v in ("true", "True", "y", "yes", "Y", "Yes", "1"):
        assert values.tryBool(v) is True


def test_try_false():
    for v in ("false", "False", "n", "no", "N", "No", "0"):
        assert values.tryBool(v) is False


def test_try_bool_invalid():
    assert values.tryBool("maybe") is None


def test_identity():
    assert values.identity("--value") == "--value"


def test_try_cast():
    assert values.tryCast(int)("10") == 10
    assert values.tryCast(int)("ten") is None
    assert values.tryCast(Path)("a/b") == Path("a/b")
