import io

from practicebox import terminal


def _keys(text):
    chars = iter(text)
    return lambda: next(chars, "")


def test_echo_keys_stops_at_q():
    out = io.StringIO()
    echoed = terminal.echo_keys(_keys("abqc"), out)
    assert echoed == ["a", "b"]
    assert out.getvalue() == (
        "Press any key, or q to exit...\nKey pressed: a\nKey pressed: b\n"
    )


def test_echo_keys_stops_at_upper_q():
    out = io.StringIO()
    echoed = terminal.echo_keys(_keys("xQy"), out)
    assert echoed == ["x"]
    assert "Key pressed: y" not in out.getvalue()


def test_echo_keys_stops_at_end_of_input():
    out = io.StringIO()
    echoed = terminal.echo_keys(_keys("hi"), out)
    assert echoed == ["h", "i"]


def test_echo_keys_preserves_order():
    out = io.StringIO()
    text = "abcdefghij"
    echoed = terminal.echo_keys(_keys(text + "q"), out)
    assert "".join(echoed) == text


def test_read_key_from_non_tty(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("xy"))
    assert terminal.read_key() == "x"
    assert terminal.read_key() == "y"
    assert terminal.read_key() == ""