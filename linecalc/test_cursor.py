# test_cursor.py

from linecalc.cursor import Cursor


def test_peek_does_not_consume():
    c = Cursor("12")
    assert c.peek() == '1'
    assert c.peek() == '1'
    assert c.position == 0


def test_peek_at_end_returns_none():
    c = Cursor("")
    assert c.peek() is None
    assert c.at_end


def test_advance_is_noop_at_end():
    c = Cursor("a")
    c.advance()
    c.advance()
    assert c.position == 1
    assert c.at_end


def test_advance_by_clamps_to_remaining_length():
    c = Cursor("abcd")
    c.advance_by(2)
    assert c.remaining == "cd"
    c.advance_by(10)
    assert c.position == 4
    c.advance_by(-3)
    assert c.position == 4


def test_constructor_clamps_position():
    assert Cursor("ab", 99).position == 2
    assert Cursor("ab", -1).position == 0


def test_remaining_starts_with():
    c = Cursor("1+tau")
    assert not c.remaining_starts_with("tau")
    c.advance_by(2)
    assert c.remaining_starts_with("tau")
    assert c.remaining_starts_with("ta")
    assert not c.remaining_starts_with("taux")


def test_skip_whitespace():
    c = Cursor(" \t\n 1 ")
    c.skip_whitespace()
    assert c.peek() == '1'
    c.advance()
    c.skip_whitespace()
    assert c.at_end
