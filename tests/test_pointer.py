from cmarklib.errors import SourceError
from cmarklib.pointer import Pointer
from cmarklib.position import Position
from cmarklib.token import Token


def test_should_be_sof():
    ptr = Pointer(b"testing123")
    assert ptr.is_sof() is True


def test_accepts_str():
    assert Pointer("abc").src == b"abc"


def test_curr_and_peek_at_start():
    ptr = Pointer(b"xy")
    assert ptr.curr() == ord("x")
    assert ptr.peek() == ord("x")


def test_next_advances_end():
    ptr = Pointer(b"xyz")
    assert ptr.next() == ord("y")
    assert ptr.end.index == 1
    assert ptr.end.col == 1
    assert ptr.to_bytes() == b"x"


def test_eof_after_consuming_everything():
    ptr = Pointer(b"ab")
    assert not ptr.is_eof()
    ptr.next()
    assert ptr.next() == 0
    assert ptr.is_eof()
    assert ptr.peek() == 0


def test_curr_past_end_is_zero():
    ptr = Pointer(b"")
    assert ptr.curr() == 0
    assert ptr.is_eof()


def test_newline_moves_line():
    ptr = Pointer(b"a\nb")
    assert ptr.next() == ord("\n")
    assert ptr.end.ln == 1
    assert ptr.end.col == 0


def test_create_records_token():
    ptr = Pointer(b"hello world")
    for _ in range(5):
        ptr.next()
    token = ptr.create(3)
    assert token.kind == 3
    assert token.value == b"hello"
    assert token.end.index == 5
    assert ptr.tokens.curr == token
    assert ptr.tokens.prev == Token()


def test_created_token_does_not_follow_pointer():
    ptr = Pointer(b"abc")
    ptr.next()
    token = ptr.create(1)
    ptr.next()
    assert token.end.index == 1


def test_to_error():
    ptr = Pointer(b"abc")
    ptr.next()
    err = ptr.to_error("bad")
    assert isinstance(err, SourceError)
    assert err.start == Position()
    assert err.end.index == 1
    assert err.message == "bad"