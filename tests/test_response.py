"""Tests for decoding engine response lines."""

import pytest

from textispell.core.errors import ProtocolDesyncError
from textispell.core.response import Result, ResultType, parse_response


def test_ok():
    r = parse_response("*")
    
    assert r.type == ResultType.OK
    assert r.term is None
    assert r.commentary == "*"
    assert r.is_correct


def test_compound():
    assert parse_response("-").type == ResultType.COMPOUND


def test_root():
    r = parse_response("+ HACK")
    
    assert r.type == ResultType.ROOT
    assert r.root == "HACK"
    assert r.offset is None


def test_none():
    r = parse_response("# shrdlu 22")
    
    assert r.type == ResultType.NONE
    assert r.original == "shrdlu"
    assert r.offset == 22
    assert not r.is_correct


def test_miss():
    r = parse_response("& perl 3 15: Perl, peal, pearl")
    
    assert r.type == ResultType.MISS
    assert r.original == "perl"
    assert r.offset == 15
    assert r.count == 3
    assert r.misses == ["Perl", "peal", "pearl"]
    assert r.guesses == []
    assert r.misses_text == "Perl peal pearl"


def test_miss_with_guesses():
    r = parse_response("& wrod 2 1: word, rod, w+rod")
    
    assert r.misses == ["word", "rod"]
    assert r.guesses == ["w+rod"]
    assert r.guesses_text == "w+rod"


def test_guess_count_is_zero():
    r = parse_response("? hackable 0 1: hack+able, hacker+able")
    
    assert r.type == ResultType.GUESS
    assert r.count == 0
    assert r.misses == []
    assert r.guesses == ["hack+able", "hacker+able"]


def test_run_together_candidate_keeps_space():
    r = parse_response("& hellothere 2 1: hello there, hello-there")
    
    assert r.misses == ["hello there", "hello-there"]


def test_unknown_code():
    r = parse_response("@(#) International Ispell")
    
    assert r.type == ResultType.UNKNOWN
    assert r.to_dict()["commentary"] == "@(#) International Ispell"


@pytest.mark.parametrize("line", [
    "+",
    "# shrdlu",
    "& perl 3",
    "& perl three 1: Perl",
    "# shrdlu first",
    "& perl 3 15: Perl, peal",
])
def test_malformed_lines_fail(line):
    with pytest.raises(ProtocolDesyncError) as exc:
        parse_response(line)
    assert exc.value.commentary == [line]


class TestResultDict:
    def test_root_dict(self):
        r = parse_response("+ HACK")
        r.term = "hacking"
        
        assert r.to_dict() == {"term": "hacking", "type": "root", "root": "HACK"}
    
    def test_miss_dict_roundtrip(self):
        r = parse_response("& teh 2 1: the, tech")
        r.term = "teh"
        d = r.to_dict()
        
        assert d["misses"] == ["the", "tech"]
        assert d["count"] == 2
        back = Result.from_dict(d)
        assert back.type == ResultType.MISS
        assert back.misses == r.misses
        assert back.offset == 1
    
    def test_ok_dict_has_no_extras(self):
        r = parse_response("*")
        r.term = "hello"
        
        assert r.to_dict() == {"term": "hello", "type": "ok"}
