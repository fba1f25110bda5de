import pytest

from grepx.matcher import Match, RegexMatcher


def test_pattern_is_kept():
    assert RegexMatcher(r"fo+\d", False).pattern() == r"fo+\d"


def test_invalid_pattern_raises_value_error():
    with pytest.raises(ValueError):
        RegexMatcher("(unclosed", False)


def test_case_insensitive_by_default_flag():
    matcher = RegexMatcher("hello", False)
    assert matcher.match_count(b"Hello HELLO hello") == 3


def test_case_sensitive_matching():
    assert not RegexMatcher("abc", True).is_match(b"ABC")
    assert RegexMatcher("abc", False).is_match(b"ABC")


def test_invalid_utf8_never_matches():
    matcher = RegexMatcher(".", False)
    data = b"\xff\xfe\xfd"
    assert not matcher.is_match(data)
    assert matcher.match_count(data) == 0
    assert matcher.find_matches(data, True) == []


def test_multiline_anchors():
    matcher = RegexMatcher("^foo", False)
    assert matcher.match_count(b"foo\nfoo\nbar foo") == 2


def test_dot_does_not_cross_newline():
    matcher = RegexMatcher("a.b", False)
    assert not matcher.is_match(b"a\nb")
    assert matcher.is_match(b"axb")


def test_find_matches_texts():
    matcher = RegexMatcher("cat", False)
    found = matcher.find_matches(b"a cat and a Cat", False)
    assert [m.text for m in found] == ["cat", "Cat"]
    assert all(m.line_number is None for m in found)


def test_line_numbers():
    matcher = RegexMatcher("foo", True)
    found = matcher.find_matches(b"a\nfoo\nb\nfoo", True)
    assert [m.line_number for m in found] == [2, 4]


def test_match_at_line_start_gets_that_line():
    matcher = RegexMatcher("^x", True)
    data = b"x\nx\nx"
    found = matcher.find_matches(data, True)
    assert [m.line_number for m in found] == list(range(1, len(found) + 1))
    assert len(found) == data.count(b"x")


def test_byte_offsets_with_multibyte_text():
    data = "héllo wörld héllo wörld".encode("utf-8")
    matcher = RegexMatcher("w.rld", False)
    found = matcher.find_matches(data, False)
    assert len(found) == matcher.match_count(data)
    for match in found:
        span = data[match.byte_offset:match.byte_offset + match.byte_length]
        assert span.decode("utf-8") == match.text
    assert found[0].byte_offset < found[1].byte_offset


def test_match_is_immutable_value():
    match = Match("x", 1, 0, 1)
    with pytest.raises(AttributeError):
        match.text = "y"
    assert match == Match("x", 1, 0, 1)