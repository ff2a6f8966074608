import pytest

from reverse_geocoder.errors import DecodingError
from reverse_geocoder.tokenizer import FieldTokenizer, _State, split_fields


def test_raw_fields_are_split_on_commas():
    tokenizer = FieldTokenizer("hoge,fuga,piyo")
    assert next(tokenizer) == "hoge"
    assert next(tokenizer) == "fuga"
    assert next(tokenizer) == "piyo"
    assert next(tokenizer, None) is None


def test_trailing_comma_yields_empty_field():
    assert split_fields("hoge,") == ["hoge", ""]


def test_empty_line_yields_single_empty_field():
    assert split_fields("") == [""]


def test_quoted_fields_keep_commas_and_decode_escapes():
    assert split_fields(r'"hoge","fu,ga","pi\nyo"') == ["hoge", "fu,ga", "pi\nyo"]


def test_quoted_field_escapes():
    assert split_fields(r'"a\tb\rc"') == ["a\tb\rc"]


def test_doubled_quote_is_literal_quote():
    assert split_fields('"say ""hi""",x') == ['say "hi"', "x"]


def test_mixed_quoted_and_raw_fields():
    assert split_fields('01,"北海道",,"x"') == ["01", "北海道", "", "x"]


def test_quoted_field_followed_by_trailing_comma():
    assert split_fields('"a",') == ["a", ""]


def test_character_after_closing_quote_is_an_error():
    tokenizer = FieldTokenizer('"ho"ge')
    with pytest.raises(DecodingError):
        next(tokenizer)
    assert next(tokenizer, None) is None


@pytest.mark.parametrize(
    "line",
    [
        '"unterminated',
        '"broken\nline"',
        '"carriage\rreturn"',
        r'"bad\xescape"',
        '"dangling\\',
        "raw\nfield",
        "raw\rfield",
    ],
)
def test_malformed_fields_raise(line):
    with pytest.raises(DecodingError):
        split_fields(line)


def test_error_stops_the_sequence_after_good_fields():
    tokenizer = FieldTokenizer('ok,"bad"x,never')
    assert next(tokenizer) == "ok"
    with pytest.raises(DecodingError):
        next(tokenizer)
    assert list(tokenizer) == []


def test_input_left_after_terminal_field_is_an_error():
    tokenizer = FieldTokenizer("hoge,fuga")
    tokenizer._state = _State.DONE

    with pytest.raises(DecodingError):
        next(tokenizer)
    assert next(tokenizer, None) is None
