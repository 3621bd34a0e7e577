import pytest

from services.core import INVALID_CHARS
from services.errors import ValidationError
from services.validation import ensure_valid, validate


@pytest.mark.parametrize('text', ['', '   ', '\t\n', None])
def test_blank_input_is_rejected(text):
    result = validate(text)
    assert not result.ok
    assert result.code == 'empty'
    assert result.reason == 'Please enter a Pokemon name or ID'


@pytest.mark.parametrize('ch', list(INVALID_CHARS))
def test_each_invalid_character_is_reported(ch):
    result = validate(f'pika{ch}chu')
    assert not result.ok
    assert result.code == 'invalid_character'
    assert result.character == ch
    assert result.reason == f'Invalid character detected: {ch}'


def test_invalid_character_wins_over_range_check():
    result = validate('2000;')
    assert result.code == 'invalid_character'
    assert result.character == ';'


def test_first_blacklisted_character_in_blacklist_order():
    # '>' comes before '%' in the text, but '%' is checked first
    assert validate('a>b%c').character == '%'


@pytest.mark.parametrize('text', ['0', '1', '25', '1025', '+7', '007', ' 151 '])
def test_ids_in_range_pass(text):
    assert validate(text).ok


@pytest.mark.parametrize('text', ['1026', '-1', '99999999999999999999'])
def test_ids_out_of_range_fail(text):
    result = validate(text)
    assert not result.ok
    assert result.code == 'out_of_range'
    assert result.reason == 'Pokemon ID must be between 0 and 1025'


@pytest.mark.parametrize('text', ['pikachu', 'Mr. Mime', 'porygon-z', 'farfetch\'d', '25a', '1_000'])
def test_names_pass(text):
    assert validate(text).ok


def test_reference_scenario():
    assert not validate('1026').ok
    assert validate('1025').ok
    assert validate('pikachu').ok
    assert not validate('pika;chu').ok


def test_result_is_truthy_only_when_ok():
    assert validate('pikachu')
    assert not validate('')


def test_ensure_valid_returns_trimmed_text():
    assert ensure_valid('  Pikachu ') == 'Pikachu'


def test_ensure_valid_raises_with_details():
    with pytest.raises(ValidationError) as exc:
        ensure_valid('a@b')
    assert exc.value.code == 'invalid_character'
    assert exc.value.character == '@'
