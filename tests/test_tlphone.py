import re

import pytest

import tlphone
from tlphone import TLPhone, encode, encode_words

KEY_RE = re.compile(r'[0-9A-Z]*')

REFERENCE_WORDS = [
    ('ತುಂಬಾ', ('03B', '03B', '053B')),
    ('ಮಕ್ಕಳು', ('MKL', 'MKL1', 'MK2L15')),
    ('ಬಂಗಾರಾ', ('B3KR', 'B3KR', 'B3KR')),
    ('ಅನುಗ್ರಹ', ('ANKRH', 'ANKRH', 'AN5KRH')),
    ('ವೃತ್ತಿ', ('VR0', 'VR0', 'VR04')),
    ('ಅಧ್ಯಕ್ಷ', ('A0YKS', 'A0YKS1', 'A0YKS1')),
]

MIXED_INPUTS = [
    '',
    'hello',
    '12345 !?',
    'ಮಕ್ಕಳು, ತುಂಬಾ',
    'ನಮಸ್ಕಾರ',
    'ಕನ್ನಡ೧೨೩',
    'ಂಾ್',
    'ಕ್ಕ್ಷ',
    'ಕೌಶಲ್ಯ',
    'मक्कळु',
    'ಐಶ್ವರ್ಯ ಳ್ಳಿ',
]


def is_subsequence(short, long):
    it = iter(long)
    return all(c in it for c in short)


@pytest.fixture(scope='module')
def phone():
    return TLPhone()


@pytest.mark.parametrize('word,expected', REFERENCE_WORDS)
def test_reference_words(phone, word, expected):
    assert phone.encode(word) == expected


@pytest.mark.parametrize('word,expected', REFERENCE_WORDS)
def test_module_encode_uses_shared_encoder(word, expected):
    assert encode(word) == expected


@pytest.mark.parametrize('text', MIXED_INPUTS)
def test_keys_are_ascii_codes(phone, text):
    keys = phone.encode(text)
    assert len(keys) == 3
    for key in keys:
        assert KEY_RE.fullmatch(key)


@pytest.mark.parametrize('text', MIXED_INPUTS + [w for w, _ in REFERENCE_WORDS])
def test_keys_lose_information_monotonically(phone, text):
    key0, key1, key2 = phone.encode(text)
    assert is_subsequence(key1, key2)
    assert is_subsequence(key0, key1)
    assert is_subsequence(key0, key2)


@pytest.mark.parametrize('text', ['', 'hello world', '1234', 'मक्कळु', 'മക്കൾ', '   '])
def test_non_kannada_input_gives_empty_keys(phone, text):
    assert phone.encode(text) == ('', '', '')


def test_none_is_treated_as_empty(phone):
    assert phone.encode(None) == ('', '', '')


def test_foreign_characters_are_ignored(phone):
    assert phone.encode('abc ಮಕ್ಕಳು! 42') == phone.encode('ಮಕ್ಕಳು')


def test_unmapped_kannada_characters_are_dropped(phone):
    # Kannada digits and avagraha have no entry
    assert phone.process('ಮ೧೨ಽಕ') == 'MK'


def test_compound_beats_its_parts(phone):
    # ಕ್ಕ್ಷ is ಕ್ಕ + ್ + ಷ, never ಕ + ್ + ಕ್ಷ
    assert phone.process('ಕ್ಕ್ಷ') == 'K2S1'
    assert phone.process('ಕ್ಕಷ') == 'K2S1'
    assert phone.process('ಕ್ಕಕ') == 'K2K'
    assert phone.process('ಕ್ಷ') == 'KS1'


def test_compound_with_modifier(phone):
    assert phone.process('ಕ್ಕಿ') == 'K24'
    assert phone.process('ಳ್ಳು') == 'L125'


def test_longest_compound_wins(phone):
    assert phone.process('ಗ್ಗಾ') == 'K'
    # No ಗ್ಗ entry, so the cluster falls apart into its letters
    assert phone.process('ಗ್ಗ') == 'KK'


def test_consonant_and_vowel_with_modifier(phone):
    assert phone.process('ಕೊ') == 'K8'
    assert phone.process('ಅಂ') == 'A3'
    assert phone.process('ವೃ') == 'VR'


def test_leading_modifier_is_still_encoded(phone):
    assert phone.process('ಂಕ') == '3K'


def test_dental_marker_survives_all_keys(phone):
    for word in ('ತುಂಬಾ', 'ವೃತ್ತಿ', 'ಅಧ್ಯಕ್ಷ', 'ದಾರಿ'):
        key0, key1, key2 = phone.encode(word)
        assert key2.count('0') > 0
        assert key0.count('0') == key1.count('0') == key2.count('0')


def test_key_digit_classes(phone):
    key0, key1, key2 = phone.encode('ಮಕ್ಕಳು')
    assert set(key2) & set('25')
    assert '1' in key1 and not set(key1) & set('2456789')
    assert not set(key0) & set('12456789')


def test_anusvara_marker_is_kept(phone):
    key0, key1, key2 = phone.encode('ಬಂಗಾರಾ')
    assert '3' in key0 and '3' in key1 and '3' in key2


def test_encode_is_repeatable(phone):
    assert phone.encode('ಮಕ್ಕಳು') == phone.encode('ಮಕ್ಕಳು')


def test_similar_spellings_share_broad_key(phone):
    # Aspirated and unaspirated dentals collapse
    assert phone.encode('ತಲೆ')[0] == phone.encode('ಥಲೆ')[0]
    # Vowel length only shows in key2
    assert phone.encode('ಕುರಿ')[0] == phone.encode('ಕೂರಿ')[0]


def test_encode_words_keeps_order():
    results = encode_words(['ಮಕ್ಕಳು', 'hello', 'ತುಂಬಾ'])
    assert [r['word'] for r in results] == ['ಮಕ್ಕಳು', 'hello', 'ತುಂಬಾ']
    assert results[0] == {'word': 'ಮಕ್ಕಳು', 'key0': 'MKL', 'key1': 'MKL1', 'key2': 'MK2L15'}
    assert results[1]['key2'] == ''


def test_encode_words_empty():
    assert encode_words([]) == []


def test_default_encoder_is_shared():
    assert isinstance(tlphone.DEFAULT_ENCODER, TLPhone)
    assert encode('ವೃತ್ತಿ') == tlphone.DEFAULT_ENCODER.encode('ವೃತ್ತಿ')


def test_self_check_prints_results(capsys):
    tlphone.test_encoding()
    out = capsys.readouterr().out
    assert '✗' not in out
    assert out.count('✓') == len(REFERENCE_WORDS)
