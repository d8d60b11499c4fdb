"""
tlphone (Tulu Phone)
Phonetic keys for Tulu words written in the Kannada script

Generates three Romanized keys of increasing strictness for a word, so that
words pronounced alike but spelled differently can be indexed together:

- key0: broad key, drops hard sounds, doubling and all modifiers
- key1: keeps hard sounds (the "1" marker)
- key2: narrow key, keeps hard sounds, doubling and modifiers

Usage:
    from tlphone import TLPhone

    phone = TLPhone()
    key0, key1, key2 = phone.encode('ಮಕ್ಕಳು')   # ('MKL', 'MKL1', 'MK2L15')

Words should be encoded one at a time, not as phrases.
"""

import logging
import re
from typing import Dict, Iterable, List, Mapping, Optional, Tuple
from types import MappingProxyType

import tulu_glyphs

logger = logging.getLogger(__name__)

_NON_SCRIPT_RE = re.compile(r'[^\u0C80-\u0CFF]')
_CODE_RE = re.compile(r'[0-9A-Z]{0,3}')

# key1 loses doubling and modifier markers, key0 loses hard sounds as well.
# 0 (dentals) and 3 (anusvara) survive in every key.
_KEY1_STRIP_RE = re.compile(r'[24-9]')
_KEY0_STRIP_RE = re.compile(r'[124-9]')


class GlyphTableError(ValueError):
    """Raised when a glyph table cannot be turned into matchers"""


class TLPhone:
    """
    Tulu phonetic encoder

    Tables and matchers are built once in the constructor and only read
    afterwards, so a single instance can be shared between threads.
    """

    def __init__(self,
                 vowels: Optional[Mapping[str, str]] = None,
                 consonants: Optional[Mapping[str, str]] = None,
                 compounds: Optional[Mapping[str, str]] = None,
                 modifiers: Optional[Mapping[str, str]] = None):
        """
        Build the pattern matchers

        Args:
            vowels: Independent vowel -> code (defaults to tulu_glyphs.VOWELS)
            consonants: Consonant -> code
            compounds: Consonant cluster -> code
            modifiers: Dependent sign -> code

        Raises:
            GlyphTableError: If a table is empty or malformed
        """
        self.vowels = self._freeze(vowels, tulu_glyphs.VOWELS)
        self.consonants = self._freeze(consonants, tulu_glyphs.CONSONANTS)
        self.compounds = self._freeze(compounds, tulu_glyphs.COMPOUNDS)
        self.modifiers = self._freeze(modifiers, tulu_glyphs.MODIFIERS)

        self.validate_tables()

        mods = self._alternation(self.modifiers)
        compound_glyphs = self._alternation(self.compounds)
        consonant_glyphs = self._alternation(self.consonants)
        vowel_glyphs = self._alternation(self.vowels)

        # Glyph immediately followed by a modifier
        self.mod_compounds = self._compile(compound_glyphs, mods)
        self.mod_consonants = self._compile(consonant_glyphs, mods)
        self.mod_vowels = self._compile(vowel_glyphs, mods)

        # Order matters: compounds are made of characters that also match
        # on their own, so they are tried first.
        self._scan_order = (
            (self.mod_compounds, self.compounds),
            (self._compile(compound_glyphs), self.compounds),
            (self.mod_consonants, self.consonants),
            (self.mod_vowels, self.vowels),
            (self._compile(consonant_glyphs), self.consonants),
            (self._compile(vowel_glyphs), self.vowels),
            (self._compile(mods), self.modifiers),
        )

        logger.debug(
            "tlphone matchers built: %d vowels, %d consonants, %d compounds, %d modifiers",
            len(self.vowels), len(self.consonants), len(self.compounds), len(self.modifiers)
        )

    @staticmethod
    def _freeze(table: Optional[Mapping[str, str]], default: Mapping[str, str]) -> Mapping[str, str]:
        if table is None:
            return default
        return MappingProxyType(dict(table))

    def _tables(self) -> List[Tuple[str, Mapping[str, str]]]:
        return [
            ('vowels', self.vowels),
            ('consonants', self.consonants),
            ('compounds', self.compounds),
            ('modifiers', self.modifiers),
        ]

    def validate_tables(self):
        """Check table invariants, raising GlyphTableError on the first violation"""
        owners = {}
        for name, table in self._tables():
            if not table:
                raise GlyphTableError(f"Glyph table '{name}' is empty")

            for glyph, code in table.items():
                if not isinstance(glyph, str) or not glyph:
                    raise GlyphTableError(f"Invalid glyph {glyph!r} in '{name}' table")
                if not all(tulu_glyphs.in_script_block(c) for c in glyph):
                    raise GlyphTableError(f"Glyph {glyph!r} in '{name}' table is outside the Kannada block")
                if not isinstance(code, str) or not _CODE_RE.fullmatch(code):
                    raise GlyphTableError(f"Invalid code {code!r} for glyph {glyph!r} in '{name}' table")
                if glyph in owners:
                    raise GlyphTableError(f"Glyph {glyph!r} appears in both '{owners[glyph]}' and '{name}' tables")
                owners[glyph] = name

        for name, table in (('vowels', self.vowels), ('consonants', self.consonants)):
            for glyph in table:
                if len(glyph) != 1:
                    raise GlyphTableError(f"Glyph {glyph!r} in '{name}' table must be a single character")

        for glyph in self.compounds:
            if len(glyph) < 2:
                raise GlyphTableError(f"Compound {glyph!r} must have more than one character")
            for char in glyph:
                if char not in self.consonants and char not in self.modifiers:
                    raise GlyphTableError(f"Compound {glyph!r} contains {char!r}, which is not a consonant or modifier")

    @staticmethod
    def _alternation(table: Mapping[str, str]) -> str:
        # Longest first, regex alternation takes the first branch that matches
        glyphs = sorted(table, key=len, reverse=True)
        return '|'.join(re.escape(g) for g in glyphs)

    @staticmethod
    def _compile(glyphs: str, mods: Optional[str] = None):
        pattern = f'(?P<glyph>{glyphs})'
        if mods is not None:
            pattern += f'(?P<modifier>{mods})'
        try:
            return re.compile(pattern)
        except re.error as e:
            raise GlyphTableError(f"Could not compile glyph pattern: {e}") from e

    def encode(self, word: str) -> Tuple[str, str, str]:
        """
        Encode a word to its three phonetic keys

        Args:
            word: A single word (non-Kannada characters are ignored)

        Returns:
            (key0, key1, key2), each made of [0-9A-Z] only
        """
        key2 = self.process(word)
        key1 = _KEY1_STRIP_RE.sub('', key2)
        key0 = _KEY0_STRIP_RE.sub('', key2)
        return key0, key1, key2

    def process(self, word: str) -> str:
        """Produce key2, the full fidelity code of a word"""
        if not word:
            return ''

        text = _NON_SCRIPT_RE.sub('', word)

        codes = []
        pos = 0
        while pos < len(text):
            code, pos = self._next_code(text, pos)
            codes.append(code)

        return ''.join(codes)

    def _next_code(self, text: str, pos: int) -> Tuple[str, int]:
        """Match the highest priority glyph at pos and return its code and the next position"""
        for matcher, table in self._scan_order:
            match = matcher.match(text, pos)
            if not match:
                continue

            code = table[match.group('glyph')]
            modifier = match.groupdict().get('modifier')
            if modifier:
                code += self.modifiers[modifier]
            return code, match.end()

        # Kannada character with no table entry (digits, avagraha, ...)
        return '', pos + 1


# Shared encoder, built at import
DEFAULT_ENCODER = TLPhone()


def encode(word: str) -> Tuple[str, str, str]:
    """Encode a word with the shared encoder"""
    return DEFAULT_ENCODER.encode(word)


def encode_words(words: Iterable[str]) -> List[Dict[str, str]]:
    """
    Encode several words, already split by the caller

    Returns:
        One dict per word with 'word', 'key0', 'key1' and 'key2', in input order
    """
    results = []
    for word in words:
        key0, key1, key2 = DEFAULT_ENCODER.encode(word)
        results.append({'word': word, 'key0': key0, 'key1': key1, 'key2': key2})
    return results


def test_encoding():
    """Check the encoder against known words"""
    test_cases = [
        ('ತುಂಬಾ', ('03B', '03B', '053B')),
        ('ಮಕ್ಕಳು', ('MKL', 'MKL1', 'MK2L15')),
        ('ಬಂಗಾರಾ', ('B3KR', 'B3KR', 'B3KR')),
        ('ಅನುಗ್ರಹ', ('ANKRH', 'ANKRH', 'AN5KRH')),
        ('ವೃತ್ತಿ', ('VR0', 'VR0', 'VR04')),
        ('ಅಧ್ಯಕ್ಷ', ('A0YKS', 'A0YKS1', 'A0YKS1')),
    ]

    print("Testing tlphone keys:")
    print("=" * 60)
    for word, expected in test_cases:
        result = encode(word)
        status = "✓" if result == expected else "✗"
        print(f"{status} {word:10s} → {' '.join(result):24s} (expected: {' '.join(expected)})")


if __name__ == '__main__':
    test_encoding()
