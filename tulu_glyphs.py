"""
Kannada-script glyph tables for Tulu phonetic keys
"""

from types import MappingProxyType

# Unicode block of the Kannada script (used for Tulu as well)
SCRIPT_BLOCK = ('\u0C80', '\u0CFF')

# Independent vowels to codes
VOWELS = MappingProxyType({
    'ಅ': 'A', 'ಆ': 'A', 'ಇ': 'I', 'ಈ': 'I', 'ಉ': 'U', 'ಊ': 'U', 'ಋ': 'R',
    'ಎ': 'E', 'ಏ': 'E', 'ಐ': 'AI', 'ಒ': 'O', 'ಓ': 'O', 'ಔ': 'O',
})

# Consonants to codes
CONSONANTS = MappingProxyType({
    # Velars
    'ಕ': 'K', 'ಖ': 'K', 'ಗ': 'K', 'ಘ': 'K', 'ಙ': 'NG',
    # Palatals
    'ಚ': 'C', 'ಛ': 'C', 'ಜ': 'J', 'ಝ': 'J', 'ಞ': 'NJ',
    # Retroflexes
    'ಟ': 'T', 'ಠ': 'T', 'ಡ': 'T', 'ಢ': 'T', 'ಣ': 'N1',
    # Dentals (0 stands for the whole family)
    'ತ': '0', 'ಥ': '0', 'ದ': '0', 'ಧ': '0', 'ನ': 'N',
    # Labials
    'ಪ': 'P', 'ಫ': 'F', 'ಬ': 'B', 'ಭ': 'B', 'ಮ': 'M',
    # Semivowels
    'ಯ': 'Y', 'ರ': 'R', 'ಲ': 'L', 'ವ': 'V',
    # Sibilants and aspirate
    'ಶ': 'S1', 'ಷ': 'S1', 'ಸ': 'S', 'ಹ': 'H',
    # Dravidian extras
    'ಳ': 'L1', 'ೞ': 'Z', 'ಱ': 'R1',
})

# Geminates and conjuncts, matched before their parts
COMPOUNDS = MappingProxyType({
    'ಕ್ಕ': 'K2', 'ಗ್ಗಾ': 'K', 'ಙ್ಙ': 'NG',
    'ಚ್ಚ': 'C2', 'ಜ್ಜ': 'J', 'ಞ್ಞ': 'NJ',
    'ಟ್ಟ': 'T2', 'ಣ್ಣ': 'N2',
    'ತ್ತ': '0', 'ದ್ದ': 'D', 'ದ್ಧ': 'D', 'ನ್ನ': 'NN',
    'ಬ್ಬ': 'B',
    'ಪ್ಪ': 'P2', 'ಮ್ಮ': 'M2',
    'ಯ್ಯ': 'Y', 'ಲ್ಲ': 'L2', 'ವ್ವ': 'V', 'ಶ್ಶ': 'S1', 'ಸ್ಸ': 'S',
    'ಳ್ಳ': 'L12',
    'ಕ್ಷ': 'KS1',
})

# Dependent signs. Empty codes carry no distinction in the keys.
MODIFIERS = MappingProxyType({
    'ಾ': '',    # AA sign
    'ಃ': '',    # Visarga
    '್': '',    # Virama
    'ೃ': 'R',   # Vocalic R sign
    'ಂ': '3',   # Anusvara
    'ಿ': '4', 'ೀ': '4',
    'ು': '5', 'ೂ': '5',
    'ೆ': '6', 'ೇ': '6',
    'ೈ': '7',
    'ೊ': '8', 'ೋ': '8',
    'ೌ': '9',
})


def in_script_block(char: str) -> bool:
    """Check if a single character belongs to the Kannada block"""
    return SCRIPT_BLOCK[0] <= char <= SCRIPT_BLOCK[1]
