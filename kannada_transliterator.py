"""
Convert words from other scripts to Kannada before encoding
Uses aksharamukha, so Tulu words typed in Devanagari, Malayalam or a
romanization get the same keys as their Kannada spelling
"""

from aksharamukha import transliterate as aksh_transliterate

TARGET_SCRIPT = 'Kannada'

# Script names as aksharamukha spells them
SUPPORTED_SCRIPTS = (
    'Kannada', 'Devanagari', 'Malayalam', 'Telugu', 'Tamil',
    'IAST', 'HK', 'ITRANS',
)

_SCRIPT_LOOKUP = {name.lower(): name for name in SUPPORTED_SCRIPTS}


class UnsupportedScriptError(ValueError):
    """Raised for a script name that cannot be converted to Kannada"""


def resolve_script(script: str) -> str:
    """
    Resolve a script name case-insensitively

    Args:
        script: Script name such as 'devanagari' or 'HK'

    Returns:
        The aksharamukha spelling of the name ('Kannada' if empty)
    """
    if not script:
        return TARGET_SCRIPT

    name = _SCRIPT_LOOKUP.get(script.strip().lower())
    if name is None:
        raise UnsupportedScriptError(
            f"Unsupported script '{script}'. Use one of: {', '.join(SUPPORTED_SCRIPTS)}"
        )
    return name


def to_kannada(text: str, script: str = TARGET_SCRIPT) -> str:
    """Transliterate text from the given script to Kannada"""
    source = resolve_script(script)
    if source == TARGET_SCRIPT:
        return text
    return aksh_transliterate.process(source, TARGET_SCRIPT, text)
