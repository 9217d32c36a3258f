"""
Sentence boundary detection for Arabic manuscript text.

Stop marks: period, exclamation, question mark, Arabic question mark,
Arabic semicolon and the ellipsis character.
"""

STOP_PUNCTUATION = frozenset('.!?؟؛…')

# A page may end on an Arabic comma and still stand as its own segment.
ENDING_PUNCTUATION = STOP_PUNCTUATION | frozenset('،')

NOT_FOUND = -1


def find_first_punctuation(text: str) -> int:
    """Index of the first stop mark in text, or NOT_FOUND."""
    for index, char in enumerate(text):
        if char in STOP_PUNCTUATION:
            return index
    return NOT_FOUND


def ends_with_punctuation(text: str) -> bool:
    """True when text, ignoring trailing whitespace, ends on a stop mark or Arabic comma."""
    stripped = text.rstrip()
    if not stripped:
        return False
    return stripped[-1] in ENDING_PUNCTUATION
