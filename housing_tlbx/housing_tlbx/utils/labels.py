"""Display labels for snake_case column identifiers."""

import re


_SEPARATOR = "_"
_WORD = re.compile(r"\S+")


def _title_case(word: str) -> str:
    return word[:1].title() + word[1:].lower()


def _title_word(match: re.Match[str]) -> str:
    # Title-casing can expand the first character ("ŉ" -> "ʼN"),
    # so repeat until the word is stable.
    word, titled = match.group(), _title_case(match.group())
    while titled != word:
        word, titled = titled, _title_case(titled)
    return titled


def format_label(raw: str) -> str:
    """Turn an identifier such as ``number_of_rooms_per_dwelling`` into a plot label.

    Every underscore becomes a single space, then each whitespace-delimited word
    is title-cased (first character upper-cased, the rest lower-cased). Runs of
    separators are kept as runs of spaces, so ``"a__b"`` becomes ``"A  B"``.

    Example:
        >>> format_label("number_of_rooms_per_dwelling")
        'Number Of Rooms Per Dwelling'
        >>> format_label("")
        ''
    """
    return _WORD.sub(_title_word, raw.replace(_SEPARATOR, " "))


__all__ = ["format_label"]
