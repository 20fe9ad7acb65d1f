"""Mapping logical keys onto the engine's flat namespace."""

SEPARATOR = "/"

# [\\] reads as a literal backslash both for fnmatch and for Redis MATCH
_glob_escapes = str.maketrans({"*": "[*]", "?": "[?]", "[": "[[]", "\\": "[\\\\]"})


def normalize(key: str) -> str:
    """Canonical flat form of a logical key.

    Whitespace around each path segment and empty segments are dropped,
    and the result always starts with ``/``: ``"a//b /"`` and ``"/a/b"``
    both map to ``"/a/b"``; the empty key maps to the root ``"/"``.
    """
    parts = [part.strip() for part in key.split(SEPARATOR)]
    return SEPARATOR + SEPARATOR.join(part for part in parts if part)


def glob_escape(text: str) -> str:
    """Escape glob metacharacters so ``text`` matches only itself."""
    return text.translate(_glob_escapes)


def directory_pattern(directory: str) -> str:
    """Scan pattern matching every key that starts with ``directory``.

    This is a plain string prefix: for directory ``a`` it matches
    ``/a`` itself, ``/a/b`` and also the sibling ``/ab``.
    """
    return glob_escape(normalize(directory)) + "*"
