"""A plain-text phone book: append "Name,Phone" lines and look numbers up."""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence

DEFAULT_PATH = "phonebook.txt"

_POSIX_CLASSES = {
    "alpha": "a-zA-Z",
    "digit": "0-9",
    "alnum": "a-zA-Z0-9",
    "upper": "A-Z",
    "lower": "a-z",
    "space": r" \t\n\r\f\v",
    "blank": r" \t",
    "xdigit": "0-9A-Fa-f",
    "punct": re.escape("!\"#$%&'()*+,-./:;<=>?@[\\]^_`{|}~"),
}


def _bracket(pattern: str, start: int) -> tuple[str, int]:
    """Translate the bracket expression opening at ``start``; return it and the end index."""
    pos = start + 1
    parts = ["["]
    if pos < len(pattern) and pattern[pos] == "^":
        parts.append("^")
        pos += 1
    first = True
    while pos < len(pattern):
        ch = pattern[pos]
        if ch == "]" and not first:
            parts.append("]")
            return "".join(parts), pos + 1
        if pattern.startswith("[:", pos):
            close = pattern.find(":]", pos + 2)
            name = pattern[pos + 2 : close] if close != -1 else None
            if name not in _POSIX_CLASSES:
                raise ValueError(f"invalid character class in {pattern!r}")
            parts.append(_POSIX_CLASSES[name])
            pos = close + 2
        else:
            parts.append("\\" + ch if ch in "\\[]^" else ch)
            pos += 1
        first = False
    raise ValueError(f"unmatched [ in {pattern!r}")


def _bre_to_regex(pattern: str) -> str:
    """Translate a basic regular expression into Python syntax."""
    out: list[str] = []
    pos = 0
    while pos < len(pattern):
        ch = pattern[pos]
        at_start = not out or out[-1] in ("(", "|")
        if ch == "\\":
            if pos + 1 >= len(pattern):
                raise ValueError("trailing backslash")
            nxt = pattern[pos + 1]
            out.append(nxt if nxt in "(){}|+?" else "\\" + nxt)
            pos += 2
            continue
        if ch == "[":
            piece, pos = _bracket(pattern, pos)
            out.append(piece)
            continue
        if ch == "^":
            out.append("^" if at_start else r"\^")
        elif ch == "$":
            at_end = pos == len(pattern) - 1 or pattern.startswith(("\\)", "\\|"), pos + 1)
            out.append("$" if at_end else r"\$")
        elif ch == "*":
            out.append(r"\*" if at_start or out[-1] == "^" else "*")
        elif ch in "(){}|+?":
            out.append("\\" + ch)
        else:
            out.append(ch)
        pos += 1
    return "".join(out)


def _compile(pattern: str) -> re.Pattern[str]:
    try:
        return re.compile(_bre_to_regex(pattern))
    except re.error as exc:
        raise ValueError(f"invalid pattern {pattern!r}: {exc}") from exc


def _phone_field(line: str) -> str:
    """Spaces become '#', the first comma separates name from number."""
    line = line.replace(" ", "#").replace(",", " ", 1)
    fields = [field for field in re.split(r"[ \t]+", line) if field]
    return fields[1] if len(fields) > 1 else ""


def add_entry(entry: str, path: str = DEFAULT_PATH) -> None:
    """Append ``entry`` as one line of the phone book."""
    with open(path, "a", encoding="utf-8") as book:
        book.write(entry + "\n")


def find_phones(name: str, path: str = DEFAULT_PATH) -> list[str]:
    """Return the number field of every line matching the pattern ``name``.

    ``name`` is a basic regular expression. In each matching line spaces
    are replaced with '#', and the text after the first comma up to the
    next blank is returned; lines without one give an empty string.
    """
    matcher = _compile(name)
    with open(path, encoding="utf-8", errors="surrogateescape") as book:
        lines = book.read().splitlines()
    return [_phone_field(line) for line in lines if matcher.search(line)]


def add_main(argv: Sequence[str] | None = None) -> int:
    """Append the single argument to the phone book in the current directory."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        sys.stderr.write('Usage: add2PB "Name,Phone"\n')
        return 1
    try:
        add_entry(args[0])
    except OSError as exc:
        sys.stderr.write(f"fopen: {exc.strerror}\n")
        return 1
    return 0


def find_main(argv: Sequence[str] | None = None) -> int:
    """Print the numbers for every entry matching the single argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        sys.stderr.write('Usage: findPhone "Name"\n')
        return 1
    try:
        phones = find_phones(args[0])
    except OSError as exc:
        sys.stderr.write(f"grep: {DEFAULT_PATH}: {exc.strerror}\n")
        return 0
    except ValueError as exc:
        sys.stderr.write(f"grep: {exc}\n")
        return 0
    for phone in phones:
        print(phone)
    return 0


if __name__ == "__main__":
    sys.exit(find_main())