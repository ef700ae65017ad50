"""Find links, e-mail addresses and www names in plain text."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional, Union

_VALID_URIS = (b"http://", b"https://", b"/", b"#", b"ftp://", b"mailto:")
_TRAILING_PUNCTUATION = b"?!.,:"
_CLOSERS = {ord('"'): ord('"'), ord("'"): ord("'"), ord(")"): ord("("),
            ord("]"): ord("["), ord("}"): ord("{")}
_SPACE = b" \t\n\v\f\r"


class AutolinkFlags(enum.IntFlag):
    NONE = 0
    SHORT_DOMAINS = 1


@dataclass(frozen=True)
class Autolink:
    """A found link: its text, how far it starts before the offset, and its length after it."""

    link: bytes
    rewind: int
    length: int


def _as_bytes(data: Union[bytes, bytearray, str]) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def _isalpha(c: int) -> bool:
    return 65 <= c <= 90 or 97 <= c <= 122


def _isalnum(c: int) -> bool:
    return _isalpha(c) or 48 <= c <= 57


def _isspace(c: int) -> bool:
    return c in _SPACE


def _ispunct(c: int) -> bool:
    return 33 <= c <= 126 and not _isalnum(c)


def is_safe(data: Union[bytes, str]) -> bool:
    """True when the text starts with a safe scheme followed by an alphanumeric."""
    data = _as_bytes(data)
    lowered = data.lower()
    return any(
        len(data) > len(uri) and lowered.startswith(uri) and _isalnum(data[len(uri)])
        for uri in _VALID_URIS
    )


def _delimit(text: bytes, link_end: int) -> int:
    bracket = text.find(b"<", 0, link_end)
    if bracket != -1:
        link_end = bracket

    while link_end > 0:
        last = text[link_end - 1]
        if last in _TRAILING_PUNCTUATION:
            link_end -= 1
        elif last == ord(";"):
            new_end = link_end - 2
            while new_end > 0 and _isalpha(text[new_end]):
                new_end -= 1
            if new_end < link_end - 2 and text[new_end] == ord("&"):
                link_end = new_end
            else:
                link_end -= 1
        else:
            break

    if link_end == 0:
        return 0

    cclose = text[link_end - 1]
    copen = _CLOSERS.get(cclose)
    if copen is not None:
        opening = closing = 0
        for c in text[:link_end]:
            if c == copen:
                opening += 1
            elif c == cclose:
                closing += 1
        if closing != opening:
            link_end -= 1

    return link_end


def _check_domain(text: bytes, allow_short: bool) -> int:
    if not text or not _isalnum(text[0]):
        return 0
    dots = 0
    i = 1
    while i < len(text) - 1:
        c = text[i]
        if c in b".:":
            dots += 1
        elif not _isalnum(c) and c != ord("-"):
            break
        i += 1
    if allow_short:
        return i
    return i if dots else 0


def _extend_to_space(text: bytes, link_end: int) -> int:
    while link_end < len(text) and not _isspace(text[link_end]):
        link_end += 1
    return link_end


def autolink_www(
    data: Union[bytes, str], offset: int, flags: AutolinkFlags = AutolinkFlags.NONE
) -> Optional[Autolink]:
    """Find a link starting with "www." at offset."""
    data = _as_bytes(data)
    text = data[offset:]
    if offset > 0:
        before = data[offset - 1]
        if not _ispunct(before) and not _isspace(before):
            return None
    if len(text) < 4 or not text.startswith(b"www."):
        return None
    link_end = _check_domain(text, False)
    if link_end == 0:
        return None
    link_end = _delimit(text, _extend_to_space(text, link_end))
    if link_end == 0:
        return None
    return Autolink(text[:link_end], 0, link_end)


def autolink_email(
    data: Union[bytes, str], offset: int, flags: AutolinkFlags = AutolinkFlags.NONE
) -> Optional[Autolink]:
    """Find an e-mail address around the "@" at offset."""
    data = _as_bytes(data)
    text = data[offset:]
    size = len(text)

    rewind = 0
    while rewind < offset:
        c = data[offset - 1 - rewind]
        if not (_isalnum(c) or c in b".+-_"):
            break
        rewind += 1
    if rewind == 0:
        return None

    ats = dots = 0
    link_end = 0
    while link_end < size:
        c = text[link_end]
        if not _isalnum(c):
            if c == ord("@"):
                ats += 1
            elif c == ord(".") and link_end < size - 1:
                dots += 1
            elif c not in b"-_":
                break
        link_end += 1

    if link_end < 2 or ats != 1 or dots == 0 or not _isalpha(text[link_end - 1]):
        return None
    link_end = _delimit(text, link_end)
    if link_end == 0:
        return None
    return Autolink(data[offset - rewind : offset + link_end], rewind, link_end)


def autolink_url(
    data: Union[bytes, str], offset: int, flags: AutolinkFlags = AutolinkFlags.NONE
) -> Optional[Autolink]:
    """Find a URL whose "://" begins at offset."""
    data = _as_bytes(data)
    text = data[offset:]
    if len(text) < 4 or text[1] != ord("/") or text[2] != ord("/"):
        return None

    rewind = 0
    while rewind < offset and _isalpha(data[offset - 1 - rewind]):
        rewind += 1
    if not is_safe(data[offset - rewind :]):
        return None

    link_end = 3
    domain_len = _check_domain(
        text[link_end:], bool(AutolinkFlags(flags) & AutolinkFlags.SHORT_DOMAINS)
    )
    if domain_len == 0:
        return None
    link_end = _delimit(text, _extend_to_space(text, link_end + domain_len))
    if link_end == 0:
        return None
    return Autolink(data[offset - rewind : offset + link_end], rewind, link_end)