"""Finds Markdown regions (code and block quotes) where commands are ignored."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator

_FENCE_OPEN = re.compile(r" {0,3}(`{3,}|~{3,})(.*)")
_FENCE_CLOSE = re.compile(r" {0,3}(`{3,}|~{3,})[ \t]*")
_QUOTE = re.compile(r" {0,3}>")
_QUOTE_MARKER = re.compile(r" {0,3}>[ \t]?")
_HEADING = re.compile(r" {0,3}#{1,6}(?:[ \t].*)?")
_THEMATIC_BREAK = re.compile(
    r" {0,3}(?:(?:\*[ \t]*){3,}|(?:-[ \t]*){3,}|(?:_[ \t]*){3,})"
)
_LINE = re.compile(r"[^\n]*\n|[^\n]+")
_ASCII_PUNCTUATION = set("!\"#$%&'()*+,-./:;<=>?@[\\]^_`{|}~")


@dataclass(frozen=True)
class _Line:
    start: int
    content: str
    end: int


def _split_lines(text: str) -> list[_Line]:
    lines = []
    for match in _LINE.finditer(text):
        content = match.group().rstrip("\n")
        if content.endswith("\r"):
            content = content[:-1]
        lines.append(_Line(match.start(), content, match.end()))
    return lines


def _is_blank(content: str) -> bool:
    return not content.strip(" \t")


def _indent(content: str) -> int:
    columns = 0
    for ch in content:
        if ch == " ":
            columns += 1
        elif ch == "\t":
            columns += 4 - columns % 4
        else:
            break
    return columns


def _offset_after_columns(content: str, wanted: int) -> int:
    columns = 0
    for offset, ch in enumerate(content):
        if columns >= wanted or ch not in " \t":
            return offset
        columns += 1 if ch == " " else 4 - columns % 4
    return len(content)


def _fence_open(content: str) -> re.Match[str] | None:
    match = _FENCE_OPEN.fullmatch(content)
    if match and match.group(1)[0] == "`" and "`" in match.group(2):
        return None
    return match


def _interrupts_paragraph(content: str) -> bool:
    return bool(
        _fence_open(content)
        or _QUOTE.match(content)
        or _HEADING.fullmatch(content)
        or _THEMATIC_BREAK.fullmatch(content)
    )


def _quote_has_paragraph(content: str) -> bool:
    inner = content
    while match := _QUOTE_MARKER.match(inner):
        inner = inner[match.end():]
    return (
        not _is_blank(inner)
        and _indent(inner) < 4
        and not _fence_open(inner)
        and not _HEADING.fullmatch(inner)
        and not _THEMATIC_BREAK.fullmatch(inner)
    )


def _code_spans(text: str, start: int, end: int) -> Iterator[tuple[int, int]]:
    pos = start
    while pos < end:
        ch = text[pos]
        if ch == "\\" and pos + 1 < end and text[pos + 1] in _ASCII_PUNCTUATION:
            pos += 2
            continue
        if ch != "`":
            pos += 1
            continue
        run_end = pos
        while run_end < end and text[run_end] == "`":
            run_end += 1
        width = run_end - pos
        cursor = run_end
        closing = None
        while cursor < end:
            if text[cursor] != "`":
                cursor += 1
                continue
            other = cursor
            while other < end and text[other] == "`":
                other += 1
            if other - cursor == width:
                closing = other
                break
            cursor = other
        if closing is None:
            pos = run_end
        else:
            yield (pos, closing)
            pos = closing


def _scan(text: str) -> list[tuple[int, int]]:
    lines = _split_lines(text)
    ranges: list[tuple[int, int]] = []
    i = 0
    while i < len(lines):
        line = lines[i]
        content = line.content
        if _is_blank(content):
            i += 1
            continue

        if _indent(content) >= 4:
            start = line.start + _offset_after_columns(content, 4)
            end = line.end
            i += 1
            while i < len(lines) and (
                _is_blank(lines[i].content) or _indent(lines[i].content) >= 4
            ):
                if not _is_blank(lines[i].content):
                    end = lines[i].end
                i += 1
            ranges.append((start, end))
            continue

        fence = _fence_open(content)
        if fence:
            marker = fence.group(1)
            start = line.start + fence.start(1)
            end = len(text)
            i += 1
            while i < len(lines):
                closing = _FENCE_CLOSE.fullmatch(lines[i].content)
                i += 1
                if closing and closing.group(1)[0] == marker[0] and len(closing.group(1)) >= len(marker):
                    end = lines[i - 1].start + len(lines[i - 1].content)
                    break
            ranges.append((start, end))
            continue

        quote = _QUOTE.match(content)
        if quote:
            start = line.start + quote.end() - 1
            end = line.end
            in_paragraph = _quote_has_paragraph(content)
            i += 1
            while i < len(lines):
                following = lines[i].content
                if _is_blank(following):
                    break
                if _QUOTE.match(following):
                    in_paragraph = _quote_has_paragraph(following)
                elif not in_paragraph or _interrupts_paragraph(following):
                    break
                end = lines[i].end
                i += 1
            ranges.append((start, end))
            continue

        if _HEADING.fullmatch(content):
            ranges.extend(_code_spans(text, line.start, line.end))
            i += 1
            continue

        if _THEMATIC_BREAK.fullmatch(content):
            i += 1
            continue

        start, end = line.start, line.end
        i += 1
        while i < len(lines):
            following = lines[i].content
            if _is_blank(following) or _interrupts_paragraph(following):
                break
            end = lines[i].end
            i += 1
        ranges.extend(_code_spans(text, start, end))
    return ranges


class IgnoreBlocks:
    """Regions of Markdown text (code spans, code blocks, block quotes) to skip.

    ``ranges`` holds half-open ``(start, end)`` offsets in document order.
    """

    def __init__(self, text: str) -> None:
        self.ranges: tuple[tuple[int, int], ...] = tuple(_scan(text))

    def overlaps_ignore(self, start: int, end: int) -> tuple[int, int] | None:
        """Return the first ignored range touching ``start..end``, if any."""
        for ignore_start, ignore_end in self.ranges:
            if ignore_start <= end and start <= ignore_end:
                return (ignore_start, ignore_end)
        return None

    def __repr__(self) -> str:
        return f"IgnoreBlocks(ranges={self.ranges!r})"