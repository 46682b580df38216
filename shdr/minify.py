"""Comment stripping and whitespace collapsing for shader sources.

:func:`minify` makes a single left to right pass over the source.  At every
cursor position the first matching rule wins and advances the cursor by the
amount of text it consumed:

* ``"`` and ``\\`` are escaped (string literal mode only);
* ``//`` skips to the end of the line, the newline itself is handled by the
  newline rule;
* ``/*`` skips past the closing ``*/`` (or to the end of the input);
* a newline swallows every following blank or comment-only line and emits a
  single line break, unless it would be the first or the last thing in the
  output;
* runs of spaces and tabs starting with a space collapse to one space, which
  is dropped before a newline or a comment;
* a tab is kept unless it is leading or only blanks and comments follow it
  up to the end of the line.

Comment detection is purely lexical, sources with ``//`` or ``/*`` inside a
string literal are not supported.
"""

from __future__ import annotations

from typing import List, NamedTuple, Tuple

# Characters treated as blank when looking for the next line with content.
_BLANK = " \t\r\f\v"


class _Markers(NamedTuple):
    quote: str
    backslash: str
    tab: str
    # Line break followed by more content, and the one closing the text.
    line_break: str
    terminator: str


# Readable string literal form, every line break closes the literal and opens
# a new one on the next line of the generated header.
_STRING_LITERAL = _Markers('\\"', "\\\\", "\\t", '\\n"\n\t"', "\\n")
_RAW = _Markers('"', "\\", "\t", "\n", "\n")


def _skip_line_comment(content: str, pos: int) -> int:
    """Return the position of the newline ending the comment at ``pos``."""
    end = content.find("\n", pos + 2)
    return len(content) if end < 0 else end


def _skip_block_comment(content: str, pos: int) -> int:
    """Return the position right after the comment starting at ``pos``."""
    end = content.find("*/", pos + 2)
    return len(content) if end < 0 else end + 2


def _is_comment_start(content: str, pos: int) -> bool:
    return content.startswith("//", pos) or content.startswith("/*", pos)


def _ends_line(content: str, pos: int) -> bool:
    """True when nothing worth keeping follows on the line at ``pos``."""
    return pos >= len(content) or content[pos] == "\n" or _is_comment_start(content, pos)


def _skip_spaces(content: str, pos: int) -> int:
    while pos < len(content) and content[pos] in " \t":
        pos += 1
    return pos


def _only_blank_to_line_end(content: str, pos: int) -> bool:
    """True when only blanks and comments follow on the line at ``pos``."""
    while True:
        pos = _skip_spaces(content, pos)
        if not content.startswith("/*", pos):
            return _ends_line(content, pos)
        pos = _skip_block_comment(content, pos)


def _skip_empty_lines(content: str, pos: int) -> Tuple[int, bool]:
    """Skip blank and comment-only lines starting at ``pos``.

    Returns the position scanning should resume from and whether any content
    is left.  The resume position is the start of the first line holding
    content (or the end of the last comment on it), so indentation is still
    seen by the whitespace rules.
    """

    size = len(content)
    resume = pos
    while pos < size:
        if content[pos] == "\n":
            pos += 1
            resume = pos
        elif content.startswith("//", pos):
            pos = _skip_line_comment(content, pos)
        elif content.startswith("/*", pos):
            pos = _skip_block_comment(content, pos)
            resume = pos
        elif content[pos] in _BLANK:
            pos += 1
        else:
            return resume, True
    return size, False


def minify(content: str, plain_text: bool = False) -> str:
    """Strip comments and redundant whitespace from shader ``content``.

    With ``plain_text`` the result is a quoted C string literal ready to be
    used as an initializer, line breaks are written as ``\\n`` escapes that
    also split the literal over several header lines.  Otherwise the raw
    minified text is returned for the emitter to write out byte by byte.

    Non-empty output always ends with exactly one line break.
    """

    marks = _STRING_LITERAL if plain_text else _RAW
    out: List[str] = []
    size = len(content)
    i = 0
    while i < size:
        c = content[i]
        if c == '"':
            out.append(marks.quote)
            i += 1
        elif c == "\\":
            out.append(marks.backslash)
            i += 1
        elif content.startswith("//", i):
            i = _skip_line_comment(content, i)
        elif content.startswith("/*", i):
            i = _skip_block_comment(content, i)
        elif c == "\n":
            i, has_content = _skip_empty_lines(content, i + 1)
            if out and has_content:
                out.append(marks.line_break)
        elif c == " ":
            i = _skip_spaces(content, i + 1)
            if not _ends_line(content, i):
                out.append(" ")
        elif c == "\t":
            if out and not _only_blank_to_line_end(content, i + 1):
                out.append(marks.tab)
            i += 1
        else:
            out.append(c)
            i += 1

    if out and out[-1] not in (marks.line_break, marks.terminator):
        out.append(marks.terminator)

    text = "".join(out)
    if plain_text:
        return '"' + text + '"'
    return text
