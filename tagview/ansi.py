"""ANSI-aware measurement and horizontal slicing of styled rows.

Rows are composed with color codes already embedded; these helpers cut them
to the visible viewport while keeping escape sequences intact.
"""

from __future__ import annotations

import re

from .text.width import char_width

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")


def strip_ansi(text: str) -> str:
    return ANSI_ESCAPE_RE.sub("", text)


def ansi_display_width(text: str) -> int:
    """Return display width of ``text`` ignoring escape sequences."""
    return sum(char_width(ch) for ch in strip_ansi(text))


def clip_ansi_line(text: str, max_cols: int) -> str:
    """Trim a styled line to at most ``max_cols`` display columns.

    ANSI escape sequences are preserved verbatim and do not count toward width.
    """
    return slice_ansi_line(text, 0, max_cols)


def slice_ansi_line(text: str, start_cols: int, max_cols: int) -> str:
    """Return a horizontal viewport of a styled line.

    The slice starts at ``start_cols`` display columns and includes up to
    ``max_cols`` columns. If the viewport begins after a color/style sequence,
    the latest pending SGR sequence is injected so visible text keeps the
    original styling. A wide character cut by the left edge is replaced by a
    blank so later cells stay aligned.
    """
    if max_cols <= 0 or not text:
        return ""
    if start_cols < 0:
        start_cols = 0

    out: list[str] = []
    col = 0
    shown = 0
    i = 0
    n = len(text)
    pending_sgr = ""
    injected_style = False
    while i < n and shown < max_cols:
        if text[i] == "\x1b":
            match = ANSI_ESCAPE_RE.match(text, i)
            if match:
                seq = match.group(0)
                is_sgr = seq.endswith("m")
                if is_sgr:
                    pending_sgr = seq
                if col >= start_cols:
                    if not injected_style and pending_sgr and not is_sgr:
                        out.append(pending_sgr)
                        injected_style = True
                    out.append(seq)
                    if is_sgr:
                        injected_style = True
                i = match.end()
                continue
        ch = text[i]
        w = char_width(ch)
        if col + w <= start_cols:
            col += w
            i += 1
            continue
        if not injected_style and pending_sgr:
            out.append(pending_sgr)
            injected_style = True
        if col < start_cols:
            # Wide character straddling the left edge.
            out.append(" ")
            shown += 1
            col += w
            i += 1
            continue
        if shown + w > max_cols:
            break
        out.append(ch)
        shown += w
        col += w
        i += 1

    return "".join(out)
