"""Markdown layout of a weekly plan file.

A plan file is the optional short week note, a blank line, then the plan
body::

    Focus on delivery

    # Monday - Jan 15

    - Review

There is no structured header; ``decode_plan`` recovers the note from the
shape of the text, ``encode_plan`` puts it back.
"""
import re
from datetime import date, timedelta
from typing import List, Optional, Tuple

from taskplanner.core.dates import WEEKDAY_NAMES, format_week_key, short_month_day

WEEK_OF_RE = re.compile(r"Week of \d{1,2}-[A-Za-z]{3}-\d{4}", re.IGNORECASE)


def _is_heading(line: str) -> bool:
    return line.strip().startswith("#")


def _is_blank(line: str) -> bool:
    return line.strip() == ""


def encode_plan(short_week_note: Optional[str], content: str) -> str:
    if short_week_note and short_week_note.strip():
        return f"{short_week_note}\n\n{content}"
    return content


def decode_plan(text: str) -> Tuple[Optional[str], str]:
    """Split stored text into ``(short_week_note, content)``.

    - text before the first heading is the note, if it has any non-blank line;
    - without headings, the first of several paragraphs is the note;
    - without headings and with a single paragraph, all of it is the note.
    """
    if not text or not text.strip():
        return None, ""

    lines = text.split("\n")
    first_heading = next((i for i, line in enumerate(lines) if _is_heading(line)), None)

    if first_heading is not None:
        note = "\n".join(lines[:first_heading]).strip()
        if not note:
            return None, text
        return note, "\n".join(lines[first_heading:])

    while _is_blank(lines[0]):
        lines.pop(0)
    first_blank = next((i for i, line in enumerate(lines) if _is_blank(line)), None)
    if first_blank is not None and 0 < first_blank < len(lines) - 1:
        note = "\n".join(lines[:first_blank]).strip()
        rest = lines[first_blank + 1:]
        while rest and _is_blank(rest[0]):
            rest.pop(0)
        return note, "\n".join(rest)

    return text.strip(), ""


def generate_template(week_start: date) -> str:
    parts: List[str] = []
    for offset, weekday in enumerate(WEEKDAY_NAMES):
        day = week_start + timedelta(days=offset)
        parts.append(f"# {weekday} - {short_month_day(day)}\n\n- \n\n")
    parts.append("# Weekly Goals\n\n- \n\n")
    parts.append("# Notes & Reflections\n\n")
    return "".join(parts)


def retarget_week_headings(text: str, week_start: date) -> str:
    """Point every ``Week of DD-MMM-YYYY`` reference at ``week_start``.

    Text with no such reference gets a ``# Week of ...`` heading on top.
    Other dates in the body are left alone.
    """
    replacement = f"Week of {format_week_key(week_start)}"
    updated, count = WEEK_OF_RE.subn(replacement, text)
    if count == 0:
        return f"# {replacement}\n\n{text}"
    return updated
