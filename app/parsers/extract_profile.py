# app/parsers/extract_profile.py
import re
from typing import List, Optional

from app.models import ExtractedProfile

EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
# Optional country code, then 10 straight digits or 3-3-4 groups (ASCII digits only)
PHONE_PATTERN = re.compile(
    r"(\+?[0-9]{1,3}[\s-]?)?([0-9]{10}|[0-9]{3}[\s-][0-9]{3}[\s-][0-9]{4})"
)
LINE_SPLIT_PATTERN = re.compile(r"\r?\n")
HAS_LETTER_PATTERN = re.compile(r"[A-Za-z]")

NAME_SEARCH_LINES = 6
NAME_MAX_WORDS = 4


def _non_empty_lines(text: str) -> List[str]:
    lines = [line.strip() for line in LINE_SPLIT_PATTERN.split(text)]
    return [line for line in lines if line]


def extract_email(text: str) -> Optional[str]:
    match = EMAIL_PATTERN.search(text or "")
    return match.group(0) if match else None


def extract_phone(text: str) -> Optional[str]:
    match = PHONE_PATTERN.search(text or "")
    return match.group(0) if match else None


def extract_name(text: str) -> Optional[str]:
    """
    Names sit at the top of a resume, before the "Resume" label and the
    contact block, so only the first few non-empty lines are considered.
    """
    for line in _non_empty_lines(text or "")[:NAME_SEARCH_LINES]:
        if "resume" in line.lower():
            continue
        if not HAS_LETTER_PATTERN.search(line):
            continue
        if len(line.split(" ")) <= NAME_MAX_WORDS:
            return line
    return None


def extract_profile(text: str) -> ExtractedProfile:
    return ExtractedProfile(
        name=extract_name(text),
        email=extract_email(text),
        phone=extract_phone(text),
        text=text,
    )
