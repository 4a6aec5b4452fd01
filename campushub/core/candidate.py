"""Sign-in Candidate Builder — turns raw sign-in form text into a profile candidate.

Invariants:
    - name is always trimmed; is_admin is always a bool
    - Student fields are included only for students and only when non-blank
    - year is parsed to int when it is a plain integer literal; anything else is
      passed through untouched so validation reports it instead of dropping it

Design Decisions:
    - Pure function, no validation: the session store owns the rules
"""

from typing import Any


def _parse_year(raw: str) -> int | str:
    text = raw.strip()
    try:
        return int(text)
    except ValueError:
        return text


def build_candidate(
    name: str,
    is_admin: bool,
    roll_number: str = "",
    branch: str = "",
    year: str = "",
) -> dict[str, Any]:
    candidate: dict[str, Any] = {"name": name.strip(), "is_admin": is_admin}
    if is_admin:
        return candidate
    if roll_number.strip():
        candidate["roll_number"] = roll_number.strip()
    if branch.strip():
        candidate["branch"] = branch.strip()
    if year.strip():
        candidate["year"] = _parse_year(year)
    return candidate
