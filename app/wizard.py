"""
Step wizard controller.

The wizard owns the session's single ResumeData dict and the index of the
current step. Steps receive the data plus ``update`` and never mutate the
dict behind the wizard's back.
"""
from __future__ import annotations
import logging
from typing import Any, Callable, Dict

from schema_resume import SECTIONS, new_resume

logger = logging.getLogger(__name__)

# (step id, title) in wizard order; the last step is terminal
STEPS = (
    ("personal", "Personal Info"),
    ("education", "Education"),
    ("skills", "Skills"),
    ("experience", "Experience"),
    ("target", "Target & Goals"),
    ("preview", "Preview & Generate"),
)


def _filled(value: Any) -> bool:
    return bool(value and str(value).strip())


def personal_is_valid(data: dict) -> bool:
    p = data.get("personal") or {}
    return all(_filled(p.get(f)) for f in ("full_name", "email", "phone"))


def education_is_valid(data: dict) -> bool:
    return all(
        _filled(e.get("degree")) and _filled(e.get("institution"))
        for e in data.get("education") or []
    )


def skills_is_valid(data: dict) -> bool:
    return len((data.get("skills") or {}).get("technical") or []) > 0


def target_is_valid(data: dict) -> bool:
    t = data.get("target") or {}
    return _filled(t.get("type")) and _filled(t.get("description"))


STEP_VALIDATORS: Dict[str, Callable[[dict], bool]] = {
    "personal": personal_is_valid,
    "education": education_is_valid,
    "skills": skills_is_valid,
    "target": target_is_valid,
}


class ResumeWizard:
    """Index into STEPS plus the ResumeData it collects."""

    def __init__(self, data: dict | None = None):
        self.index = 0
        self.data = data if data is not None else new_resume()

    @property
    def last(self) -> int:
        return len(STEPS) - 1

    @property
    def step(self) -> str:
        return STEPS[self.index][0]

    @property
    def title(self) -> str:
        return STEPS[self.index][1]

    @property
    def is_first(self) -> bool:
        return self.index == 0

    @property
    def is_last(self) -> bool:
        return self.index == self.last

    def progress(self) -> str:
        return f"Step {self.index + 1} of {len(STEPS)}"

    def update(self, section: str, value: Any) -> None:
        """Replace one section wholesale (no merge with the old value)."""
        if section not in SECTIONS:
            raise KeyError(f"Unknown resume section: {section}")
        self.data[section] = value

    def step_is_valid(self) -> bool:
        check = STEP_VALIDATORS.get(self.step)
        return check(self.data) if check else True

    def can_advance(self) -> bool:
        return self.index < self.last and self.step_is_valid()

    def can_retreat(self) -> bool:
        return self.index > 0

    def advance(self) -> bool:
        """Move one step forward; a no-op returning False when gated."""
        if not self.can_advance():
            logger.debug("advance blocked on step %s", self.step)
            return False
        self.index += 1
        return True

    def retreat(self) -> bool:
        if not self.can_retreat():
            return False
        self.index -= 1
        return True
