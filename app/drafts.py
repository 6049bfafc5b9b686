"""
Step-form draft operations.

Every function takes a section value and returns a *new* one, so a step form
can hand the complete section back to the wizard after each change.
"""
from __future__ import annotations
from typing import Any, Dict, List

from schema_resume import (
    PERSONAL_FIELDS,
    SKILL_CATEGORIES,
    new_education,
    new_experience,
)

Skills = Dict[str, List[str]]
Entries = List[Dict[str, Any]]

# Suggested one-click additions on the Skills step
SUGGESTED_SKILLS = {
    "technical": [
        "JavaScript", "Python", "Java", "React", "Node.js", "HTML/CSS", "SQL",
        "Git", "MongoDB", "Express.js", "TypeScript", "C++", "AWS", "Docker",
        "Linux",
    ],
    "soft": [
        "Communication", "Leadership", "Problem Solving", "Teamwork",
        "Time Management", "Critical Thinking", "Adaptability",
        "Project Management", "Public Speaking",
    ],
    "languages": [
        "English", "Hindi", "Tamil", "Telugu", "Bengali", "Marathi",
        "Gujarati", "Kannada",
    ],
}


# ───────────────────────────────────────── personal ──
def personal_draft(personal: Dict[str, str] | None) -> Dict[str, str]:
    """All personal fields present, existing values kept."""
    draft = {field: "" for field in PERSONAL_FIELDS}
    draft.update(personal or {})
    return draft


# ───────────────────────────────────────── skills ──
def skills_draft(skills: Skills | None) -> Skills:
    skills = skills or {}
    return {cat: list(skills.get(cat) or []) for cat in SKILL_CATEGORIES}


def add_skill(skills: Skills, category: str, value: str) -> Skills:
    """Append a trimmed skill; blank or already-present values are a no-op."""
    if category not in SKILL_CATEGORIES:
        raise KeyError(category)
    out = skills_draft(skills)
    value = (value or "").strip()
    if value and value not in out[category]:
        out[category].append(value)
    return out


def remove_skill(skills: Skills, category: str, value: str) -> Skills:
    if category not in SKILL_CATEGORIES:
        raise KeyError(category)
    out = skills_draft(skills)
    out[category] = [s for s in out[category] if s != value]
    return out


def suggestions(skills: Skills, category: str) -> List[str]:
    """Suggested skills for a category that are not already chosen."""
    chosen = set(skills_draft(skills)[category])
    return [s for s in SUGGESTED_SKILLS[category] if s not in chosen]


# ───────────────────────────────────────── entry lists ──
def education_draft(education: Entries | None) -> Entries:
    """Existing entries, or one blank entry when there are none yet."""
    if education:
        return [dict(e) for e in education]
    return [new_education()]


def experience_draft(experience: Entries | None) -> Entries:
    if experience:
        return [dict(e) for e in experience]
    return [new_experience()]


def add_education(entries: Entries) -> Entries:
    return [dict(e) for e in entries] + [new_education()]


def add_experience(entries: Entries) -> Entries:
    return [dict(e) for e in entries] + [new_experience()]


def remove_entry(entries: Entries, entry_id: str) -> Entries:
    """Drop the entry with ``entry_id``; the last remaining entry is never removed."""
    if len(entries) <= 1:
        return [dict(e) for e in entries]
    return [dict(e) for e in entries if e["id"] != entry_id]


def update_entry(entries: Entries, entry_id: str, field: str, value: Any) -> Entries:
    return [
        {**e, field: value} if e["id"] == entry_id else dict(e)
        for e in entries
    ]
