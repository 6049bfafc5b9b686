"""
Canonical résumé data model.

ResumeData is a plain dict built from the templates below; every wizard step
owns one top-level section and always replaces it wholesale.
"""
from __future__ import annotations
import copy
import uuid

# canonical schema (empty lists – no placeholders)
RESUME_SCHEMA = {
    "personal": {},
    "education": [],
    "skills": {"technical": [], "soft": [], "languages": []},
    "experience": [],
    "target": {"type": "job", "description": ""},
}

PERSONAL_FIELDS = (
    "full_name", "email", "phone", "location",
    "linkedin", "github", "portfolio", "summary",
)

EDUCATION_SCHEMA = {
    "id": "",
    "degree": "",
    "institution": "",
    "location": "",
    "start_year": "",
    "end_year": "",
    "cgpa": "",
    "relevant_coursework": "",
}

EXPERIENCE_SCHEMA = {
    "id": "",
    "type": "project",
    "title": "",
    "company": "",
    "location": "",
    "start_date": "",
    "end_date": "",
    "current": False,
    "description": "",
    "technologies": "",
}

SECTIONS = tuple(RESUME_SCHEMA)
SKILL_CATEGORIES = ("technical", "soft", "languages")

EXPERIENCE_TYPES = ("project", "internship", "work", "hackathon")
EXPERIENCE_TYPE_LABELS = {
    "internship": "Internship",
    "project": "Project",
    "work": "Work Experience",
    "hackathon": "Hackathon",
}
ORGANIZATION_LABELS = {
    "internship": "Company",
    "project": "Organization/Personal",
    "work": "Company",
    "hackathon": "Event Name",
}

TARGET_TYPES = {
    "job": ("Full-time Job", "Looking for permanent employment opportunities"),
    "internship": ("Internship", "Seeking internship opportunities to gain experience"),
    "hackathon": ("Hackathon", "Participating in hackathons and competitions"),
}

INDUSTRIES = [
    "Technology/Software", "Finance/Banking", "Healthcare", "E-commerce",
    "Education", "Gaming", "Consulting", "Startup", "Government",
    "Non-profit", "Other",
]

TARGET_ROLES = {
    "job": [
        "Software Developer", "Frontend Developer", "Backend Developer",
        "Full Stack Developer", "Data Scientist", "DevOps Engineer",
        "Product Manager", "UI/UX Designer", "Quality Assurance",
        "Business Analyst",
    ],
    "internship": [
        "Software Development Intern", "Data Science Intern",
        "Product Management Intern", "UI/UX Design Intern", "Marketing Intern",
        "Research Intern", "Business Development Intern",
    ],
    "hackathon": [
        "Full Stack Developer", "Frontend Specialist", "Backend Specialist",
        "Data Scientist", "UI/UX Designer", "Team Lead", "Idea Generator",
    ],
}


def new_resume() -> dict:
    """Fresh, empty ResumeData for a new wizard session."""
    return copy.deepcopy(RESUME_SCHEMA)


def new_id() -> str:
    return uuid.uuid4().hex


def new_education(entry_id: str | None = None) -> dict:
    entry = dict(EDUCATION_SCHEMA)
    entry["id"] = entry_id or new_id()
    return entry


def new_experience(entry_id: str | None = None) -> dict:
    entry = dict(EXPERIENCE_SCHEMA)
    entry["id"] = entry_id or new_id()
    return entry


def experience_type_label(kind: str) -> str:
    return EXPERIENCE_TYPE_LABELS.get(kind, "Experience")


def organization_label(kind: str) -> str:
    return ORGANIZATION_LABELS.get(kind, "Company/Organization")
