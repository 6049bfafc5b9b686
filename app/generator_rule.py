"""
Deterministic résumé templates – plain string substitution, no AI.

``resume_markdown`` is the full data-driven body (it is also what the AI
prompt embeds); ``fallback_resume`` is the short stand-in used when the
generation call fails.
"""
from __future__ import annotations

DEFAULT_SUMMARY = "Motivated student seeking opportunities in technology and software development."
DEFAULT_OBJECTIVE = "Seeking opportunities to apply my skills and contribute to innovative projects."


def _contact_lines(personal: dict) -> str:
    first = " | ".join([
        personal.get("email") or "your.email@example.com",
        personal.get("phone") or "+91 9876543210",
        personal.get("location") or "City, State",
    ])
    links = ""
    if personal.get("linkedin"):
        links += f"[LinkedIn]({personal['linkedin']})"
    if personal.get("github"):
        links += f" | [GitHub]({personal['github']})"
    if personal.get("portfolio"):
        links += f" | [Portfolio]({personal['portfolio']})"
    return f"{first}\n{links}"


def _education_block(e: dict) -> str:
    return (
        f"* **{e.get('degree', '')}** - {e.get('institution', '')}, {e.get('location', '')}\n"
        f"  * {e.get('start_year', '')} - {e.get('end_year', '')} | CGPA: {e.get('cgpa') or 'N/A'}\n"
        f"  * Relevant Coursework: {e.get('relevant_coursework') or 'N/A'}"
    )


def _experience_block(x: dict) -> str:
    org = f"at {x['company']}" if x.get("company") else ""
    end = "Present" if x.get("current") else x.get("end_date", "")
    return (
        f"* **{x.get('title', '')}** {org} ({x.get('start_date', '')} - {end})\n"
        f"  * {x.get('location') or 'N/A'}\n"
        f"  * Technologies: {x.get('technologies') or 'N/A'}\n"
        f"  * {x.get('description') or 'Description of responsibilities and achievements.'}"
    )


def resume_markdown(data: dict) -> str:
    """Render every section of ``data`` into the resume Markdown subset."""
    personal = data.get("personal") or {}
    skills = data.get("skills") or {}
    target = data.get("target") or {}

    education = "\n\n".join(_education_block(e) for e in data.get("education") or [])
    experience = "\n\n".join(_experience_block(x) for x in data.get("experience") or [])
    summary = personal.get("summary") or target.get("description") or DEFAULT_SUMMARY

    return f"""
# {personal.get("full_name") or "Your Name"}
{_contact_lines(personal)}

## Professional Summary
{summary}

## Education
{education}

## Skills
**Technical Skills:** {", ".join(skills.get("technical") or []) or "N/A"}
**Soft Skills:** {", ".join(skills.get("soft") or []) or "N/A"}
**Languages:** {", ".join(skills.get("languages") or []) or "N/A"}

## Experience & Projects
{experience}

## Career Objective
{target.get("description") or DEFAULT_OBJECTIVE}
""".strip()


def fallback_resume(data: dict) -> str:
    """Short templated resume shown when the AI call fails."""
    personal = data.get("personal") or {}
    industry = (data.get("target") or {}).get("industry") or "technology"
    name = (personal.get("full_name") or "").upper() or "YOUR NAME"

    return f"""
# {name}
{personal.get("email") or "your.email@example.com"} | {personal.get("phone") or "+91 9876543210"} | {personal.get("location") or "India"}

## Professional Summary
Motivated student seeking opportunities in {industry}.

## Education
* **Degree** - Institution, Location
  * StartYear - EndYear | CGPA: N/A
  * Relevant Coursework: N/A

## Skills
**Technical Skills:** Programming, Data Structures
**Soft Skills:** Communication, Teamwork
**Languages:** English

## Experience & Projects
* **Project Title** at Organization (Start - End)
  * Location
  * Technologies: Tech1, Tech2
  * Description of project.

## Career Objective
{DEFAULT_OBJECTIVE}
""".strip()
