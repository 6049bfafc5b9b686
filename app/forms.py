"""
Streamlit step forms.

Each form builds a draft of its section from the wizard's data, renders the
widgets, and hands the complete section back with ``wizard.update`` on every
run. Navigation buttons come last so the gate sees the fresh draft.
"""
from __future__ import annotations
from datetime import date

import streamlit as st

from drafts import (
    add_education,
    add_experience,
    add_skill,
    education_draft,
    experience_draft,
    personal_draft,
    remove_entry,
    remove_skill,
    skills_draft,
    suggestions,
    update_entry,
)
from schema_resume import (
    EXPERIENCE_TYPES,
    INDUSTRIES,
    SKILL_CATEGORIES,
    TARGET_ROLES,
    TARGET_TYPES,
    experience_type_label,
    organization_label,
)
from wizard import ResumeWizard

_SKILL_LABELS = {
    "technical": ("Technical Skills *", "Add a technical skill...", "Suggested skills:"),
    "soft": ("Soft Skills", "Add a soft skill...", "Suggested skills:"),
    "languages": ("Languages", "Add a language...", "Suggested languages:"),
}
_CHIP_COLUMNS = 5

# session-state keys owned by the step forms and their navigation buttons
FORM_KEY_PREFIXES = ("personal_", "edu_", "exp_", "skill_", "target_", "next_", "prev_")


def reset_form_state() -> None:
    """Forget saved widget values so a fresh wizard renders empty fields."""
    for key in list(st.session_state.keys()):
        if key.startswith(FORM_KEY_PREFIXES):
            del st.session_state[key]


def navigation(wizard: ResumeWizard) -> None:
    """Previous / Next buttons; Next is disabled while the step is invalid."""
    col_prev, _, col_next = st.columns([1, 2, 1])
    with col_prev:
        if not wizard.is_first and st.button("⬅️ Previous", key=f"prev_{wizard.step}", use_container_width=True):
            wizard.retreat()
            st.rerun()
    with col_next:
        if not wizard.is_last and st.button(
            "Next Step ➡️",
            key=f"next_{wizard.step}",
            type="primary",
            disabled=not wizard.can_advance(),
            use_container_width=True,
        ):
            wizard.advance()
            st.rerun()


def _year_select(label: str, years: list[str], current: str, key: str) -> str:
    choice = st.selectbox(
        label,
        options=years,
        index=years.index(current) if current in years else None,
        placeholder="Select year",
        key=key,
    )
    return choice or ""


# ───────────────────────────────────────── personal ──
def personal_info_form(wizard: ResumeWizard) -> None:
    draft = personal_draft(wizard.data.get("personal"))

    col_a, col_b = st.columns(2)
    with col_a:
        draft["full_name"] = st.text_input("Full Name *", value=draft["full_name"], key="personal_full_name", placeholder="Enter your full name")
        draft["phone"] = st.text_input("Phone Number *", value=draft["phone"], key="personal_phone", placeholder="+91 9876543210")
        draft["linkedin"] = st.text_input("LinkedIn Profile", value=draft["linkedin"], key="personal_linkedin", placeholder="linkedin.com/in/yourprofile")
    with col_b:
        draft["email"] = st.text_input("Email Address *", value=draft["email"], key="personal_email", placeholder="your.email@example.com")
        draft["location"] = st.text_input("Location", value=draft["location"], key="personal_location", placeholder="City, State")
        draft["github"] = st.text_input("GitHub Profile", value=draft["github"], key="personal_github", placeholder="github.com/yourusername")

    draft["portfolio"] = st.text_input("Portfolio Website", value=draft["portfolio"], key="personal_portfolio", placeholder="https://yourportfolio.com")
    draft["summary"] = st.text_area(
        "Professional Summary",
        value=draft["summary"],
        key="personal_summary",
        placeholder="Brief description of your background, skills, and career objectives...",
        height=120,
    )

    wizard.update("personal", draft)
    navigation(wizard)


# ───────────────────────────────────────── education ──
def education_form(wizard: ResumeWizard) -> None:
    entries = education_draft(wizard.data.get("education"))
    this_year = date.today().year
    start_years = [str(this_year - i) for i in range(10)]
    end_years = [str(this_year + 6 - i) for i in range(10)]

    for n, edu in enumerate(entries, 1):
        eid = edu["id"]
        with st.container(border=True):
            col_title, col_remove = st.columns([6, 1])
            col_title.markdown(f"**🎓 Education {n}**")
            if len(entries) > 1 and col_remove.button("🗑️", key=f"edu_remove_{eid}", help="Remove this entry"):
                wizard.update("education", remove_entry(entries, eid))
                st.rerun()

            col_a, col_b = st.columns(2)
            with col_a:
                degree = st.text_input("Degree/Course *", value=edu["degree"], key=f"edu_{eid}_degree", placeholder="B.Tech Computer Science")
                location = st.text_input("Location", value=edu["location"], key=f"edu_{eid}_location", placeholder="City, State")
                start = _year_select("Start Year", start_years, edu["start_year"], f"edu_{eid}_start_year")
            with col_b:
                institution = st.text_input("Institution *", value=edu["institution"], key=f"edu_{eid}_institution", placeholder="University/College Name")
                cgpa = st.text_input("CGPA/Percentage", value=edu["cgpa"], key=f"edu_{eid}_cgpa", placeholder="8.5/10 or 85%")
                end = _year_select("End Year", end_years, edu["end_year"], f"edu_{eid}_end_year")
            coursework = st.text_input(
                "Relevant Coursework",
                value=edu["relevant_coursework"],
                key=f"edu_{eid}_coursework",
                placeholder="Data Structures, Algorithms, Web Development...",
            )

        for field, value in (
            ("degree", degree), ("institution", institution), ("location", location),
            ("cgpa", cgpa), ("start_year", start), ("end_year", end),
            ("relevant_coursework", coursework),
        ):
            entries = update_entry(entries, eid, field, value)

    wizard.update("education", entries)

    if st.button("➕ Add Another Education", key="edu_add", use_container_width=True):
        wizard.update("education", add_education(entries))
        st.rerun()

    navigation(wizard)


# ───────────────────────────────────────── skills ──
def _add_skill_from_input(wizard: ResumeWizard, category: str) -> None:
    key = f"skill_input_{category}"
    wizard.update("skills", add_skill(wizard.data.get("skills"), category, st.session_state.get(key, "")))
    st.session_state[key] = ""


def _add_skill(wizard: ResumeWizard, category: str, value: str) -> None:
    wizard.update("skills", add_skill(wizard.data.get("skills"), category, value))


def _remove_skill(wizard: ResumeWizard, category: str, value: str) -> None:
    wizard.update("skills", remove_skill(wizard.data.get("skills"), category, value))


def skills_form(wizard: ResumeWizard) -> None:
    skills = skills_draft(wizard.data.get("skills"))
    wizard.update("skills", skills)

    for category in SKILL_CATEGORIES:
        label, placeholder, suggestion_label = _SKILL_LABELS[category]
        st.markdown(f"#### {label}")

        col_input, col_add = st.columns([5, 1])
        with col_input:
            st.text_input(
                label,
                key=f"skill_input_{category}",
                placeholder=placeholder,
                label_visibility="collapsed",
                on_change=_add_skill_from_input,
                args=(wizard, category),
            )
        with col_add:
            st.button("➕", key=f"skill_add_{category}", on_click=_add_skill_from_input, args=(wizard, category), use_container_width=True)

        chosen = skills[category]
        if chosen:
            cols = st.columns(_CHIP_COLUMNS)
            for i, skill in enumerate(chosen):
                cols[i % _CHIP_COLUMNS].button(
                    f"✖ {skill}",
                    key=f"skill_remove_{category}_{i}",
                    help=f"Remove {skill}",
                    on_click=_remove_skill,
                    args=(wizard, category, skill),
                )

        suggested = suggestions(skills, category)
        if suggested:
            st.caption(suggestion_label)
            cols = st.columns(_CHIP_COLUMNS)
            for i, skill in enumerate(suggested):
                cols[i % _CHIP_COLUMNS].button(
                    f"+ {skill}",
                    key=f"skill_suggest_{category}_{i}",
                    type="secondary",
                    on_click=_add_skill,
                    args=(wizard, category, skill),
                )
        st.divider()

    navigation(wizard)


# ───────────────────────────────────────── experience ──
def experience_form(wizard: ResumeWizard) -> None:
    entries = experience_draft(wizard.data.get("experience"))

    for n, exp in enumerate(entries, 1):
        eid = exp["id"]
        with st.container(border=True):
            col_title, col_remove = st.columns([6, 1])
            col_title.markdown(f"**💼 {experience_type_label(exp['type'])} {n}**")
            if len(entries) > 1 and col_remove.button("🗑️", key=f"exp_remove_{eid}", help="Remove this entry"):
                wizard.update("experience", remove_entry(entries, eid))
                st.rerun()

            col_a, col_b = st.columns(2)
            with col_a:
                kind = st.selectbox(
                    "Type",
                    options=list(EXPERIENCE_TYPES),
                    index=EXPERIENCE_TYPES.index(exp["type"]) if exp["type"] in EXPERIENCE_TYPES else 0,
                    format_func=experience_type_label,
                    key=f"exp_{eid}_type",
                )
                company = st.text_input(organization_label(kind), value=exp["company"], key=f"exp_{eid}_company", placeholder="Company/Organization name")
                start = st.text_input("Start Date", value=exp["start_date"], key=f"exp_{eid}_start", placeholder="YYYY-MM")
            with col_b:
                title = st.text_input("Title/Role", value=exp["title"], key=f"exp_{eid}_title", placeholder="Software Developer Intern")
                location = st.text_input("Location", value=exp["location"], key=f"exp_{eid}_location", placeholder="City, State or Remote")
                current = st.checkbox("Currently working on this", value=bool(exp["current"]), key=f"exp_{eid}_current")
                end = st.text_input("End Date", value=exp["end_date"], key=f"exp_{eid}_end", placeholder="YYYY-MM", disabled=current)

            technologies = st.text_input(
                "Technologies Used",
                value=exp["technologies"],
                key=f"exp_{eid}_technologies",
                placeholder="React, Node.js, MongoDB, AWS...",
            )
            description = st.text_area(
                "Description",
                value=exp["description"],
                key=f"exp_{eid}_description",
                placeholder="Describe your responsibilities, achievements, and impact...",
                height=100,
            )

        for field, value in (
            ("type", kind), ("title", title), ("company", company),
            ("location", location), ("start_date", start), ("end_date", end),
            ("current", current), ("technologies", technologies),
            ("description", description),
        ):
            entries = update_entry(entries, eid, field, value)

    wizard.update("experience", entries)

    if st.button("➕ Add Another Experience", key="exp_add", use_container_width=True):
        wizard.update("experience", add_experience(entries))
        st.rerun()

    navigation(wizard)


# ───────────────────────────────────────── target ──
def target_form(wizard: ResumeWizard) -> None:
    target = {"type": "job", "description": "", "industry": "", "role": ""}
    target.update(wizard.data.get("target") or {})

    types = list(TARGET_TYPES)
    target["type"] = st.radio(
        "What are you targeting? *",
        options=types,
        index=types.index(target["type"]) if target["type"] in types else 0,
        format_func=lambda t: f"{TARGET_TYPES[t][0]} – {TARGET_TYPES[t][1]}",
        key="target_type",
    )

    roles = TARGET_ROLES[target["type"]]
    col_a, col_b = st.columns(2)
    with col_a:
        industry = st.selectbox(
            "Preferred Industry",
            options=INDUSTRIES,
            index=INDUSTRIES.index(target["industry"]) if target["industry"] in INDUSTRIES else None,
            placeholder="Select industry",
            key="target_industry",
        )
    with col_b:
        role = st.selectbox(
            "Target Role",
            options=roles,
            index=roles.index(target["role"]) if target["role"] in roles else None,
            placeholder="Select role",
            key=f"target_role_{target['type']}",
        )
    target["industry"] = industry or ""
    target["role"] = role or ""

    goal = {"job": "a job", "internship": "an internship"}.get(target["type"], "hackathon participation")
    target["description"] = st.text_area(
        "Career Objective/Goal *",
        value=target["description"],
        key="target_description",
        placeholder=f"Describe your career goals and what you're looking for in {goal}...",
        height=140,
    )

    wizard.update("target", target)
    navigation(wizard)


STEP_FORMS = {
    "personal": personal_info_form,
    "education": education_form,
    "skills": skills_form,
    "experience": experience_form,
    "target": target_form,
}
