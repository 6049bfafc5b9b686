import pytest

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
from schema_resume import PERSONAL_FIELDS, experience_type_label, organization_label


def test_personal_draft_fills_missing_fields() -> None:
    draft = personal_draft({"full_name": "Asha"})
    assert set(draft) == set(PERSONAL_FIELDS)
    assert draft["full_name"] == "Asha"
    assert draft["email"] == ""


def test_add_skill_trims_and_appends_in_order() -> None:
    skills = add_skill(skills_draft(None), "technical", "  Python ")
    skills = add_skill(skills, "technical", "SQL")
    assert skills["technical"] == ["Python", "SQL"]


@pytest.mark.parametrize("value", ["Python", " Python", "", "   "])
def test_add_skill_duplicate_or_blank_is_noop(value: str) -> None:
    before = {"technical": ["Python"], "soft": [], "languages": []}
    after = add_skill(before, "technical", value)
    assert after == before


def test_add_skill_returns_new_section() -> None:
    before = {"technical": [], "soft": [], "languages": []}
    after = add_skill(before, "soft", "Teamwork")
    assert before["soft"] == []
    assert after["soft"] == ["Teamwork"]


def test_skill_category_must_exist() -> None:
    with pytest.raises(KeyError):
        add_skill(skills_draft(None), "hobbies", "Chess")
    with pytest.raises(KeyError):
        remove_skill(skills_draft(None), "hobbies", "Chess")


def test_remove_skill() -> None:
    skills = {"technical": ["Python", "SQL"], "soft": [], "languages": []}
    assert remove_skill(skills, "technical", "Python")["technical"] == ["SQL"]


def test_suggestions_hide_chosen_skills() -> None:
    skills = {"technical": ["Python", "Git"], "soft": [], "languages": []}
    suggested = suggestions(skills, "technical")
    assert "Python" not in suggested
    assert "Git" not in suggested
    assert suggested[0] == "JavaScript"


def test_entry_drafts_seed_one_blank_entry() -> None:
    (edu,) = education_draft([])
    assert edu["degree"] == "" and edu["id"]
    (exp,) = experience_draft(None)
    assert exp["type"] == "project" and exp["current"] is False


def test_added_entries_get_unique_ids() -> None:
    entries = add_education(education_draft([]))
    entries = add_education(entries)
    assert len({e["id"] for e in entries}) == 3
    assert len(add_experience(experience_draft([]))) == 2


def test_remove_entry_keeps_the_last_one() -> None:
    entries = [{"id": "a"}, {"id": "b"}]
    entries = remove_entry(entries, "a")
    assert entries == [{"id": "b"}]
    assert remove_entry(entries, "b") == [{"id": "b"}]


def test_update_entry_touches_only_matching_id() -> None:
    entries = [{"id": "a", "degree": ""}, {"id": "b", "degree": ""}]
    updated = update_entry(entries, "b", "degree", "M.Tech")
    assert updated == [{"id": "a", "degree": ""}, {"id": "b", "degree": "M.Tech"}]
    assert entries[1]["degree"] == ""


def test_experience_labels() -> None:
    assert experience_type_label("work") == "Work Experience"
    assert experience_type_label("other") == "Experience"
    assert organization_label("hackathon") == "Event Name"
    assert organization_label("other") == "Company/Organization"
