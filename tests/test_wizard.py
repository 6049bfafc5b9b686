import pytest

from schema_resume import new_resume
from wizard import STEPS, ResumeWizard


def wizard_at(step: str, **sections) -> ResumeWizard:
    wizard = ResumeWizard()
    wizard.index = [s for s, _ in STEPS].index(step)
    for section, value in sections.items():
        wizard.update(section, value)
    return wizard


def test_new_wizard_starts_on_personal_with_empty_data() -> None:
    wizard = ResumeWizard()
    assert wizard.index == 0
    assert wizard.step == "personal"
    assert wizard.is_first and not wizard.is_last
    assert wizard.data == new_resume()
    assert wizard.progress() == "Step 1 of 6"


def test_advance_from_skills_requires_a_technical_skill() -> None:
    wizard = wizard_at("skills", skills={"technical": [], "soft": ["Teamwork"], "languages": []})
    assert wizard.advance() is False
    assert wizard.step == "skills"

    wizard.update("skills", {"technical": ["Python"], "soft": [], "languages": []})
    index = wizard.index
    assert wizard.advance() is True
    assert wizard.index == index + 1


@pytest.mark.parametrize(
    ("personal", "valid"),
    [
        ({}, False),
        ({"full_name": "A", "email": "a@x.io"}, False),
        ({"full_name": "A", "email": "a@x.io", "phone": "   "}, False),
        ({"full_name": "A", "email": "a@x.io", "phone": "123"}, True),
    ],
)
def test_personal_step_gate(personal: dict, valid: bool) -> None:
    wizard = wizard_at("personal", personal=personal)
    assert wizard.can_advance() is valid
    assert wizard.advance() is valid


def test_education_gate_checks_every_entry() -> None:
    good = {"id": "1", "degree": "B.Sc", "institution": "MU"}
    bad = {"id": "2", "degree": "B.Sc", "institution": ""}

    assert wizard_at("education", education=[good]).can_advance()
    assert not wizard_at("education", education=[good, bad]).can_advance()


def test_target_gate_needs_type_and_description() -> None:
    assert not wizard_at("target", target={"type": "job", "description": ""}).can_advance()
    assert not wizard_at("target", target={"type": "", "description": "Goal"}).can_advance()
    assert wizard_at("target", target={"type": "job", "description": "Goal"}).can_advance()


def test_experience_step_has_no_gate() -> None:
    assert wizard_at("experience").advance() is True


def test_retreat_is_unconditional_but_stops_at_first_step() -> None:
    wizard = wizard_at("skills")
    assert wizard.retreat() is True
    assert wizard.step == "education"
    wizard.index = 0
    assert wizard.retreat() is False
    assert wizard.index == 0


def test_no_transition_past_preview() -> None:
    wizard = wizard_at("preview")
    assert wizard.is_last
    assert wizard.title == "Preview & Generate"
    assert wizard.advance() is False
    assert wizard.index == len(STEPS) - 1


def test_update_replaces_section_wholesale() -> None:
    wizard = ResumeWizard()
    wizard.update("personal", {"full_name": "A", "email": "a@x.io"})
    wizard.update("personal", {"phone": "123"})
    assert wizard.data["personal"] == {"phone": "123"}


def test_update_rejects_unknown_section() -> None:
    with pytest.raises(KeyError):
        ResumeWizard().update("projects", [])


def test_transitions_do_not_reset_data(sample_data: dict) -> None:
    wizard = ResumeWizard(sample_data)
    for _ in range(len(STEPS) - 1):
        assert wizard.advance()
    assert wizard.is_last
    wizard.retreat()
    assert wizard.data is sample_data
    assert wizard.data["skills"]["technical"] == ["Python", "SQL"]
