from generator_rule import DEFAULT_OBJECTIVE, DEFAULT_SUMMARY, fallback_resume, resume_markdown
from markdown_renderer import Block, render_markdown
from schema_resume import new_resume


def test_resume_markdown_embeds_every_section(sample_data: dict) -> None:
    text = resume_markdown(sample_data)
    lines = text.split("\n")

    assert lines[0] == "# Asha Rao"
    assert lines[1] == "asha@example.com | +91 9000000000 | Pune, India"
    assert lines[2] == "[LinkedIn](https://linkedin.com/in/asha) | [GitHub](https://github.com/asha)"
    assert "* **B.E. Computer Engineering** - College of Engineering Pune, Pune" in lines
    assert "  * 2021 - 2025 | CGPA: N/A" in lines
    assert "**Technical Skills:** Python, SQL" in lines
    assert "**Soft Skills:** N/A" in lines
    assert "**Languages:** English, Marathi" in lines
    assert "* **Backend Intern** at Acme Labs (2024-06 - Present)" in lines
    assert "  * N/A" in lines
    assert "  * Technologies: FastAPI, PostgreSQL" in lines
    assert lines[-1] == "Backend internship at a product company."


def test_summary_falls_back_to_target_description(sample_data: dict) -> None:
    text = resume_markdown(sample_data)
    assert "## Professional Summary\nBackend internship at a product company." in text


def test_empty_resume_uses_placeholders() -> None:
    text = resume_markdown(new_resume())
    assert text.startswith("# Your Name\nyour.email@example.com | +91 9876543210 | City, State")
    assert DEFAULT_SUMMARY in text
    assert text.endswith(DEFAULT_OBJECTIVE)


def test_experience_without_company_or_current_flag() -> None:
    data = new_resume()
    data["experience"] = [{"id": "1", "title": "Chat App", "company": "", "start_date": "Jan", "end_date": "Mar", "current": False}]
    assert "* **Chat App**  (Jan - Mar)" in resume_markdown(data)


def test_generated_markdown_renders_into_sections(sample_data: dict) -> None:
    blocks = list(render_markdown(resume_markdown(sample_data)))
    assert blocks[0] == Block("h1", "Asha Rao")
    assert [b.kind for b in blocks[1:3]] == ["contact", "contact"]
    assert [b.text for b in blocks if b.kind == "h2"] == [
        "Professional Summary", "Education", "Skills", "Experience & Projects", "Career Objective",
    ]


def test_fallback_resume_is_short_template(sample_data: dict) -> None:
    text = fallback_resume(sample_data)
    assert text.startswith("# ASHA RAO\nasha@example.com | +91 9000000000 | Pune, India")
    assert "Motivated student seeking opportunities in technology." in text
    assert "**Technical Skills:** Programming, Data Structures" in text


def test_fallback_resume_defaults_and_industry() -> None:
    data = new_resume()
    data["target"]["industry"] = "Healthcare"
    text = fallback_resume(data)
    assert text.startswith("# YOUR NAME\nyour.email@example.com | +91 9876543210 | India")
    assert "opportunities in Healthcare." in text
