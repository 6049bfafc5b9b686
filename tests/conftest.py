import os

# config refuses to import without a key; tests never reach the real API
os.environ.setdefault("OPENAI_API_KEY", "test-key")

import pytest

from llm_client import LLMResponse


class FakeChat:
    """Stand-in for llm_client.chat that replays canned replies in order."""

    def __init__(self, replies):
        self.replies = list(replies)
        self.calls = []

    def __call__(self, model, messages, provider=None, **params):
        self.calls.append({"model": model, "messages": messages, "provider": provider, "params": params})
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return LLMResponse(reply)


@pytest.fixture
def fake_chat(monkeypatch):
    import generator_llm

    def install(*replies):
        fake = FakeChat(replies)
        monkeypatch.setattr(generator_llm, "chat", fake)
        return fake

    return install


@pytest.fixture
def sample_data() -> dict:
    return {
        "personal": {
            "full_name": "Asha Rao",
            "email": "asha@example.com",
            "phone": "+91 9000000000",
            "location": "Pune, India",
            "linkedin": "https://linkedin.com/in/asha",
            "github": "https://github.com/asha",
            "portfolio": "",
            "summary": "",
        },
        "education": [
            {
                "id": "e1",
                "degree": "B.E. Computer Engineering",
                "institution": "College of Engineering Pune",
                "location": "Pune",
                "start_year": "2021",
                "end_year": "2025",
                "cgpa": "",
                "relevant_coursework": "Operating Systems, DBMS",
            }
        ],
        "skills": {"technical": ["Python", "SQL"], "soft": [], "languages": ["English", "Marathi"]},
        "experience": [
            {
                "id": "x1",
                "type": "internship",
                "title": "Backend Intern",
                "company": "Acme Labs",
                "location": "",
                "start_date": "2024-06",
                "end_date": "",
                "current": True,
                "description": "Built REST APIs for the billing service.",
                "technologies": "FastAPI, PostgreSQL",
            }
        ],
        "target": {"type": "internship", "description": "Backend internship at a product company.", "industry": "", "role": ""},
    }
