"""
LLM-based résumé generator.

• Builds one prompt embedding every section of the collected ResumeData.
• Makes two strictly ordered calls: generation, then a 0–100 "how much does
  this look like a resume" score.
• Neither call raises past this module: failures come back as a
  GenerationResult with a reason, the fallback template, or the default score.
"""

from __future__ import annotations
import logging
import re
import textwrap
from dataclasses import dataclass
from typing import Callable

from llm_client import chat
from config import (
    DEFAULT_LIKELIHOOD,
    EVALUATION_PARAMS,
    GENERATION_PARAMS,
    get_model_for_provider,
)
from generator_rule import fallback_resume, resume_markdown

logger = logging.getLogger(__name__)

_MODEL = get_model_for_provider()

_PROMPT_RESUME = textwrap.dedent(
    """\
You are an expert resume writer specialising in Tier-2/Tier-3 Indian students.
Create a concise, professional, and ATS-friendly resume in Markdown format using the information below.
Ensure all sections are clearly marked with Markdown headers.

{{resume_body}}

=== IMPORTANT FORMATTING RULES ===
- Use standard Markdown for headers (#, ##), bold (**), and lists (*).
- Ensure contact info is on one line or clearly separated.
- Keep descriptions concise and achievement-oriented.
- Do NOT include any introductory or concluding remarks outside the resume content.
"""
)

_PROMPT_LIKELIHOOD = textwrap.dedent(
    """\
Given the following text, evaluate on a scale of 0 to 100 how much it resembles a professional resume.
Consider structure, content, keywords, and overall presentation.
Output ONLY the numerical percentage. Do not include any other text or characters.

Resume Text:
---
{{resume_text}}
---
"""
)

_LEADING_INT = re.compile(r"[+-]?\d+")

FALLBACK_NOTE = (
    "⚠️ Note: This resume was generated using fallback mode. For AI-enhanced content, "
    "please check your internet connection and try again."
)


@dataclass(frozen=True)
class GenerationResult:
    """Outcome of one generation call: the text on success, a reason otherwise."""

    ok: bool
    text: str = ""
    reason: str = ""


def build_prompt(data: dict) -> str:
    return _PROMPT_RESUME.replace("{{resume_body}}", resume_markdown(data)).strip()


def _ask(prompt: str, params: dict, model: str | None, provider: str | None) -> str:
    messages = [{"role": "user", "content": prompt}]
    rsp = chat(model=model or _MODEL, messages=messages, provider=provider, **params)
    return rsp.message.content


def request_resume(
    data: dict,
    model: str | None = None,
    provider: str | None = None,
) -> GenerationResult:
    """Call the model once; any failure is folded into the result."""
    try:
        text = _ask(build_prompt(data), GENERATION_PARAMS, model, provider)
    except Exception as e:
        logger.error("Error generating resume with %s: %s", model or _MODEL, e, exc_info=True)
        return GenerationResult(ok=False, reason=str(e) or type(e).__name__)

    if not text or not text.strip():
        logger.error("Model %s returned an empty resume", model or _MODEL)
        return GenerationResult(ok=False, reason="empty response")
    return GenerationResult(ok=True, text=text)


def generate_resume(
    data: dict,
    model: str | None = None,
    provider: str | None = None,
) -> str:
    """Generated Markdown, or the templated fallback when the call fails."""
    result = request_resume(data, model, provider)
    return result.text if result.ok else fallback_resume(data)


def parse_likelihood(raw: str) -> int | None:
    """Leading integer of ``raw`` clamped to 0..100, or None if there is none."""
    m = _LEADING_INT.match((raw or "").strip())
    if not m:
        return None
    return max(0, min(100, int(m.group())))


def evaluate_likelihood(
    resume_text: str,
    model: str | None = None,
    provider: str | None = None,
) -> int:
    prompt = _PROMPT_LIKELIHOOD.replace("{{resume_text}}", resume_text)
    try:
        raw = _ask(prompt, EVALUATION_PARAMS, model, provider)
    except Exception as e:
        logger.error("Error evaluating resume likelihood: %s", e, exc_info=True)
        return DEFAULT_LIKELIHOOD

    score = parse_likelihood(raw)
    if score is None:
        logger.warning("AI returned non-numeric likelihood: %r", raw)
        return DEFAULT_LIKELIHOOD
    return score


def score_tier(score: int) -> str:
    """Badge colour tier for a likelihood score."""
    if score >= 80:
        return "high"
    if score >= 50:
        return "medium"
    return "low"


def generate_and_evaluate(
    data: dict,
    model: str | None = None,
    provider: str | None = None,
    status_callback: Callable[[str], None] | None = None,
) -> tuple[GenerationResult, str, int]:
    """
    Run both calls in order.

    Returns the raw generation result, the text to display (fallback included)
    and the likelihood score of that text.
    """
    if status_callback:
        status_callback("🤖 Generating your resume...")
    result = request_resume(data, model, provider)
    text = result.text if result.ok else fallback_resume(data)
    if status_callback:
        status_callback("📊 Evaluating resume...")
    score = evaluate_likelihood(text, model, provider)
    return result, text, score
