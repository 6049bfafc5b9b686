"""
Preview & Generate step: the "ready" panel, the generated preview with its
score badge, and the PDF / Markdown export buttons.
"""
from __future__ import annotations
import logging

import streamlit as st

from exporter import ExportError, export_filename, export_pdf
from generator_llm import FALLBACK_NOTE, generate_and_evaluate, score_tier
from generator_rule import resume_markdown
from markdown_renderer import render_html
from wizard import ResumeWizard

logger = logging.getLogger(__name__)


def init_preview_state() -> None:
    defaults = {
        "generated_resume": "",
        "resume_likelihood": None,
        "show_preview": False,
        "is_generating": False,
        "generation_error": None,
        "pdf_bytes": None,
    }
    for key, value in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = value


def reset_generation_output_state() -> None:
    st.session_state.generated_resume = ""
    st.session_state.resume_likelihood = None
    st.session_state.generation_error = None
    st.session_state.pdf_bytes = None


def _request_generation() -> None:
    reset_generation_output_state()
    st.session_state.is_generating = True


def _run_generation(wizard: ResumeWizard, model: str, provider: str) -> None:
    with st.status("🤖 Creating your resume with AI...", expanded=True) as status_ui:
        try:
            result, text, score = generate_and_evaluate(
                wizard.data,
                model=model,
                provider=provider,
                status_callback=status_ui.write,
            )
        finally:
            st.session_state.is_generating = False

        st.session_state.generated_resume = text
        st.session_state.resume_likelihood = score
        st.session_state.generation_error = None if result.ok else result.reason
        st.session_state.show_preview = True
        if result.ok:
            status_ui.update(label="✅ Resume generated and evaluated!", state="complete")
        else:
            status_ui.update(label="⚠️ AI unavailable – showing fallback resume.", state="error")
    st.rerun()


def _ready_panel(wizard: ResumeWizard, model: str, provider: str, ai_status: str) -> None:
    data = wizard.data
    target = data.get("target") or {}

    st.markdown("### ✨ AI Resume Generation")
    st.markdown(
        "Ready to generate your professional resume! The AI will analyze your information "
        "and create a tailored resume for your target role."
    )
    st.markdown(f"""
<div class="feature-box">
    <strong>Content Enhancement:</strong> optimized for {target.get("type") or "your target role"},
    industry keywords for {target.get("industry") or "technology"}, ATS-friendly formatting,
    action-oriented descriptions.<br/>
    <strong>Student-Focused:</strong> highlights potential over experience and showcases projects effectively.
</div>
""", unsafe_allow_html=True)

    col_edu, col_tech, col_exp, col_target = st.columns(4)
    col_edu.metric("Education", len(data.get("education") or []))
    col_tech.metric("Tech Skills", len((data.get("skills") or {}).get("technical") or []))
    col_exp.metric("Experiences", len(data.get("experience") or []))
    col_target.metric("Target Role", 1)

    generating = st.session_state.is_generating
    st.button(
        "⏳ Generating Your Resume..." if generating else "✨ Generate AI-Powered Resume",
        key="generate_resume",
        type="primary",
        disabled=generating or ai_status != "connected",
        on_click=_request_generation,
        use_container_width=True,
    )
    if ai_status != "connected":
        st.warning("🔌 AI provider is offline. You can still build the resume from your data without AI.")
        if st.button("📝 Build Without AI", key="build_without_ai", use_container_width=True):
            reset_generation_output_state()
            st.session_state.generated_resume = resume_markdown(data)
            st.session_state.show_preview = True
            st.rerun()

    if generating:
        _run_generation(wizard, model, provider)


def _score_badge(score: int | None) -> None:
    if score is None:
        return
    st.markdown(
        f'<span class="score-badge score-{score_tier(score)}">Resume Score: {score}%</span>',
        unsafe_allow_html=True,
    )


def _export_buttons(wizard: ResumeWizard, text: str) -> None:
    filename = export_filename(wizard.data)

    if st.button("📄 Prepare PDF", key="prepare_pdf", use_container_width=True):
        try:
            with st.spinner("Rendering PDF..."):
                st.session_state.pdf_bytes = export_pdf(text, title=filename[:-4])
        except ExportError as e:
            st.session_state.pdf_bytes = None
            st.error(f"❌ Failed to generate PDF. Please try again or check the logs for details. ({e})")

    if st.session_state.pdf_bytes:
        st.download_button(
            "📥 Download PDF",
            data=st.session_state.pdf_bytes,
            file_name=filename,
            mime="application/pdf",
            key="download_pdf",
            use_container_width=True,
        )

    st.download_button(
        "📥 Download Markdown",
        data=text,
        file_name=filename.replace(".pdf", ".md"),
        mime="text/markdown",
        key="download_md",
        use_container_width=True,
    )


def _preview_panel(wizard: ResumeWizard) -> None:
    text = st.session_state.generated_resume

    col_back, col_score, col_export = st.columns([1, 1, 1])
    with col_back:
        if st.button("⬅️ Back to Generate", key="back_to_generate", use_container_width=True):
            st.session_state.show_preview = False
            st.rerun()
    with col_score:
        _score_badge(st.session_state.resume_likelihood)
    with col_export:
        _export_buttons(wizard, text)

    if st.session_state.generation_error:
        st.warning(FALLBACK_NOTE)
        st.caption(f"Reason: {st.session_state.generation_error}")

    st.markdown("### 👁️ Resume Preview")
    st.markdown(render_html(text, inline=True), unsafe_allow_html=True)


def resume_preview(wizard: ResumeWizard, model: str, provider: str, ai_status: str) -> None:
    init_preview_state()
    if st.session_state.show_preview and st.session_state.generated_resume:
        _preview_panel(wizard)
    else:
        _ready_panel(wizard, model, provider, ai_status)
        col_prev, _ = st.columns([1, 3])
        with col_prev:
            if st.button("⬅️ Previous", key="prev_preview", use_container_width=True):
                wizard.retreat()
                st.rerun()
