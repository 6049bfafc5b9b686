import streamlit as st

# MUST be the first Streamlit command
st.set_page_config(layout="wide", page_title="RankUp – AI Resume Builder")

import logging

try:
    import config
except ValueError as e:
    # missing API key: nothing below can generate, so stop here
    st.error(f"❌ Configuration error: {e}")
    st.stop()

config.configure_logging()
config.install_thread_exception_sink()

from example_resumes import EXAMPLE_RESUMES
from forms import STEP_FORMS, reset_form_state
from llm_client import check_llm_status
from markdown_renderer import render_html
from preview import init_preview_state, reset_generation_output_state, resume_preview
from wizard import STEPS, ResumeWizard

logger = logging.getLogger("rankup")

# Available models for each provider
MODEL_OPTIONS = {
    "OpenAI": [
        "gpt-4o-mini",
        "gpt-4o",
        "gpt-4-turbo",
        "gpt-3.5-turbo"
    ],
    "Ollama": [
        "llama3.1:8b",
        "llama3.1:70b",
        "mistral:7b",
        "qwen2.5:7b",
        "phi3:3.8b"
    ]
}
PROVIDER_KEYS = {"OpenAI": "openai", "Ollama": "ollama"}
PAGES = ["🏠 Home", "🛠️ Build Resume", "📚 Examples"]


def get_current_model() -> str:
    """Get the currently selected model from session state"""
    return st.session_state.selected_model


def get_current_provider() -> str:
    return PROVIDER_KEYS[st.session_state.selected_provider]


@st.cache_data(ttl=300)
def get_ai_status(provider: str) -> str:
    return check_llm_status(provider)


# Initialize session state variables
if "wizard" not in st.session_state:
    st.session_state.wizard = ResumeWizard()
    logger.info("New wizard session (provider=%s)", config.LLM_PROVIDER)
if "selected_provider" not in st.session_state:
    st.session_state.selected_provider = "Ollama" if config.LLM_PROVIDER == "ollama" else "OpenAI"
if "selected_model" not in st.session_state:
    st.session_state.selected_model = config.get_model_for_provider()
init_preview_state()

st.markdown("""
<style>
.stApp {
    background: linear-gradient(135deg, #0f172a 0%, #3b0764 50%, #0f172a 100%) !important;
    color: #ffffff !important;
}

div.stButton > button {
    border-radius: 8px !important;
    font-weight: 500 !important;
    transition: all 0.2s ease !important;
}

div.stButton > button[kind="primary"] {
    background: linear-gradient(90deg, #9333ea 0%, #0891b2 100%) !important;
    color: white !important;
    border: none !important;
}

div.stButton > button:hover {
    transform: translateY(-1px) !important;
}

div[data-testid="stMetric"] {
    background: rgba(255,255,255,0.05) !important;
    border: 1px solid #374151 !important;
    border-radius: 8px !important;
    padding: 0.75rem !important;
    text-align: center !important;
}

.feature-box {
    background: linear-gradient(90deg, rgba(168,85,247,0.1) 0%, rgba(6,182,212,0.1) 100%);
    border: 1px solid rgba(168,85,247,0.3);
    border-radius: 8px;
    padding: 1rem 1.5rem;
    margin: 1rem 0;
    color: #d1d5db;
}

.score-badge {
    display: inline-block;
    font-weight: 700;
    font-size: 1.1rem;
    padding: 0.5rem 1rem;
    border-radius: 8px;
    color: white;
}
.score-high { background: rgba(22,163,74,0.3); border: 1px solid #22c55e; }
.score-medium { background: rgba(202,138,4,0.3); border: 1px solid #eab308; }
.score-low { background: rgba(220,38,38,0.3); border: 1px solid #ef4444; }

.status-badge {
    display: inline-block;
    font-size: 0.8rem;
    padding: 0.2rem 0.6rem;
    border-radius: 999px;
}
.status-connected { background: rgba(34,197,94,0.2); color: #86efac; border: 1px solid rgba(34,197,94,0.3); }
.status-error { background: rgba(239,68,68,0.2); color: #fca5a5; border: 1px solid rgba(239,68,68,0.3); }

.step-dots span {
    display: inline-block;
    width: 12px;
    height: 12px;
    border-radius: 50%;
    margin-right: 6px;
    background: #4b5563;
}
.step-dots span.done { background: #a855f7; }

.welcome-section {
    text-align: center;
    padding: 3rem;
    background: linear-gradient(135deg, #7e22ce 0%, #0e7490 100%);
    border-radius: 12px;
    color: white;
    margin: 2rem 0;
}

.dark-footer {
    text-align: center;
    padding: 1.5rem;
    color: #9ca3af;
    border-top: 1px solid #374151;
    margin-top: 2rem;
}

#MainMenu {visibility: hidden;}
footer {visibility: hidden;}
</style>
""", unsafe_allow_html=True)

def _start_over() -> None:
    st.session_state.wizard = ResumeWizard()
    reset_form_state()
    reset_generation_output_state()
    st.session_state.show_preview = False
    logger.info("Wizard session restarted")


# --- SIDEBAR: NAVIGATION AND MODEL SELECTION ---
with st.sidebar:
    st.markdown("## 📄 RankUp")
    page = st.radio("Navigate", PAGES, key="page", label_visibility="collapsed")

    st.markdown("### 🤖 AI Model")
    provider = st.selectbox(
        "Provider",
        options=list(MODEL_OPTIONS.keys()),
        index=list(MODEL_OPTIONS.keys()).index(st.session_state.selected_provider),
        key="provider_select",
        help="Choose between the OpenAI API or local Ollama models"
    )
    # Reset to first model of a newly chosen provider
    if provider != st.session_state.selected_provider:
        st.session_state.selected_provider = provider
        st.session_state.selected_model = MODEL_OPTIONS[provider][0]

    model = st.selectbox(
        "Model",
        options=MODEL_OPTIONS[provider],
        index=MODEL_OPTIONS[provider].index(st.session_state.selected_model) if st.session_state.selected_model in MODEL_OPTIONS[provider] else 0,
        key="model_select",
    )
    st.session_state.selected_model = model

    ai_status = get_ai_status(get_current_provider())
    label = "AI Ready" if ai_status == "connected" else "AI Offline"
    icon = "✅" if ai_status == "connected" else "⚠️"
    st.markdown(f'<span class="status-badge status-{ai_status}">{icon} {label}</span>', unsafe_allow_html=True)

    st.divider()
    st.button("🔄 Start Over", key="start_over", on_click=_start_over, use_container_width=True)


def _go_to_builder() -> None:
    st.session_state.page = PAGES[1]


def home_page() -> None:
    st.markdown("""
    <div class="welcome-section">
        <h1 style="margin-bottom: 1rem;">🚀 Build a resume that gets you noticed</h1>
        <p style="font-size: 1.2rem; margin-bottom: 1.5rem;">
            Fill in five short steps and let AI turn them into a polished, ATS-friendly resume.
        </p>
        <p style="margin: 0.3rem 0;">🎓 Made for students – projects and potential over years of experience</p>
        <p style="margin: 0.3rem 0;">🤖 AI-written content with a resume score</p>
        <p style="margin: 0.3rem 0;">📥 Download as PDF or Markdown</p>
    </div>
    """, unsafe_allow_html=True)
    st.button("🛠️ Start Building", key="start_building", type="primary", on_click=_go_to_builder, use_container_width=True)


def builder_page() -> None:
    wizard: ResumeWizard = st.session_state.wizard

    col_dots, col_step = st.columns([3, 1])
    with col_dots:
        dots = "".join(
            f'<span class="{"done" if i <= wizard.index else ""}"></span>'
            for i in range(len(STEPS))
        )
        st.markdown(f'<div class="step-dots">{dots}</div>', unsafe_allow_html=True)
    with col_step:
        st.markdown(f"**{wizard.progress()}**")

    st.subheader(wizard.title)
    if wizard.is_last:
        resume_preview(wizard, get_current_model(), get_current_provider(), ai_status)
    else:
        STEP_FORMS[wizard.step](wizard)


def examples_page() -> None:
    st.markdown("## 📚 Example Resumes")
    columns = st.columns(len(EXAMPLE_RESUMES))
    for col, example in zip(columns, EXAMPLE_RESUMES):
        with col:
            st.markdown(f"#### {example['title']}")
            st.caption(example["description"])
            st.markdown(render_html(example["markdown"], inline=True), unsafe_allow_html=True)


if page == PAGES[0]:
    home_page()
elif page == PAGES[1]:
    builder_page()
else:
    examples_page()

st.markdown("""
<div class="dark-footer">
    <p style="margin: 0; font-size: 0.9rem;"><strong>📄 RankUp</strong> | AI resume builder for students</p>
</div>
""", unsafe_allow_html=True)
