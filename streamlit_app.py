"""Streamlit Web UI for SayBetter.

  - Improve: mixed-language text + tone -> Corrected / Professional / Casual / Gen-Z
  - Sidebar history: filter, restore a past rewrite, clear all
  - Contact: send a message to the support inbox
"""

from __future__ import annotations

import asyncio
import logging
import os

logger = logging.getLogger(__name__)

import nest_asyncio
import streamlit as st
from dotenv import load_dotenv

load_dotenv()
nest_asyncio.apply()

# Streamlit Cloud: sync st.secrets -> os.environ so backend clients can read them
for key in ("GEMINI_API_KEY", "ANTHROPIC_API_KEY", "GMAIL_USER", "GMAIL_APP_PASSWORD"):
    if key not in os.environ:
        try:
            os.environ[key] = st.secrets[key]
        except Exception:
            pass

from say_better.clients.base import create_text_generator
from say_better.config import load_config
from say_better.history.history_store import SQLiteHistoryStore
from say_better.mail.contact_mailer import ContactMailer, submit_contact
from say_better.models.history import HistoryEntry
from say_better.models.rewrite import VARIANT_LABELS, RewriteResult
from say_better.models.tone import TONE_NAMES, Tone
from say_better.pipeline.rewriter import Rewriter

HINT_EXAMPLE = 'e.g. "jadi saya tidak perlu melakukan apapun if not using region US-EAST-1 ?"'

VARIANT_HELP = {
    "corrected": "Grammar fixed, meaning unchanged.",
    "professional": "Formal version for business communication.",
    "casual": "Relaxed, conversational version.",
    "genz": "Gen-Z version with trendy slang and emoji.",
}

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------

st.set_page_config(
    page_title="SayBetter",
    page_icon=":speech_balloon:",
    layout="wide",
)

config = load_config()


@st.cache_resource
def _get_history() -> SQLiteHistoryStore:
    return SQLiteHistoryStore(config.history.resolved_db_path)


def _get_rewriter() -> Rewriter:
    return Rewriter(
        create_text_generator(config.llm),
        _get_history(),
        default_model=config.llm.active_model,
    )


for key, default in (
    ("input_text", ""),
    ("result", RewriteResult()),
    ("error", None),
):
    if key not in st.session_state:
        st.session_state[key] = default


def _restore(entry: HistoryEntry) -> None:
    st.session_state.input_text = entry.input_text
    st.session_state.result = entry.result
    st.session_state.tone = Tone.resolve(entry.tone).label
    st.session_state.error = None


# ---------------------------------------------------------------------------
# Sidebar: history
# ---------------------------------------------------------------------------

with st.sidebar:
    st.title("SayBetter")
    st.caption("English sentence improver")

    st.divider()

    history_filter = st.text_input("Filter history...", label_visibility="collapsed",
                                   placeholder="Filter history...")
    if st.button("Clear history", use_container_width=True):
        try:
            deleted = _get_history().clear_all()
            st.toast(f"Deleted {deleted} entries")
        except Exception:
            logger.exception("Failed to clear history")
            st.error("Could not clear history.")

    entries = _get_history().list_recent(query=history_filter, limit=config.history.list_limit)
    if not entries:
        st.caption("No history yet." if not history_filter else "No matching entries.")
    for entry in entries:
        label = entry.input_text if len(entry.input_text) <= 60 else entry.input_text[:57] + "..."
        st.button(
            label,
            key=f"history_{entry.id}",
            help=f"{entry.tone} | {entry.created_at:%Y-%m-%d %H:%M}",
            on_click=_restore,
            args=(entry,),
            use_container_width=True,
        )


# ---------------------------------------------------------------------------
# Main: improve
# ---------------------------------------------------------------------------

tab_improve, tab_contact = st.tabs(["Improve", "Contact"])

with tab_improve:
    st.header("Improve your sentence")
    st.markdown("Write in mixed language; get clean English in four styles.")

    st.text_area("Your text", key="input_text", height=160, placeholder=HINT_EXAMPLE)

    col_tone, col_model = st.columns(2)
    with col_tone:
        tone = st.selectbox(
            "Tone",
            TONE_NAMES,
            key="tone",
            help=" | ".join(f"{t.label}: {t.description}" for t in Tone),
        )
    with col_model:
        model = st.selectbox("Model", [config.llm.active_model], index=0)

    if st.button("Improve", type="primary", disabled=not st.session_state.input_text.strip()):
        with st.spinner("Improving..."):
            outcome = asyncio.run(
                _get_rewriter().rewrite(st.session_state.input_text, tone=tone, model_id=model)
            )
        # The last completed request owns the displayed result
        st.session_state.result = outcome.result
        st.session_state.error = outcome.error
        if outcome.entry is not None:
            st.rerun()

    if st.session_state.error:
        st.error(st.session_state.error)

    result: RewriteResult = st.session_state.result
    cols = st.columns(2)
    for i, (field, label) in enumerate(VARIANT_LABELS):
        with cols[i % 2]:
            st.subheader(label)
            st.caption(VARIANT_HELP[field])
            value = getattr(result, field)
            if value:
                # st.code renders a copy button
                st.code(value, language=None, wrap_lines=True)
            else:
                st.markdown(":gray[-]")


# ---------------------------------------------------------------------------
# Contact
# ---------------------------------------------------------------------------

with tab_contact:
    st.header("Contact support")
    with st.form("contact_form", clear_on_submit=True):
        name = st.text_input("Name")
        email = st.text_input("Email")
        message = st.text_area("Message", height=140)
        submitted = st.form_submit_button("Send")

    if submitted:
        outcome = submit_contact(
            {"name": name, "email": email, "message": message},
            ContactMailer(config.mail),
        )
        if outcome.success:
            st.success("Message sent. We'll get back to you soon.")
        else:
            st.error(outcome.error)
