"""memopass -- Streamlit web interface."""

import asyncio
from datetime import date

import streamlit as st

from memopass import (
    SECURITY_QUESTIONS,
    ProfileError,
    QuestionAnswer,
    UserProfile,
    check_breach,
    score_strength,
    synthesize,
)
from memopass.models import SECURITY_SLOTS

# ── Lucide icons (from lucide.dev) ────────────────────────────────────────

_LUCIDE = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="{s}" height="{s}" '
    'viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" '
    'stroke-linecap="round" stroke-linejoin="round">{paths}</svg>'
)

ICON_SHIELD = _LUCIDE.format(s=32, paths=(
    '<path d="M20 13c0 5-3.5 7.5-7.66 8.95a1 1 0 0 1-.67-.01'
    'C7.5 20.5 4 18 4 13V6a1 1 0 0 1 1-1c2 0 4.5-1.2 6.24-2.72'
    'a1.17 1.17 0 0 1 1.52 0C14.51 3.81 17 5 19 5a1 1 0 0 1 1 1z"/>'
))

ICON_USER = _LUCIDE.format(s=20, paths=(
    '<path d="M19 21v-2a4 4 0 0 0-4-4H9a4 4 0 0 0-4 4v2"/>'
    '<circle cx="12" cy="7" r="4"/>'
))

ICON_SEARCH = _LUCIDE.format(s=20, paths=(
    '<circle cx="11" cy="11" r="8"/><path d="m21 21-4.3-4.3"/>'
))

STRENGTH_COLORS = {"Weak": "#d32f2f", "Medium": "#f57c00", "Strong": "#388e3c"}


def _heading(icon: str, text: str) -> None:
    st.markdown(
        f'<p style="display:flex;align-items:center;gap:6px">'
        f"{icon} <strong>{text}</strong></p>",
        unsafe_allow_html=True,
    )


def _strength_panel(password: str) -> None:
    report = score_strength(password)
    color = STRENGTH_COLORS[report.label]
    st.markdown(
        f"**Strength:** <span style='color:{color}'>{report.label}</span>"
        f" &nbsp;·&nbsp; {report.score}/5",
        unsafe_allow_html=True,
    )
    st.progress(report.score / 5)
    checks = [
        ("At least 15 characters", report.has_length),
        ("Uppercase letter", report.has_uppercase),
        ("Lowercase letter", report.has_lowercase),
        ("Number", report.has_number),
        ("Symbol", report.has_symbol),
    ]
    for label, met in checks:
        st.markdown(f"{'✅' if met else '❌'} {label}")


def _breach_panel(password: str, key: str) -> None:
    if st.button("Check online database", type="primary", key=key):
        with st.spinner("Querying Have I Been Pwned…"):
            result = asyncio.run(check_breach(password))
        if result.is_pwned:
            st.error(
                f"**Breached!** This password appeared in **{result.count:,}** "
                f"data breach{'es' if result.count != 1 else ''}. "
                "Generate a new one."
            )
        else:
            st.success("**Safe!** Not found in any known data breaches.")


# ── Page config ───────────────────────────────────────────────────────────

st.set_page_config(
    page_title="Personalized Password Generator",
    page_icon="\U0001f6e1\ufe0f",
    layout="centered",
)

st.markdown(
    f'<h1 style="display:flex;align-items:center;gap:10px">'
    f"{ICON_SHIELD} Personalized Password Generator</h1>",
    unsafe_allow_html=True,
)
st.caption(
    "Create strong, memorable passwords tailored to you.  \n"
    "Nothing you enter is stored. Breach checks only send the first "
    "5 characters of the password's SHA-1 hash "
    "([k-anonymity](https://en.wikipedia.org/wiki/K-anonymity))."
)

tab_generate, tab_check = st.tabs(["Generate Password", "Check Password"])

# ── Generate tab ───────────────────────────────────────────────────────────

with tab_generate:
    _heading(ICON_USER, "Personal details")
    col1, col2 = st.columns(2)
    with col1:
        first_name = st.text_input("First Name", key="first_name")
    with col2:
        last_name = st.text_input("Last Name", key="last_name")
    dob = st.date_input(
        "Date of Birth",
        value=None,
        min_value=date(1900, 1, 1),
        max_value=date.today(),
        key="dob",
    )

    st.markdown("**Security questions:** answer at least two.")
    answers = []
    for i in range(SECURITY_SLOTS):
        q_col, a_col = st.columns(2)
        with q_col:
            question = st.selectbox(
                f"Question {i + 1}",
                [""] + SECURITY_QUESTIONS,
                format_func=lambda q, n=i + 1: q or f"Select question {n}…",
                key=f"q{i}",
            )
        with a_col:
            answer = st.text_input(f"Answer {i + 1}", key=f"a{i}")
        answers.append(QuestionAnswer(question, answer))

    if st.button("Generate My Password", type="primary", key="generate"):
        profile = UserProfile(
            first_name=first_name,
            last_name=last_name,
            dob=dob or "",
            security_answers=answers,
        )
        try:
            profile.validate()
        except ProfileError as exc:
            st.error(str(exc))
        else:
            st.session_state["profile"] = profile
            st.session_state["generated"] = synthesize(profile)

    if "profile" in st.session_state:
        if st.button("Regenerate", key="regenerate"):
            st.session_state["generated"] = synthesize(st.session_state["profile"])

    generated = st.session_state.get("generated")
    if generated:
        st.code(generated, language=None)
        _strength_panel(generated)
        _breach_panel(generated, key="check_generated")

# ── Check tab ──────────────────────────────────────────────────────────────

with tab_check:
    _heading(ICON_SEARCH, "Analyse a password")
    password = st.text_input(
        "Password",
        placeholder="Enter a password…",
        autocomplete="off",
        key="password",
    )
    if password:
        _strength_panel(password)
        _breach_panel(password, key="check_password")
