"""PassAudit -- Streamlit web interface."""

import streamlit as st

from passaudit import MASK, check_requirements, evaluate, score_breakdown, strength_label

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

ICON_STAR = _LUCIDE.format(s=18, paths=(
    '<path d="M12 2l3.09 6.26L22 9.27l-5 4.87 1.18 6.88L12 17.77'
    'l-6.18 3.25L7 14.14 2 9.27l6.91-1.01L12 2z"/>'
))

_REQUIREMENT_LABELS = {
    "length": "At least 12 characters",
    "uppercase": "Uppercase letter",
    "lowercase": "Lowercase letter",
    "numbers": "Number",
    "special": "Special character",
}

_PRIORITY_COLORS = {
    "critical": "#d32f2f",
    "high": "#f57c00",
    "medium": "#1976d2",
    "low": "#388e3c",
}

_STATUS_COLORS = {"good": "#388e3c", "warning": "#f57c00", "danger": "#d32f2f"}

_TIER_COLORS = {
    "strong": "#388e3c",
    "moderate": "#f57c00",
    "weak": "#f57c00",
    "very weak": "#d32f2f",
}

_RISK_COLORS = {"low": "#388e3c", "medium": "#f57c00", "high": "#d32f2f"}

# ── Page config ───────────────────────────────────────────────────────────

st.set_page_config(
    page_title="Security Posture Check",
    page_icon="\U0001f6e1️",
    layout="centered",
)

st.markdown(
    f'<h1 style="display:flex;align-items:center;gap:10px">'
    f'{ICON_SHIELD} Security Posture Check</h1>',
    unsafe_allow_html=True,
)
st.caption(
    "Scores your password and security habits locally.  \n"
    "Your password is **NEVER** sent anywhere."
)


def _reset():
    for key in ("result", "password", "reuse", "manager", "mfa"):
        st.session_state.pop(key, None)


# ── Form ──────────────────────────────────────────────────────────────────

if "result" not in st.session_state:
    password = st.text_input(
        "Password",
        type="password",
        placeholder="Enter a password…",
        autocomplete="off",
        key="password",
    )

    for name, met in check_requirements(password).items():
        mark = "✓" if met else "○"
        st.markdown(f"{mark} {_REQUIREMENT_LABELS[name]}")

    reuse = st.radio("Do you reuse this password?", ("yes", "no"), index=None,
                     horizontal=True, key="reuse")
    manager = st.radio("Do you use a password manager?", ("yes", "no"), index=None,
                       horizontal=True, key="manager")
    mfa = st.radio("Is MFA enabled?", ("yes", "no"), index=None,
                   horizontal=True, key="mfa")

    if st.button("Analyze Security Posture", type="primary"):
        if not password:
            st.error("Please enter a password")
            st.stop()
        try:
            result = evaluate(password, {
                "reuse": reuse, "passwordManager": manager, "mfa": mfa,
            })
        except ValueError as exc:
            st.error(str(exc))
            st.stop()

        st.session_state["result"] = result
        st.rerun()

# ── Results ───────────────────────────────────────────────────────────────

else:
    result = st.session_state["result"]
    profile = result.profile

    st.text_input("Password", value=MASK, disabled=True)

    score = profile.password_strength
    tier, message = strength_label(score)
    st.markdown(f"**Strength:** {score}/100")
    st.progress(score / 100)
    st.markdown(
        f"<span style='color:{_TIER_COLORS[tier]}'>{message}</span>",
        unsafe_allow_html=True,
    )

    st.markdown(
        f"**Risk level:** <span style='color:{_RISK_COLORS[result.risk_level]}'>"
        f"{result.risk_level.upper()}</span>",
        unsafe_allow_html=True,
    )

    for v in result.vulnerabilities:
        st.warning(v, icon="⚠️")

    st.subheader("Recommendations")
    for rec in result.recommendations:
        st.markdown(
            f'<p style="display:flex;gap:8px">'
            f'<span style="color:{_PRIORITY_COLORS[rec.priority]}">{ICON_STAR}</span>'
            f"<span>{rec.text}</span></p>",
            unsafe_allow_html=True,
        )

    st.subheader("Breakdown")
    for row in score_breakdown(profile):
        col1, col2 = st.columns(2)
        col1.markdown(row["label"])
        col2.markdown(
            f"<span style='color:{_STATUS_COLORS[row['status']]}'>{row['value']}</span>",
            unsafe_allow_html=True,
        )

    st.button("Start Over", on_click=_reset)
