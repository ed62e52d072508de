"""Participant Feedback Generator - Streamlit app.

Upload a teamwork-competency survey CSV (or load the sample data) and generate
a personalised profile per participant: radar chart against the team
average, factor summaries, satisfaction and team agreement label.
"""

import logging

import streamlit as st
import streamlit.components.v1 as components
from dotenv import load_dotenv

load_dotenv()

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

from lib_feedback.charts import build_radar_figure
from lib_feedback.csv_parser import decode_upload
from lib_feedback.engine.profile import ParticipantProfile
from lib_feedback.researcher_config import ResearcherConfig, load_researcher_config
from lib_feedback.sample_data import CSV_TEMPLATE
from lib_feedback.session import PRINT_SETTLE_DELAY_MS, FeedbackSession


# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------
st.set_page_config(page_title="Participant Feedback Generator", page_icon="📝", layout="centered")

_PRINT_CSS = """
<style>
@media print {
  header, footer, [data-testid="stSidebar"], [data-testid="stToolbar"] { display: none !important; }
  .page-break { page-break-after: always; break-after: page; }
}
</style>
"""


# ---------------------------------------------------------------------------
# Session-state helpers
# ---------------------------------------------------------------------------
def _get_session() -> FeedbackSession:
    if "feedback_session" not in st.session_state:
        st.session_state.feedback_session = FeedbackSession(config=load_researcher_config())
    session: FeedbackSession = st.session_state.feedback_session
    return session


def _set_session(session: FeedbackSession) -> None:
    st.session_state.feedback_session = session


def _trigger_print(delay_ms: int = 0) -> None:
    """Open the browser print dialog once the page has rendered."""
    components.html(
        f"<script>setTimeout(() => window.parent.print(), {delay_ms});</script>",
        height=0,
    )


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------
def render_profile(profile: ParticipantProfile) -> None:
    st.caption("Collaborative Problem Solving Study")
    st.header(profile.display_name)
    st.write("Thank you for your valuable contribution to our research!")

    icon = "✅" if profile.is_high_agreement else "🔀"
    banner = f"**Team: {profile.team}** | {icon} {profile.team_label}"
    if profile.is_high_agreement:
        st.success(banner)
    else:
        st.warning(banner)

    st.plotly_chart(build_radar_figure(profile), use_container_width=True, key=f"radar_{profile.participant_id}")
    st.caption("Your responses compared to your team's average (Scale: 1–4)")

    cols = st.columns(len(profile.factors))
    for col, factor in zip(cols, profile.factors):
        with col:
            st.metric(
                f"{factor.factor} ({factor.components})",
                f"{factor.participant_score:.2f}",
                delta=f"Team: {factor.team_score:.2f}",
                delta_color="off",
            )

    st.subheader("❤️ Your Satisfaction with Team Collaboration")
    st.write("How you rated your experience working with your team")
    st.progress(profile.satisfaction_percent / 100, text=f"{profile.satisfaction:.1f} / 5")

    st.subheader("ℹ️ Understanding Your Competencies")
    for comp in profile.competencies:
        st.markdown(
            f"**{comp.label}** ({comp.short}) — You: **{comp.participant_value:.1f}** | "
            f"Team: **{comp.team_average:.1f}**"
        )
        st.caption(comp.description)

    st.divider()
    if profile.contact_lines:
        st.markdown("**Contact Information**")
        for line in profile.contact_lines:
            st.markdown(line)
    st.caption(profile.disclaimer)
    st.markdown('<div class="page-break"></div>', unsafe_allow_html=True)


def render_settings(session: FeedbackSession) -> None:
    with st.expander("⚙️ Researcher Contact Settings"):
        with st.form("researcher_settings"):
            c1, c2 = st.columns(2)
            with c1:
                researcher_name = st.text_input("Researcher Name", value=session.config.researcher_name)
                pi_name = st.text_input("Principal Investigator Name", value=session.config.pi_name)
            with c2:
                researcher_email = st.text_input("Researcher Email", value=session.config.researcher_email)
                pi_email = st.text_input("PI Email", value=session.config.pi_email)
            if st.form_submit_button("Save", use_container_width=True):
                session.config = ResearcherConfig(
                    researcher_name=researcher_name.strip(),
                    researcher_email=researcher_email.strip(),
                    pi_name=pi_name.strip(),
                    pi_email=pi_email.strip(),
                )
                st.success("Settings updated for this session.")


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------
st.markdown(_PRINT_CSS, unsafe_allow_html=True)
st.title("Participant Feedback Generator")
st.caption("Generate personalized teamwork competency profiles")

session = _get_session()

if not session.has_data:
    # --- Upload / sample data screen ---
    st.subheader("Upload Participant Data")
    uploaded = st.file_uploader(
        "Choose CSV File", type=["csv"], key=f"upload_{st.session_state.get('upload_generation', 0)}"
    )
    if uploaded is not None:
        try:
            text = decode_upload(uploaded.getvalue())
        except ValueError as exc:
            logger.warning("Upload rejected: %s", exc)
            st.error(str(exc))
        else:
            loaded = FeedbackSession.from_csv(text, config=session.config)
            if loaded.has_data:
                _set_session(loaded)
                st.rerun()
            st.warning("No participant rows found in the uploaded file.")

    if st.button("Try with sample data"):
        _set_session(FeedbackSession.from_sample_data(config=session.config))
        st.rerun()

    st.markdown("**Expected CSV columns:**")
    st.code(CSV_TEMPLATE, language="text")
    st.stop()

render_settings(session)

# --- Participant list ---
st.subheader(f"Participants ({len(session.participants)})")
a1, a2 = st.columns(2)
with a1:
    if st.button("🖨️ Print All Profiles", use_container_width=True):
        session.start_batch_print()
with a2:
    if st.button("Upload New File", use_container_width=True):
        _set_session(session.reset())
        # fresh uploader widget, otherwise the previous file is re-read
        st.session_state.upload_generation = st.session_state.get("upload_generation", 0) + 1
        st.rerun()

grid = st.columns(4)
for idx, p in enumerate(session.participants):
    with grid[idx % 4]:
        selected = session.selected_index == idx
        if st.button(
            f"{'✅ ' if selected else ''}{p.display_name}\n\n{p.team}",
            key=f"participant_{idx}",
            use_container_width=True,
        ):
            session.toggle_selection(idx)
            st.rerun()

st.divider()

if session.batch_print_mode:
    # --- Batch print view ---
    st.caption("Rendering all profiles for printing…")
    for profile in session.profiles():
        render_profile(profile)
    _trigger_print(PRINT_SETTLE_DELAY_MS)
    session.finish_batch_print()
elif session.selected_participant is not None:
    # --- Single profile view ---
    if st.button("📄 Print / Save PDF"):
        _trigger_print()
    render_profile(session.profile_for(session.selected_participant))
