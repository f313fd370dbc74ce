import streamlit as st

from resume_skills.config import load_settings
from resume_skills.models.profile import ResumeFile
from resume_skills.panel import ResumeSkillPanel
from resume_skills.utils.http_client import BackendClient
from resume_skills.utils.logger import configure_logging

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------
st.set_page_config(
    page_title="Resume Skill Panel",
    layout="wide",
    initial_sidebar_state="collapsed",
)

# ---------------------------------------------------------------------------
# CSS
# ---------------------------------------------------------------------------
st.markdown("""
<style>
#MainMenu {visibility: hidden;}
footer {visibility: hidden;}

:root {
    --deep-blue: #1B2A4A;
    --lavender: #EDE8F5;
    --slate: #5A6275;
    --green: #2e7d32;
    --amber: #b26a00;
    --red: #c62828;
}

.profile-meta { color: var(--slate); font-size: 0.85rem; }
.score-strong { color: var(--green); font-weight: 700; }
.score-fair { color: var(--amber); font-weight: 700; }
.score-weak { color: var(--red); font-weight: 700; }
.assessed-tag {
    display: inline-block; background: #e8f5e9; color: var(--green);
    padding: 2px 10px; border-radius: 12px; font-size: 0.82rem;
    margin: 2px 3px; border: 1px solid #a5d6a7;
}
</style>
""", unsafe_allow_html=True)

# ---------------------------------------------------------------------------
# Session state
# ---------------------------------------------------------------------------
settings = load_settings()
configure_logging(settings.log_level)

if "panel" not in st.session_state:
    client = BackendClient(base_url=settings.base_url, timeout=settings.timeout)
    st.session_state.panel = ResumeSkillPanel(client, difficulty=settings.difficulty)
if "uploader_key" not in st.session_state:
    st.session_state.uploader_key = 0
if "selection_sig" not in st.session_state:
    st.session_state.selection_sig = ()

panel: ResumeSkillPanel = st.session_state.panel


def _render_assessment_view(skill: str):
    """Minimal assessment collaborator: reports a score and weak areas for one skill."""
    with st.container(border=True):
        st.markdown(f"### Assessment: {skill}")
        st.caption("Record the outcome of the generated assessment for this skill.")
        with st.form(key=f"assessment_form_{skill}"):
            score = st.slider("Score (%)", min_value=0, max_value=100, value=50)
            weak_text = st.text_area(
                "Areas to improve (one per line)",
                placeholder="e.g. concurrency\nerror handling",
            )
            submitted = st.form_submit_button("Complete assessment", type="primary")
        if submitted:
            weak = [w.strip() for w in weak_text.split("\n") if w.strip()]
            panel.handle_assessment_complete(
                {"skill": skill, "score": score, "results": {"weak_skills": weak}}
            )
            st.rerun()
        if st.button("Close", key=f"close_assessment_{skill}"):
            panel.close_assessment()
            st.rerun()


# ---------------------------------------------------------------------------
# Header
# ---------------------------------------------------------------------------
st.title("Resume Skill Panel")
st.caption("Upload your resume (PDF or TXT) to extract technical skills using AI")

# ---------------------------------------------------------------------------
# Upload
# ---------------------------------------------------------------------------
uploaded_files = st.file_uploader(
    "Resume files",
    type=settings.accepted_types,
    accept_multiple_files=True,
    key=f"resume_upload_{st.session_state.uploader_key}",
)

selection_sig = tuple((f.name, f.size) for f in uploaded_files or [])
if selection_sig != st.session_state.selection_sig:
    st.session_state.selection_sig = selection_sig
    panel.select_files([
        ResumeFile(name=f.name, content=f.getvalue(), mime_type=f.type)
        for f in uploaded_files or []
    ])

if panel.files:
    st.caption(
        f"Selected {len(panel.files)} file(s): " + ", ".join(f.name for f in panel.files)
    )

col_extract, col_clear = st.columns([1, 1])
with col_extract:
    if st.button("Processing..." if panel.loading else "Extract Skills",
                 type="primary", disabled=panel.loading, use_container_width=True):
        with st.spinner("Analysing resumes..."):
            panel.upload()
        st.rerun()
with col_clear:
    if panel.profiles and st.button("Clear Results", use_container_width=True):
        panel.clear_results()
        st.session_state.uploader_key += 1
        st.session_state.selection_sig = ()
        st.rerun()

if panel.error:
    st.error(panel.error)

# ---------------------------------------------------------------------------
# Profiles
# ---------------------------------------------------------------------------
for idx, p in enumerate(panel.profiles):
    with st.container(border=True):
        st.markdown(f"#### {p.filename}")
        st.markdown(
            f'<div class="profile-meta">Extracted {p.skills_count} skills from '
            f'{p.text_length} characters &nbsp;|&nbsp; {p.display_time}</div>',
            unsafe_allow_html=True,
        )

        if not p.has_skills:
            st.info("No skills were found in this resume.")
            continue

        cols = st.columns(4)
        for i, skill in enumerate(p.skills):
            result = panel.assessment_for(skill)
            label = f"{skill} ({result.score}%)" if result else skill
            help_text = f"Assessed: {result.score}%" if result else "Click to assess this skill"
            with cols[i % 4]:
                if st.button(label, key=f"skill_{idx}_{i}", help=help_text,
                             disabled=panel.generating_assessment, use_container_width=True):
                    with st.spinner(f"Generating assessment for {skill}..."):
                        panel.generate_individual_skill_assessment(skill)
                    st.rerun()

        c1, c2 = st.columns(2)
        with c1:
            if st.button("Generate Skill Chart", key=f"chart_{idx}"):
                panel.generate_skill_scores(idx)
                st.rerun()
        with c2:
            if st.button("Start Assessment", key=f"start_{idx}",
                         disabled=panel.generating_assessment):
                with st.spinner("Generating assessment..."):
                    panel.start_profile_assessment(idx)
                st.rerun()

        if p.skill_scores:
            st.bar_chart({s.name: s.score for s in p.skill_scores})

# ---------------------------------------------------------------------------
# Assessment results summary
# ---------------------------------------------------------------------------
if panel.assessment_results:
    st.markdown("### Assessment Results")
    for skill, result in panel.assessment_results.items():
        c1, c2 = st.columns([1, 3])
        with c1:
            st.markdown(
                f'{skill} <span class="score-{result.band}">{result.score}%</span>',
                unsafe_allow_html=True,
            )
        with c2:
            st.progress(min(max(result.score, 0), 100) / 100, text=result.summary)

if panel.profiles:
    st.markdown("---")
    st.caption("Generate individual assessments for each extracted skill using AI")
    if st.button("Generating..." if panel.generating_assessment else "Generate All Skill Assessments",
                 disabled=panel.generating_assessment):
        with st.spinner("Generating assessments..."):
            panel.generate_assessment_for_all_skills()
        st.rerun()

# ---------------------------------------------------------------------------
# Assessment view
# ---------------------------------------------------------------------------
if panel.assessment_open:
    _render_assessment_view(panel.selected_skill)
