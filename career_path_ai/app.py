"""
CareerPath AI – Streamlit frontend.
Three steps (Upload, Refine, Plan); transitions and AI calls live in the wizard.
"""

from typing import List

import streamlit as st

from career_path_ai.agents.gateway import CareerGateway
from career_path_ai.config import (
    ACCEPTED_MIME_TYPES,
    AVAILABLE_COUNTRIES,
    DEFAULT_COUNTRY,
    LANGUAGE_PROFICIENCIES,
    OPENAI_API_KEY,
    RESUME_SCORE_MAX,
)
from career_path_ai.errors import InputValidationError, WizardBusyError, WizardStepError
from career_path_ai.schemas.advice import CareerAdvice, JobListing
from career_path_ai.schemas.profile import UserProfile
from career_path_ai.services.export_service import export_jobs_csv
from career_path_ai.services.profile_editor import (
    append_item,
    remove_item,
    update_field,
    update_item,
    update_link,
)
from career_path_ai.utils.helpers import run_async
from career_path_ai.wizard import STEP_LABELS, CareerWizard, WizardStep

# Extensions for the file picker, derived from the accepted MIME types
UPLOAD_EXTENSIONS = sorted(
    {label.lower() for label in ACCEPTED_MIME_TYPES.values()}
    | {mime.split("/")[-1] for mime in ACCEPTED_MIME_TYPES}
)
UPLOAD_HELP = ", ".join(ACCEPTED_MIME_TYPES.values()) + " supported"

LINK_LABELS = {
    "linkedin": "LinkedIn URL",
    "portfolio": "Portfolio URL",
    "github": "GitHub URL",
    "other": "Other Link (Optional)",
}


def _get_wizard() -> CareerWizard:
    """One wizard (and session) per browser session."""
    if "wizard" not in st.session_state:
        st.session_state["wizard"] = CareerWizard(CareerGateway())
    return st.session_state["wizard"]


# ----- Refine draft: edits stay local until "Analyze & Find Jobs" -----

def _draft(wizard: CareerWizard) -> UserProfile:
    if "draft_profile" not in st.session_state:
        st.session_state["draft_profile"] = wizard.session.profile
        st.session_state["draft_version"] = st.session_state.get("draft_version", 0) + 1
    return st.session_state["draft_profile"]


def _set_draft(profile: UserProfile, structural: bool = False) -> None:
    """Store the draft; structural changes (add/remove) re-key every widget."""
    st.session_state["draft_profile"] = profile
    if structural:
        st.session_state["draft_version"] = st.session_state.get("draft_version", 0) + 1


def _clear_draft() -> None:
    st.session_state.pop("draft_profile", None)


def _key(*parts) -> str:
    version = st.session_state.get("draft_version", 0)
    return "refine_" + "_".join(str(p) for p in parts) + f"_v{version}"


def _text(label: str, value: str, key: str, area: bool = False) -> str:
    if area:
        return st.text_area(label, value=value, key=key, height=100)
    return st.text_input(label, value=value, key=key)


# ----- Layout pieces -----

def _render_progress(step: WizardStep) -> None:
    parts = []
    for s, label in STEP_LABELS.items():
        parts.append(f"**{label}**" if s == step else label)
    st.markdown(" / ".join(parts))


def _render_notice(wizard: CareerWizard) -> None:
    if wizard.session.notice:
        st.error(wizard.session.notice)


def _render_upload(wizard: CareerWizard) -> None:
    session = wizard.session
    held = session.criteria
    st.header("Getting Started")
    st.markdown("Upload your resume to begin the career analysis.")

    uploaded = st.file_uploader(
        "Resume",
        type=UPLOAD_EXTENSIONS,
        key="upload_file",
        help=UPLOAD_HELP,
    )
    if uploaded is None and session.has_uploaded_file:
        st.caption("Resume uploaded · Using previously uploaded file")

    col1, col2 = st.columns([1, 2])
    with col1:
        country_default = held.target_country if held else DEFAULT_COUNTRY
        country = st.selectbox(
            "Target Country",
            options=AVAILABLE_COUNTRIES,
            index=AVAILABLE_COUNTRIES.index(country_default) if country_default in AVAILABLE_COUNTRIES else 0,
            key="upload_country",
        )
    with col2:
        job_title = st.text_input(
            "Target Job Title",
            value=held.target_job_title if held else "",
            placeholder="e.g. Product Manager",
            key="upload_job_title",
        )

    if st.session_state.get("upload_error"):
        st.warning(st.session_state["upload_error"])

    if st.button("Analyze Resume", type="primary", disabled=session.busy, key="upload_submit"):
        st.session_state["upload_error"] = None
        try:
            with st.spinner("Extracting resume data…"):
                moved = run_async(
                    wizard.submit_upload(
                        country,
                        job_title,
                        file_bytes=uploaded.getvalue() if uploaded else None,
                        mime_type=uploaded.type if uploaded else None,
                    )
                )
        except (InputValidationError, WizardBusyError, WizardStepError) as e:
            st.session_state["upload_error"] = str(e)
            st.rerun()
        if moved:
            _clear_draft()
        st.rerun()


def _render_list_section(
    draft: UserProfile,
    list_name: str,
    title: str,
    fields: List[tuple],
) -> UserProfile:
    """Editable object list: one bordered block per item, add and remove buttons."""
    head, add = st.columns([6, 1])
    head.subheader(title)
    if add.button("＋", key=_key(list_name, "add")):
        _set_draft(append_item(draft, list_name), structural=True)
        st.rerun()

    for i, item in enumerate(getattr(draft, list_name)):
        with st.container(border=True):
            changes = {}
            for field_name, label, area in fields:
                current = getattr(item, field_name)
                value = _text(label, current, _key(list_name, i, field_name), area=area)
                if value != current:
                    changes[field_name] = value
            if changes:
                draft = update_item(draft, list_name, i, changes)
            if st.button("Remove", key=_key(list_name, i, "remove")):
                _set_draft(remove_item(draft, list_name, i), structural=True)
                st.rerun()
    return draft


def _render_refine(wizard: CareerWizard) -> None:
    draft = _draft(wizard)
    st.header("Refine Profile")
    st.markdown("Verify extracted data and add missing details.")

    st.subheader("Personal")
    col1, col2 = st.columns(2)
    with col1:
        for field_name, label in (("full_name", "Full Name"), ("email", "Email"), ("phone", "Phone")):
            current = getattr(draft, field_name)
            value = _text(label, current, _key(field_name))
            if value != current:
                draft = update_field(draft, field_name, value)
    with col2:
        for link_name, label in LINK_LABELS.items():
            current = getattr(draft.links, link_name)
            value = _text(label, current, _key("links", link_name))
            if value != current:
                draft = update_link(draft, link_name, value)

    summary = _text("Summary", draft.summary, _key("summary"), area=True)
    if summary != draft.summary:
        draft = update_field(draft, "summary", summary)

    skills_text = _text("Skills (comma separated)", ", ".join(draft.skills), _key("skills"), area=True)
    if skills_text != ", ".join(draft.skills):
        draft = update_field(draft, "skills", [s.strip() for s in skills_text.split(",") if s.strip()])

    draft = _render_list_section(
        draft,
        "experience",
        "Experience",
        [("role", "Role", False), ("company", "Company", False),
         ("duration", "Date Range", False), ("description", "Description", True)],
    )
    draft = _render_list_section(
        draft,
        "projects",
        "Projects",
        [("name", "Project Name", False), ("link", "Link (Optional)", False),
         ("description", "What did you build/achieve?", True)],
    )
    draft = _render_list_section(
        draft,
        "education",
        "Education",
        [("institution", "Institution", False), ("degree", "Degree", False), ("year", "Year", False)],
    )

    head, add = st.columns([6, 1])
    head.subheader("Certifications")
    if add.button("＋", key=_key("certifications", "add")):
        _set_draft(append_item(draft, "certifications"), structural=True)
        st.rerun()
    for i, cert in enumerate(draft.certifications):
        c_left, c_right = st.columns([6, 1])
        with c_left:
            value = _text("Certificate Name", cert, _key("certifications", i))
            if value != cert:
                draft = update_item(draft, "certifications", i, value)
        if c_right.button("Remove", key=_key("certifications", i, "remove")):
            _set_draft(remove_item(draft, "certifications", i), structural=True)
            st.rerun()

    head, add = st.columns([6, 1])
    head.subheader("Languages")
    if add.button("＋", key=_key("languages", "add")):
        _set_draft(append_item(draft, "languages"), structural=True)
        st.rerun()
    for i, lang in enumerate(draft.languages):
        c_name, c_level, c_remove = st.columns([3, 2, 1])
        with c_name:
            name = _text("Language", lang.language, _key("languages", i, "language"))
        with c_level:
            level = st.selectbox(
                "Proficiency",
                options=LANGUAGE_PROFICIENCIES,
                index=LANGUAGE_PROFICIENCIES.index(lang.proficiency),
                key=_key("languages", i, "proficiency"),
            )
        if name != lang.language or level != lang.proficiency:
            draft = update_item(draft, "languages", i, {"language": name, "proficiency": level})
        if c_remove.button("Remove", key=_key("languages", i, "remove")):
            _set_draft(remove_item(draft, "languages", i), structural=True)
            st.rerun()

    _set_draft(draft)

    st.divider()
    back, nxt = st.columns(2)
    if back.button("Back", disabled=wizard.busy, key="refine_back"):
        wizard.go_back()
        _clear_draft()
        st.rerun()
    if nxt.button("Analyze & Find Jobs", type="primary", disabled=wizard.busy, key="refine_submit"):
        try:
            with st.spinner("Scoring your resume and searching live job listings…"):
                run_async(wizard.submit_profile(draft))
        except (InputValidationError, WizardBusyError, WizardStepError) as e:
            st.warning(str(e))
            return
        st.rerun()


def _render_job(job: JobListing) -> None:
    with st.container(border=True):
        col_a, col_b = st.columns([4, 1])
        with col_a:
            st.markdown(f"#### {job.title or 'Untitled'}")
            st.caption(f"**{job.company or 'N/A'}** · {job.location or 'N/A'} · {job.platform or 'N/A'}")
        with col_b:
            if job.match_score is not None:
                st.metric("Match", f"{job.match_score:g}%")
            if job.url:
                st.link_button("Open", url=job.url)


def _render_results(wizard: CareerWizard) -> None:
    advice: CareerAdvice = wizard.session.advice
    head, restart = st.columns([5, 1])
    with head:
        st.header("Career Plan")
        if advice.recommended_role_title:
            st.caption(f"Recommended role: {advice.recommended_role_title}")
    if restart.button("Start Over", key="results_restart"):
        wizard.restart()
        _clear_draft()
        st.rerun()

    score_col, critique_col = st.columns([1, 3])
    with score_col:
        st.metric("Resume Score", f"{advice.resume_score:g}/{RESUME_SCORE_MAX:g}")
    with critique_col:
        st.markdown("**Critique**")
        st.markdown(advice.resume_critique or "No critique available.")

    if advice.executive_summary:
        st.markdown("**Executive Summary**")
        st.markdown(advice.executive_summary)
    st.markdown("**How to improve**")
    st.markdown(advice.improvement_suggestion or "N/A")
    st.markdown("**Skill gaps**")
    st.markdown(advice.skill_gap_analysis or "N/A")

    st.divider()
    st.subheader("Live Opportunities")
    if not advice.jobs:
        st.info("No direct matches found right now.")
    else:
        for job in advice.jobs:
            _render_job(job)
        st.download_button(
            "Export to CSV",
            data=export_jobs_csv(advice.jobs),
            file_name="career_path_jobs.csv",
            mime="text/csv",
            key="export_csv",
        )

    if advice.grounding_urls:
        with st.expander("Sources"):
            for source in advice.grounding_urls:
                st.markdown(f"- [{source.title}]({source.uri})")

    st.divider()
    if st.button("Back", key="results_back"):
        wizard.go_back()
        st.rerun()


def render_layout() -> None:
    """Streamlit page layout; state transitions go through the wizard."""
    st.set_page_config(page_title="CareerPath AI", layout="centered")
    st.title("CareerPath AI")
    wizard = _get_wizard()
    _render_progress(wizard.step)
    st.divider()

    if not OPENAI_API_KEY:
        st.warning("OPENAI_API_KEY is not set. Add it to your .env file.")
    _render_notice(wizard)

    if wizard.step == WizardStep.UPLOAD:
        _render_upload(wizard)
    elif wizard.step == WizardStep.REFINE:
        _render_refine(wizard)
    elif wizard.step == WizardStep.RESULTS and wizard.session.advice is not None:
        _render_results(wizard)


if __name__ == "__main__":
    render_layout()
