"""
Career readiness dashboard – Streamlit frontend.
No business logic in layout; scoring, merging and persistence live in the services.
"""

import asyncio
from typing import Awaitable, List, TypeVar

import streamlit as st

from career_readiness.config import (
    DEFAULT_MARKET_LOCATION,
    OPENAI_API_KEY,
    PROFILE_STORE_PATH,
)
from career_readiness.errors import CareerReadinessError
from career_readiness.roles import find_role, role_titles
from career_readiness.schemas.insights import ChatMessage
from career_readiness.schemas.job import JobOpening, RequiredSkill
from career_readiness.schemas.profile import UserProfile
from career_readiness.schemas.results import GapStatus
from career_readiness.schemas.roadmap import RoadmapStep
from career_readiness.schemas.skill import ProficiencyLevel
from career_readiness.scoring import (
    TASK_KEYS,
    analyze_gaps,
    calculate_job_match,
    day_progress,
    global_progress,
    score_profile,
    top_priority_gap,
)
from career_readiness.scoring.roadmap_progress import is_task_complete
from career_readiness.services import (
    AnalysisService,
    JsonFileStore,
    ProfileRepository,
    extract_resume_text,
    fetch_public_repos,
    get_analysis_service,
    validate_resume_content,
)

T = TypeVar("T")

GAP_BADGES = {
    GapStatus.STRONG: "🟢 Strong",
    GapStatus.PARTIAL: "🟡 Partial",
    GapStatus.MISSING: "🔴 Missing",
}
TASK_LABELS = {
    "learn": "Learn",
    "practice": "Practice",
    "build": "Build",
    "review": "Review",
}


def _run_async(coro: Awaitable[T]) -> T:
    """Run one coroutine on a fresh event loop (Streamlit reruns are synchronous)."""
    loop = asyncio.new_event_loop()
    asyncio.set_event_loop(loop)
    try:
        return loop.run_until_complete(coro)
    finally:
        loop.close()


@st.cache_resource
def _repository() -> ProfileRepository:
    return ProfileRepository(JsonFileStore(PROFILE_STORE_PATH))


def _service() -> AnalysisService:
    """Fresh service per action; the OpenAI client must not outlive its event loop."""
    return get_analysis_service()


def _profile_summary(profile: UserProfile) -> str:
    skills = ", ".join(f"{s.name} ({s.level.value})" for s in profile.current_skills) or "none yet"
    return (
        f"Name: {profile.name}. Target role: {profile.target_role}. "
        f"Readiness score: {profile.readiness_score}. Skills: {skills}."
    )


def _render_sign_in(repo: ProfileRepository) -> None:
    st.subheader("Sign in")
    name = st.text_input("Name", key="signin_name")
    email = st.text_input("Email", key="signin_email")
    role = st.selectbox("Target role", options=role_titles(), key="signin_role")
    if st.button("Start", type="primary", key="signin_btn"):
        if not name.strip() or not email.strip():
            st.error("Please enter your name and email.")
            return
        repo.create(name.strip(), email.strip(), target_role=role)
        st.rerun()


def _render_evidence(repo: ProfileRepository, profile: UserProfile) -> None:
    service = _service()
    st.subheader("Evidence")
    tab_resume, tab_github, tab_linkedin = st.tabs(["Resume", "GitHub", "LinkedIn"])

    with tab_resume:
        uploaded = st.file_uploader("Upload resume", type=["pdf", "docx", "txt"], key="resume_file")
        pasted = st.text_area("…or paste resume text", height=180, key="resume_text")
        if st.button("Analyze resume", key="resume_btn"):
            text = pasted
            if uploaded is not None:
                text = extract_resume_text(uploaded.getvalue(), uploaded.name) or ""
            try:
                validate_resume_content(text)
                with st.spinner("Extracting skills…"):
                    analysis = _run_async(service.extract_skills_from_resume(text))
                repo.apply_evidence(analysis.skills, analysis.projects)
                st.success(f"Found {len(analysis.skills)} skills · level: {analysis.level}")
            except CareerReadinessError as e:
                st.error(str(e))

    with tab_github:
        username = st.text_input("GitHub username", value=profile.github_user or "", key="github_user")
        if st.button("Sync GitHub", key="github_btn"):
            try:
                with st.spinner("Fetching repositories…"):
                    repos = _run_async(fetch_public_repos(username))
                    result = _run_async(service.analyze_github_repos(repos))
                repo.apply_evidence(result.skills, result.projects)
                repo.mutate(lambda p: p.model_copy(update={"github_user": username.strip()}))
                st.success(f"Synced {len(result.skills)} skills from {len(repos)} repositories")
            except CareerReadinessError as e:
                st.error(str(e))

    with tab_linkedin:
        linkedin_text = st.text_area("Paste your LinkedIn profile text", height=180, key="linkedin_text")
        if st.button("Analyze LinkedIn", key="linkedin_btn"):
            if not linkedin_text.strip():
                st.error("Please paste your LinkedIn profile text.")
            else:
                try:
                    with st.spinner("Analyzing profile…"):
                        result = _run_async(service.analyze_linkedin_profile(linkedin_text))
                    repo.apply_evidence(result.skills, result.projects)
                    st.success(f"Synced {len(result.skills)} skills from LinkedIn")
                except CareerReadinessError as e:
                    st.error(str(e))


def _render_score(repo: ProfileRepository, profile: UserProfile) -> None:
    role = find_role(profile.target_role)
    breakdown = score_profile(profile, role)
    if breakdown.total != profile.readiness_score or breakdown.interview_readiness != profile.interview_readiness:
        profile = repo.record_score(breakdown)

    st.subheader(f"Readiness for {role.title}")
    c1, c2, c3, c4, c5 = st.columns(5)
    c1.metric("Readiness", f"{breakdown.total}%")
    c2.metric("Interview readiness", f"{breakdown.interview_readiness}%")
    c3.metric("Skill mastery", f"{breakdown.skill_points}/70")
    c4.metric("Evidence", f"{breakdown.evidence_points}/20")
    c5.metric("Milestones", f"{breakdown.milestone_points}/10")
    if len(profile.history) > 1:
        st.line_chart([{"date": h.date, "score": h.score} for h in profile.history], x="date", y="score")

    gaps = analyze_gaps(role.requirements, profile.current_skills)
    priority = top_priority_gap(gaps)
    if priority is not None:
        st.warning(f"Priority: learn **{priority.skill_name}** (Critical, currently missing).")
    st.table(
        [
            {
                "Skill": g.skill_name,
                "Status": GAP_BADGES[g.status],
                "Current": g.current_level.value if g.current_level else "—",
                "Required": g.required_level.value,
                "Priority": g.priority.value,
            }
            for g in gaps
        ]
    )


def _render_roadmap(repo: ProfileRepository, profile: UserProfile) -> None:
    st.subheader("Daily roadmap")
    steps: List[RoadmapStep] = repo.load_roadmap(profile.target_role) or []
    label = "Regenerate roadmap" if steps else "Generate roadmap"
    if st.button(label, key="roadmap_btn"):
        try:
            with st.spinner("Planning your roadmap…"):
                steps = _run_async(_service().generate_roadmap(profile.current_skills, profile.target_role))
            repo.save_roadmap(profile.target_role, steps)
        except CareerReadinessError as e:
            st.error(str(e))
    if not steps:
        st.info("Generate a roadmap to track daily tasks.")
        return

    st.progress(global_progress(profile.completed_resources, len(steps)) / 100)
    for step in steps:
        done = day_progress(profile.completed_resources, step.day)
        with st.expander(f"Day {step.day} · {step.phase.value} · {step.primary_goal} ({done:.0f}%)"):
            texts = {
                "learn": step.learning_task,
                "practice": step.practice_task,
                "build": step.building_task,
                "review": step.review_task,
            }
            for task in TASK_KEYS:
                checked = is_task_complete(profile.completed_resources, step.day, task)
                new_value = st.checkbox(
                    f"{TASK_LABELS[task]}: {texts[task]}",
                    value=checked,
                    key=f"task_{step.day}_{task}",
                )
                if new_value != checked:
                    repo.toggle_task(step.day, task)
                    st.rerun()
            st.caption(f"Output: {step.expected_output} · {step.time_estimate}")
            if step.milestone:
                st.caption(f"Milestone: {step.milestone}")
            if st.button("Make this day harder", key=f"regen_{step.day}"):
                try:
                    new_step = _run_async(_service().regenerate_step(step, profile.target_role))
                except CareerReadinessError as e:
                    st.error(str(e))
                else:
                    repo.save_roadmap(
                        profile.target_role, [new_step if s.day == step.day else s for s in steps]
                    )
                    st.rerun()


def _render_market(profile: UserProfile) -> None:
    st.subheader("Market pulse")
    location = st.text_input("Location", value=DEFAULT_MARKET_LOCATION, key="market_location")
    if st.button("Fetch market pulse", key="market_btn"):
        try:
            with st.spinner("Reading the market…"):
                pulse = _run_async(_service().fetch_live_market_pulse(profile.target_role, location))
        except CareerReadinessError as e:
            st.error(str(e))
            return
        st.markdown(f"**Salary range:** {pulse.salary_range}")
        st.markdown(f"**Outlook:** {pulse.market_outlook}")
        if pulse.hot_skills:
            st.markdown(" ".join(f"`{s}`" for s in pulse.hot_skills))
        for trend in pulse.emerging_trends:
            st.markdown(f"- {trend}")


def _render_application_kit(repo: ProfileRepository, profile: UserProfile) -> None:
    st.subheader("Application kit")
    col1, col2 = st.columns(2)
    with col1:
        job_title = st.text_input("Job title", placeholder="e.g. Frontend Intern", key="kit_title")
    with col2:
        company = st.text_input("Company", key="kit_company")
    required = st.text_input("Required skills (comma separated)", key="kit_skills")
    if not job_title.strip() or not company.strip():
        st.info("Enter a job title and company to get a match, strategy and cover letter.")
        return

    opening = JobOpening(
        id=f"{company.strip()}-{job_title.strip()}".lower(),
        title=job_title.strip(),
        company=company.strip(),
        required_skills=[
            RequiredSkill(name=s.strip(), min_level=ProficiencyLevel.INTERMEDIATE)
            for s in required.split(",")
            if s.strip()
        ],
    )
    if opening.required_skills:
        st.metric("Skill match", f"{calculate_job_match(opening, profile.current_skills)}%")

    skill_names = [s.name for s in profile.current_skills]
    b1, b2, b3 = st.columns(3)
    try:
        if b1.button("Winning strategy", key="kit_strategy"):
            st.markdown(_run_async(_service().get_winning_strategy(opening.title, opening.company, skill_names)))
        if b2.button("Cover letter", key="kit_letter"):
            letter = _run_async(
                _service().generate_cover_letter(_profile_summary(profile), opening.title, opening.company)
            )
            st.text_area("Cover letter", value=letter, height=260, key="kit_letter_text")
    except CareerReadinessError as e:
        st.error(str(e))
    if b3.button("Mark as applied", key="kit_applied"):
        repo.record_application(opening.id)
        st.success(f"Tracked application to {opening.company}")
    if profile.applications:
        st.caption(f"Applications tracked: {len(profile.applications)}")


def ask_mentor(
    service: AnalysisService, history: List[ChatMessage], prompt: str, profile_summary: str
) -> List[ChatMessage]:
    """New chat history with the question and its answer; ``history`` is left untouched on failure."""
    pending = history + [ChatMessage(role="user", text=prompt)]
    reply = _run_async(service.get_mentor_advice(pending, profile_summary))
    return pending + [ChatMessage(role="model", text=reply)]


def _render_mentor(profile: UserProfile) -> None:
    st.subheader("Mentor")
    if "chat" not in st.session_state:
        st.session_state["chat"] = []
    history: List[ChatMessage] = st.session_state["chat"]
    for msg in history:
        with st.chat_message("user" if msg.role == "user" else "assistant"):
            st.markdown(msg.text)
    prompt = st.chat_input("Ask your mentor")
    if prompt:
        try:
            st.session_state["chat"] = ask_mentor(_service(), history, prompt, _profile_summary(profile))
        except CareerReadinessError as e:
            st.error(str(e))
            return
        st.rerun()


def render_layout() -> None:
    """Streamlit page layout; every mutation goes through ProfileRepository."""
    st.set_page_config(page_title="Career Readiness", layout="wide")
    st.title("Career Readiness")
    st.markdown("*Measure how ready you are for your target role and what to learn next.*")
    if not OPENAI_API_KEY:
        st.caption("OPENAI_API_KEY is not set; using the local rule-based engine.")
    st.divider()

    repo = _repository()
    profile = repo.load()
    if profile is None:
        _render_sign_in(repo)
        return

    with st.sidebar:
        st.markdown(f"**{profile.name}**")
        titles = role_titles()
        current = find_role(profile.target_role).title
        role = st.selectbox("Target role", options=titles, index=titles.index(current), key="target_role")
        if role != profile.target_role:
            profile = repo.set_target_role(role)
        if st.button("Log out", key="logout_btn"):
            repo.clear()
            st.session_state.pop("chat", None)
            st.rerun()

    _render_evidence(repo, profile)
    profile = repo.load() or profile
    st.divider()
    _render_score(repo, profile)
    st.divider()
    _render_roadmap(repo, profile)
    st.divider()
    _render_market(profile)
    st.divider()
    _render_application_kit(repo, profile)
    st.divider()
    _render_mentor(profile)


if __name__ == "__main__":
    render_layout()
