"""
UI layer
Purpose: Streamlit-only glue. Renders widgets/tabs, collects user inputs, and delegates
all work to ServerActions and the interview controller. Keeps UI concerns (layout/state
widgets) separate from business logic so logic can be unit tested without Streamlit.
"""

import logging

import streamlit as st

from aatmai.actions import ActionResult, ServerActions
from aatmai.config import configure_logging, load_settings
from aatmai.content import ABOUT_PARAGRAPHS, RESUME_TIPS
from aatmai.controller import InterviewSessionController
from aatmai.errors import AatmaiError
from aatmai.models import DetailLevel, DifficultyLevel, Mood, ProjectType, ReportType
from aatmai.persistence.session_store import ClientStore, JsonFileStorage
from aatmai.quotes import random_quote
from aatmai.services.llm_openai import OpenAILLMClient
from aatmai.services.speech import PlayHTSpeechClient

logger = logging.getLogger(__name__)

# ---------------------------
# Page config
# ---------------------------
st.set_page_config(
    page_title="AatmAI - Mitra Guide",
    page_icon="🪷",
    layout="wide",
    initial_sidebar_state="expanded",
)

settings = load_settings()
configure_logging(settings.log_level)
store = ClientStore(JsonFileStorage(settings.state_file))

# ---------------------------
# UI constants
# ---------------------------
INTERVIEW_DOMAINS = [
    "Software Engineering - Frontend",
    "Software Engineering - Backend",
    "Data Science",
    "Product Management",
    "Digital Marketing",
    "General Behavioral Interview",
]
MOOD_LABELS = {
    Mood.JOYFUL: "😊 Joyful",
    Mood.CALM: "😌 Calm",
    Mood.NEUTRAL: "😐 Neutral",
    Mood.ANXIOUS: "😟 Anxious",
    Mood.SAD: "😢 Sad",
}
PROJECT_TYPES = [p.value for p in ProjectType]
DIFFICULTY_LEVELS = [d.value for d in DifficultyLevel]

# ---------------------------
# Session state init
# ---------------------------
st_session = st.session_state
st_session.setdefault("actions", None)
st_session.setdefault("interview", None)
st_session.setdefault("api_key", None)
st_session.setdefault("daily_quote", random_quote())
st_session.setdefault("results", {})
st_session.setdefault("audio", {})


# ---------------------------
# Helpers
# ---------------------------
def build_actions(api_key) -> ServerActions:
    """ServerActions for the given key; without a key every flow reports 'not configured'."""
    llm = None
    if api_key:
        try:
            llm = OpenAILLMClient(api_key=api_key)
        except AatmaiError as e:
            st.toast(str(e), icon="⚠️")
    speech = None
    if settings.playht_api_key and settings.playht_user_id:
        speech = PlayHTSpeechClient(
            settings.playht_api_key,
            settings.playht_user_id,
            voice=settings.playht_voice_id,
            endpoint=settings.tts_url,
            poll_delay=settings.tts_poll_delay,
        )
    return ServerActions(llm, settings=settings.llm_settings(), speech=speech)


def get_actions() -> ServerActions:
    return st_session.actions


def get_interview() -> InterviewSessionController:
    return st_session.interview


def remember(key: str, result: ActionResult) -> None:
    st_session.results[key] = result


def show_status(key: str) -> ActionResult | None:
    """Render the message/field errors of the last result stored under `key`."""
    result = st_session.results.get(key)
    if result is None:
        return None
    if result.is_error:
        st.error(result.message)
        for name, msg in result.fields.items():
            st.caption(f"**{name}**: {msg}")
    else:
        st.success(result.message)
    return result


def read_aloud(key: str, text: str) -> None:
    """Button that turns `text` into audio and plays it."""
    if st.button("🔊 Read aloud", key=f"speak_{key}"):
        with st.spinner("Preparing audio…"):
            st_session.audio[key] = get_actions().generate_speech({"text": text})
    reply = st_session.audio.get(key)
    if not reply:
        return
    if reply.get("audioUrl"):
        st.audio(reply["audioUrl"])
    else:
        st.toast(reply.get("error", "Speech failed."), icon="⚠️")
        st_session.audio.pop(key, None)


def reset_session():
    """Wipe per-session results; keeps the API key and saved client state."""
    st_session.results = {}
    st_session.audio = {}
    interview = get_interview()
    if interview:
        interview.reset()


# ---------------------------
# SIDEBAR: settings
# ---------------------------
with st.sidebar:
    st.markdown("# Settings")

    st.markdown("## OpenAI API Key")
    user_api_key = st.text_input(
        "Enter your API key",
        type="password",
        help="Overrides OPENAI_API_KEY for this session only. We do not store it.",
    )
    api_key = user_api_key or settings.openai_api_key
    if st_session.actions is None or api_key != st_session.api_key:
        st_session.actions = build_actions(api_key)
        st_session.interview = InterviewSessionController(st_session.actions)
        st_session.api_key = api_key
    if not api_key:
        st.warning("No API key set. AI features will ask you to configure one.")
    st.caption(f"Model: **{settings.model}**")
    st.divider()

    st.markdown("## Your name")
    name = store.user_name()
    if name:
        st.write(f"Namaste, **{name}**!")
        if st.button("Change name"):
            store.clear_user_name()
            st.rerun()
    else:
        new_name = st.text_input("What should we call you?")
        if st.button("Save name"):
            try:
                store.set_user_name(new_name)
                st.rerun()
            except AatmaiError as e:
                st.error(str(e))
    st.divider()

    st.markdown("## Session Controls")
    st.button("Reset session", type="primary", on_click=reset_session)

    interview = get_interview()
    st.metric("Interview tokens (in)", f"{interview.tokens_in:,}")
    st.metric("Interview tokens (out)", f"{interview.tokens_out:,}")

# ---------------------------
# Header
# ---------------------------
st.title("AatmAI - Mitra Guide")
quote = st_session.daily_quote
qcol, bcol = st.columns([5, 1])
with qcol:
    st.markdown(f"> {quote.text}\n>\n> — *{quote.author}*")
with bcol:
    if store.is_saved(quote.id):
        if st.button("Unsave quote"):
            store.remove_quote(quote.id)
            st.rerun()
    elif st.button("Save quote"):
        store.save_quote(quote.id)
        st.rerun()
    if st.button("New quote"):
        st_session.daily_quote = random_quote()
        st.rerun()

# ---------------------------
# Main tabs
# ---------------------------
(
    guidance_tab,
    stories_tab,
    students_tab,
    interview_tab,
    mood_tab,
    quotes_tab,
    about_tab,
) = st.tabs(
    ["Guidance", "Stories", "Student Tools", "Interview Prep", "Mood", "Saved Quotes", "About"]
)

with guidance_tab:
    st.subheader("Personalized guidance")
    st.caption("Share what is on your mind. AatmAI listens without judgement.")

    history = store.chat_history()
    transcript = st.container(height=420, border=True)
    with transcript:
        for msg in history:
            role = "user" if msg.role.value == "user" else "assistant"
            with st.chat_message(role):
                st.markdown(msg.content)

    with st.form("guidance_form"):
        profile = st.text_input("About you (optional)")
        mood = st.text_input("How are you feeling? (optional)")
        issue = st.text_area("What would you like to talk about?", height=120)
        submitted = st.form_submit_button("Ask AatmAI", type="primary")
    if submitted:
        with st.spinner("AatmAI is thinking…"):
            result = get_actions().handle_generate_guidance(
                {
                    "profile": profile,
                    "mood": mood,
                    "issue": issue,
                    "conversationHistory": history,
                }
            )
        remember("guidance", result)
        if not result.is_error:
            store.save_chat_history(result.history)
            st.rerun()

    result = show_status("guidance")
    if result and not result.is_error and result.data:
        with st.expander("Why this guidance?"):
            st.write(result.data.reasoning)
        read_aloud("guidance", result.data.guidance)

    if history and st.button("Clear conversation"):
        store.clear_chat_history()
        st_session.results.pop("guidance", None)
        st.rerun()

with stories_tab:
    st.subheader("Inspiring stories")
    with st.form("stories_form"):
        user_profile = st.text_input("About you (optional)")
        challenges = st.text_area("What challenges are you facing?", height=120)
        submitted = st.form_submit_button("Find stories", type="primary")
    if submitted:
        with st.spinner("Curating stories…"):
            remember(
                "stories",
                get_actions().handle_curate_stories(
                    {"userProfile": user_profile, "currentChallenges": challenges}
                ),
            )
    result = show_status("stories")
    if result and not result.is_error:
        for i, story in enumerate(result.data.stories, 1):
            with st.container(border=True):
                st.markdown(story)
                read_aloud(f"story_{i}", story)

with students_tab:
    notes_tab, ideas_tab, report_tab, roadmap_tab, resume_tab = st.tabs(
        ["Notes", "Project Ideas", "Project Report", "Roadmap", "Resume Tips"]
    )

    with notes_tab:
        with st.form("notes_form"):
            topic = st.text_input("Topic")
            detail = st.radio(
                "Detail level",
                [d.value for d in DetailLevel],
                horizontal=True,
            )
            submitted = st.form_submit_button("Generate notes", type="primary")
        if submitted:
            with st.spinner("Writing notes…"):
                remember(
                    "notes",
                    get_actions().handle_generate_student_notes(
                        {"topic": topic, "detailLevel": detail}
                    ),
                )
        result = show_status("notes")
        if result and not result.is_error:
            st.markdown(result.data.notes)

    with ideas_tab:
        with st.form("ideas_form"):
            field_of_study = st.text_input("Field of study")
            interests = st.text_area("Your interests", height=80)
            c1, c2 = st.columns(2)
            project_type = c1.selectbox("Project type", PROJECT_TYPES, index=len(PROJECT_TYPES) - 1)
            difficulty = c2.selectbox("Difficulty", DIFFICULTY_LEVELS, index=len(DIFFICULTY_LEVELS) - 1)
            context = st.text_area("Anything else? (optional)", height=80)
            submitted = st.form_submit_button("Suggest ideas", type="primary")
        if submitted:
            with st.spinner("Brainstorming…"):
                remember(
                    "ideas",
                    get_actions().handle_generate_project_ideas(
                        {
                            "fieldOfStudy": field_of_study,
                            "interests": interests,
                            "projectType": project_type,
                            "difficultyLevel": difficulty,
                            "additionalContext": context,
                        }
                    ),
                )
                st_session.results.pop("project_guidance", None)
        result = show_status("ideas")
        if result and not result.is_error:
            for i, idea in enumerate(result.data.ideas):
                with st.expander(idea.title):
                    st.write(idea.description)
                    if idea.keywords:
                        st.caption(" · ".join(idea.keywords))
                    if idea.suitability:
                        st.caption(idea.suitability)
                    if st.button("How do I build this?", key=f"idea_guidance_{i}"):
                        with st.spinner("Planning…"):
                            remember(
                                "project_guidance",
                                get_actions().handle_generate_project_guidance(
                                    {
                                        "projectTitle": idea.title,
                                        "projectDescription": idea.description,
                                    }
                                ),
                            )
            guidance = show_status("project_guidance")
            if guidance and not guidance.is_error:
                st.markdown("**Suggested tech stack**")
                st.markdown("\n".join(f"- {t}" for t in guidance.data.suggested_tech_stack))
                st.markdown("**High-level steps**")
                st.markdown(
                    "\n".join(
                        f"{n}. {s}" for n, s in enumerate(guidance.data.high_level_steps, 1)
                    )
                )
                if guidance.data.key_considerations:
                    st.markdown("**Key considerations**")
                    st.markdown(
                        "\n".join(f"- {k}" for k in guidance.data.key_considerations)
                    )

    with report_tab:
        with st.form("report_form"):
            project_topic = st.text_input("Project topic")
            tech_stack = st.text_area("Tech stack and implementation details", height=120)
            report_type = st.radio(
                "Report type", [r.value for r in ReportType], horizontal=True
            )
            submitted = st.form_submit_button("Generate report", type="primary")
        if submitted:
            with st.spinner("Drafting report…"):
                remember(
                    "report",
                    get_actions().handle_generate_project_report(
                        {
                            "projectTopic": project_topic,
                            "techStackDetails": tech_stack,
                            "reportType": report_type,
                        }
                    ),
                )
        result = show_status("report")
        if result and not result.is_error:
            st.markdown(result.data.report_content)
            if result.data.references:
                st.markdown("#### References")
                st.markdown(result.data.references)
            st.download_button(
                "Download as Markdown",
                result.data.report_content,
                file_name="project_report.md",
            )

    with roadmap_tab:
        with st.form("roadmap_form"):
            topic_or_skill = st.text_input("Topic or skill to learn")
            submitted = st.form_submit_button("Build roadmap", type="primary")
        if submitted:
            with st.spinner("Mapping the way…"):
                remember(
                    "roadmap",
                    get_actions().handle_generate_roadmap({"topicOrSkill": topic_or_skill}),
                )
        result = show_status("roadmap")
        if result and not result.is_error:
            roadmap = result.data
            st.markdown(f"## {roadmap.roadmap_title}")
            st.write(roadmap.introduction)
            for step in roadmap.steps:
                with st.expander(f"{step.title} ({step.estimated_duration})"):
                    st.write(step.description)
                    for res in step.resources:
                        st.markdown(f"- **{res.type.value}**: {res.description_or_link}")
                    if step.keywords:
                        st.caption(" · ".join(step.keywords))
            st.write(roadmap.conclusion)
            mq = roadmap.motivational_quote
            st.markdown(f"> {mq.text}" + (f"\n>\n> — *{mq.author}*" if mq.author else ""))

    with resume_tab:
        for category in RESUME_TIPS:
            st.markdown(f"### {category.category}")
            for tip in category.tips:
                with st.expander(tip.title):
                    st.write(tip.details)
                    if tip.example:
                        st.code(tip.example, language=None)

with interview_tab:
    st.subheader("Mock interview")
    interview = get_interview()

    if not interview.session.domain:
        domain = st.selectbox("Select interview domain", INTERVIEW_DOMAINS)
        if st.button("Start interview", type="primary"):
            with st.spinner("Your interviewer is getting ready…"):
                remember("interview", interview.start(domain))
            st.rerun()
    else:
        st.caption(
            f"Interview for **{interview.session.domain}** · "
            f"question {interview.session.questions_asked} of 3"
        )
        transcript = st.container(height=420, border=True)
        with transcript:
            for turn in interview.session.history:
                role = "assistant" if turn.role.value == "interviewer" else "user"
                with st.chat_message(role):
                    st.markdown(turn.content)

        result = show_status("interview")
        if interview.finished:
            final = interview.session.last_result
            st.metric("Interview score", f"{final.interview_score:.0f}/100")
            st.markdown("#### Feedback")
            st.write(final.feedback_summary)
            st.markdown("#### Areas for improvement")
            st.markdown("\n".join(f"- {a}" for a in final.areas_for_improvement or []))
        else:
            answer = st.chat_input("Type your answer…")
            if answer is not None:
                with st.spinner("Interviewer is listening…"):
                    remember("interview", interview.submit_answer(answer))
                st.rerun()

        if st.button("End interview & select new domain"):
            interview.reset()
            st_session.results.pop("interview", None)
            st.rerun()

with mood_tab:
    st.subheader("Mood tracker")
    choice = st.radio(
        "How are you feeling today?",
        list(MOOD_LABELS),
        format_func=MOOD_LABELS.get,
        horizontal=True,
    )
    if st.button("Log mood", type="primary"):
        entry = store.log_mood(choice)
        st.toast(f"You've logged your mood as {MOOD_LABELS[entry.mood]}.")
    log = store.mood_log()
    if log:
        st.markdown("#### Recent entries")
        for entry in reversed(log[-10:]):
            st.write(f"{entry.logged_at:%Y-%m-%d %H:%M} · {MOOD_LABELS[entry.mood]}")

with quotes_tab:
    st.subheader("Saved quotes")
    saved = store.saved_quotes()
    if not saved:
        st.info("You haven't saved any quotes yet.")
    for q in saved:
        with st.container(border=True):
            st.markdown(f"> {q.text}\n>\n> — *{q.author}*")
            if st.button("Remove", key=f"remove_{q.id}"):
                store.remove_quote(q.id)
                st.rerun()

with about_tab:
    st.subheader("About AatmAI")
    for paragraph in ABOUT_PARAGRAPHS:
        st.write(paragraph)

st.divider()
st.caption(
    "AatmAI is a supportive companion, not a substitute for professional help."
)
