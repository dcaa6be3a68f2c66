"""Static informational content: the about text and the resume tips page."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class Tip:
    title: str
    details: str
    example: Optional[str] = None


@dataclass(frozen=True)
class TipCategory:
    category: str
    tips: tuple[Tip, ...] = field(default_factory=tuple)


ABOUT_PARAGRAPHS = (
    "AatmAI was born from the experiences of two enthusiasts who, like many, "
    "faced their own share of life's challenges. We saw the need for a "
    "supportive, non-judgmental space where anyone can find understanding and "
    "a fresh perspective.",
    "As recent graduates, we are curious about how Artificial Intelligence can "
    "create meaningful solutions that positively impact lives.",
    "Our goal is a friendly, empathetic companion that offers emotional support "
    "and helps you navigate career, financial and relationship issues with more "
    "clarity and resilience. Everyone deserves a space to be heard.",
)

RESUME_TIPS = (
    TipCategory(
        "Essential Sections",
        (
            Tip(
                "Contact Information",
                "Full name, phone number, a professional email address and your "
                "LinkedIn URL. Keep it current and easy to find.",
                "Omkar R G | +91-9876543210 | omkar.rg@email.com | "
                "linkedin.com/in/omkarrg",
            ),
            Tip(
                "Professional Summary or Objective",
                "Two or three sentences on your key skills, experience level and "
                "goals, tailored to the job.",
            ),
            Tip(
                "Work Experience (Reverse Chronological)",
                "Most recent role first: company, title, dates and 3-5 bullets of "
                "achievements. Use action verbs and numbers.",
            ),
            Tip(
                "Education",
                "Degrees in reverse order with university, major, graduation date "
                "and GPA if strong. Mention relevant coursework or honors.",
                "B.Tech in Computer Science | XYZ University | Expected May 2025 | "
                "CGPA: 8.5/10",
            ),
            Tip(
                "Skills",
                "Separate technical skills (languages, tools) from soft skills and "
                "tailor both to the job description.",
            ),
        ),
    ),
    TipCategory(
        "Content & Wording",
        (
            Tip(
                "Use Action Verbs",
                "Start bullets with verbs like Developed, Led, Implemented, Analyzed.",
            ),
            Tip(
                "Quantify Achievements",
                "Show impact with numbers, e.g. 'Reduced project costs by 15%'.",
            ),
            Tip(
                "Tailor to Each Job",
                "Highlight the experience most relevant to each posting and reuse "
                "its keywords.",
            ),
            Tip(
                "Proofread Meticulously",
                "Typos create a poor impression. Proofread more than once and ask "
                "someone else to review.",
            ),
        ),
    ),
    TipCategory(
        "Formatting & Presentation",
        (
            Tip(
                "Choose a Clean Format",
                "Chronological or combination formats suit most students and "
                "recent graduates.",
            ),
            Tip(
                "Length: One Page is Ideal",
                "With under 10 years of experience, keep it to one page.",
            ),
            Tip(
                "Save as PDF",
                "PDF keeps your formatting intact on every device.",
            ),
        ),
    ),
    TipCategory(
        "Common Resume Mistakes to Avoid",
        (
            Tip(
                "Generic, Non-Tailored Resume",
                "Sending the same resume everywhere is ineffective.",
            ),
            Tip(
                "Focusing on Duties, Not Achievements",
                "Say what you accomplished and the impact it had, not just the tasks.",
            ),
            Tip(
                "Unprofessional Email Address",
                "Use something like firstname.lastname@email.com.",
            ),
        ),
    ),
)
