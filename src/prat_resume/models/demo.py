"""Sample resume used by the "load demo" action."""

from __future__ import annotations

from prat_resume.models.document import (
    EducationEntry,
    ExperienceEntry,
    PersonalInfo,
    ResumeDocument,
    SkillEntry,
)

__all__ = ["demo_document"]


def demo_document() -> ResumeDocument:
    """Return the demo resume.  Entry ids are fresh on every call."""
    return ResumeDocument(
        personal_info=PersonalInfo(
            full_name="Pratima Singh",
            email="pratima.singh@example.com",
            phone="+1 (555) 012-3456",
            city="San Francisco, CA",
            link="linkedin.com/in/pratima-singh",
            job_title="Senior Product Designer",
            summary=(
                "Creative and detail-oriented Product Designer with over 6 years of "
                "experience in building user-centric digital products. Proven track "
                "record of improving user engagement and streamlining workflows through "
                "intuitive design systems. Passionate about accessibility and inclusive "
                "design practices."
            ),
        ),
        experience=(
            ExperienceEntry(
                company="TechFlow Solutions",
                job_title="Senior Product Designer",
                start_date="06/2021",
                end_date="Present",
                city="San Francisco, CA",
                description=(
                    "• Led the redesign of the core SaaS platform, resulting in a 25% "
                    "increase in user retention.\n"
                    "• Mentored a team of 3 junior designers and established a unified "
                    "design system.\n"
                    "• Conducted user research and usability testing to validate new "
                    "features."
                ),
            ),
            ExperienceEntry(
                company="Creative Pulse",
                job_title="UI/UX Designer",
                start_date="03/2018",
                end_date="05/2021",
                city="Austin, TX",
                description=(
                    "• Designed mobile-first interfaces for e-commerce clients, improving "
                    "conversion rates by 15%.\n"
                    "• Collaborated closely with developers to ensure pixel-perfect "
                    "implementation of designs.\n"
                    "• Created interactive prototypes using Figma and Protopie for "
                    "stakeholder presentations."
                ),
            ),
        ),
        education=(
            EducationEntry(
                school="California College of the Arts",
                degree="BFA in Interaction Design",
                start_date="09/2014",
                end_date="05/2018",
                city="San Francisco, CA",
                grade="3.9 GPA",
            ),
        ),
        skills=(
            SkillEntry(name="Figma", level="Expert"),
            SkillEntry(name="Prototyping", level="Expert"),
            SkillEntry(name="User Research", level="Advanced"),
            SkillEntry(name="HTML/CSS", level="Intermediate"),
            SkillEntry(name="Design Systems", level="Advanced"),
        ),
        layout_density="comfortable",
    )
