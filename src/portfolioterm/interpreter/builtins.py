"""Built-in portfolio commands.

Every static command is a pure function of its argument tokens that
ignores them and returns constant text. ``help`` is generated from the
registry it is bound to, and ``clear`` asks the interpreter to wipe the
transcript.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Sequence

from portfolioterm.domain.models import (
    CommandHandler,
    Project,
    ResetTranscript,
)

if TYPE_CHECKING:
    from portfolioterm.interpreter.registry import CommandRegistry

logger = logging.getLogger(__name__)

FALLBACK_DESCRIPTION = "No description available"

DEFAULT_DESCRIPTIONS: dict[str, str] = {
    "help": "Show all available commands",
    "clear": "Clear the terminal screen",
    "about": "Brief introduction about me",
    "education": "My educational background",
    "location": "Where I'm based and availability",
    "whoami": "Personal introduction",
    "hobbies": "What I do for fun",
    "skills": "Technical skills and expertise",
}

PROJECTS_DESCRIPTION = "List projects, or 'projects <id>' for details"


ABOUT_TEXT = """\
👋 Hello! I'm a developer who loves to develop and design amazing things.

🎯 I enjoy working on challenging projects and learning new technologies.
Always excited to collaborate and build something great together!

💡 Curious about my background? Try 'education', or 'hobbies'!"""

EDUCATION_TEXT = """\
🎓 Education:

Bachelor of Science in Information Technology
Nueva Ecija University of Science and Technology | 2023 - 2027
• Currently a 3rd-year student
• Learning full-stack development, diving into Next.js, backend systems, and modern web technologies
• Actively building websites for practice using React to sharpen real-world dev skills

💡 Always growing and committed to mastering both front-end and back-end technologies."""

LOCATION_TEXT = """\
🌍 Location & Availability:

📍 Currently based in: Philippines
🕐 Timezone: PHT (UTC+8)
🌐 Work Style: Remote-friendly, open to global collaboration

🏢 Available for:
• Freelance projects
• Part-time work
• Full-time positions"""

WHOAMI_TEXT = """\
👤 About Me:

Name: Reiniel
Role: Web Developer / Designer
Passion: Building clean, functional websites and interfaces
Status: Always learning, always improving

💻 Focused on writing maintainable code
🛠️ Hands-on with both front-end and back-end workflows
🎨 Committed to creating intuitive, user-friendly designs

Type 'hobbies' to see what I do when I'm not coding!"""

HOBBIES_TEXT = """\
🎮 When I'm not coding, I enjoy:

• Gaming, especially competitive or co-op games
• Listening to music, which helps me focus and unwind
• Watching movies and series, from thrillers to anime
• Hanging out and playing with friends, online or in person"""

SKILLS_TEXT = """\
💻 Technical Skills:

Frontend:
- HTML5, CSS3, Tailwind CSS
- JavaScript (ES6+), React
- Basic TypeScript

Backend:
- Currently learning backend development"""


def about(args: Sequence[str]) -> str:
    return ABOUT_TEXT


def education(args: Sequence[str]) -> str:
    return EDUCATION_TEXT


def location(args: Sequence[str]) -> str:
    return LOCATION_TEXT


def whoami(args: Sequence[str]) -> str:
    return WHOAMI_TEXT


def hobbies(args: Sequence[str]) -> str:
    return HOBBIES_TEXT


def skills(args: Sequence[str]) -> str:
    return SKILLS_TEXT


def clear(args: Sequence[str]) -> ResetTranscript:
    """Wipe the transcript. Nothing is appended for this turn."""
    return ResetTranscript()


def make_help_command(registry: CommandRegistry) -> CommandHandler:
    """Build a ``help`` handler that lists whatever ``registry`` resolves.

    The listing is read at call time, so commands added by overrides are
    included in registry order.
    """

    def help_command(args: Sequence[str]) -> str:
        lines = [
            f"  {name.ljust(12)} - {registry.describe(name)}"
            for name in registry.names()
        ]
        return (
            "Available commands:\n"
            + "\n".join(lines)
            + "\n\nTry any command to learn more about me!"
        )

    return help_command


def make_static_command(text: str) -> CommandHandler:
    """Wrap constant text as a handler, e.g. for commands defined in YAML."""

    def static_command(args: Sequence[str]) -> str:
        return text

    return static_command


def make_projects_command(projects: Sequence[Project]) -> CommandHandler:
    """Build a ``projects`` handler over the configured portfolio projects.

    ``projects`` lists every project; ``projects <id>`` shows the full
    write-up for one of them.
    """
    by_id = {p.id.lower(): p for p in projects}

    def projects_command(args: Sequence[str]) -> str:
        if not args:
            if not projects:
                return "No projects to show yet."
            lines = [f"  {p.id.ljust(12)} - {p.title}: {p.description}" for p in projects]
            return (
                "📁 Projects:\n"
                + "\n".join(lines)
                + "\n\nType 'projects <id>' to see more about one."
            )

        project = by_id.get(args[0].lower())
        if project is None:
            return f"Project not found: {args[0]}. Type 'projects' to list them."

        parts = [f"📁 {project.title}", ""]
        parts.append(project.full_description or project.description)
        if project.technologies:
            parts += ["", "Technologies: " + ", ".join(project.technologies)]
        if project.demo_url:
            parts.append(f"Demo: {project.demo_url}")
        if project.repo_url:
            parts.append(f"Source: {project.repo_url}")
        return "\n".join(parts)

    return projects_command


STATIC_COMMANDS: dict[str, CommandHandler] = {
    "about": about,
    "education": education,
    "location": location,
    "whoami": whoami,
    "hobbies": hobbies,
    "skills": skills,
}


def default_commands(registry: CommandRegistry) -> dict[str, CommandHandler]:
    """The built-in command table, with ``help`` bound to ``registry``."""
    return {
        "help": make_help_command(registry),
        "clear": clear,
        **STATIC_COMMANDS,
    }
