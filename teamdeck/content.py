"""
Static page content: the agent catalog, slash commands and tech stack.

Everything here is fixed for the lifetime of the process. Sequences are
tuples of frozen dataclasses so nothing downstream can mutate them.
"""

from __future__ import annotations

from .exceptions import CatalogError
from .models.catalog import CatalogEntry, CommandEntry


BADGE = "Claude Code Plugin"
HEADLINE = "HIPAA Dev Team"
SUBHEADLINE = "10 AI Agents. One Team."
TAGLINE = (
    "10 specialized AI agents that design, build, test, secure, and deploy "
    "HIPAA-compliant healthcare software, working together as one team."
)
INSTALL_COMMAND = "cp -r ~/Downloads/hipaa-dev-team ~/.claude/skills/"
DOWNLOAD_URL = (
    "https://github.com/jeffbander/hipaa-dev-team/releases/latest/download/"
    "hipaa-dev-team.plugin"
)

_AGENT_DATA = [
    {
        "name": "Team Lead",
        "icon": "🎯",
        "model": "Opus 4.6",
        "phase": "All Phases",
        "color": "#212070",
        "description": (
            "Orchestrates all agents. Analyzes requests, creates task lists, spawns agents "
            "in parallel, resolves conflicts, and delivers final outputs."
        ),
    },
    {
        "name": "Product Manager",
        "icon": "📋",
        "model": "Sonnet 4.5",
        "phase": "Discovery",
        "color": "#06ABEB",
        "description": (
            "Creates PRDs, defines user stories, acceptance criteria, and success metrics. "
            "Identifies HIPAA implications for every feature."
        ),
    },
    {
        "name": "UX Designer",
        "icon": "🎨",
        "model": "Sonnet 4.5",
        "phase": "Discovery",
        "color": "#06ABEB",
        "description": (
            "Designs user flows, wireframes, and interaction patterns. Ensures WCAG 2.2 AA "
            "accessibility and mobile-responsive layouts."
        ),
    },
    {
        "name": "Branding",
        "icon": "🏥",
        "model": "Haiku 4.5",
        "phase": "Discovery → Build",
        "color": "#DC298D",
        "description": (
            "Enforces Mount Sinai brand compliance. Validates colors (#212070, #06ABEB, "
            "#DC298D), typography (Neue Haas Grotesk), and voice guidelines."
        ),
    },
    {
        "name": "Frontend Dev",
        "icon": "⚛️",
        "model": "Sonnet 4.5",
        "phase": "Build",
        "color": "#212070",
        "description": (
            "Builds React + Next.js components with Clerk auth integration, Mount Sinai "
            "styling, session timeout management, and PHI-safe rendering."
        ),
    },
    {
        "name": "Backend Dev",
        "icon": "🔧",
        "model": "Sonnet 4.5",
        "phase": "Build",
        "color": "#212070",
        "description": (
            "Creates Node.js APIs with Prisma ORM, Neon DB integration, AES-256 encryption "
            "for PHI, audit logging, and Clerk middleware."
        ),
    },
    {
        "name": "Security / HIPAA",
        "icon": "🛡️",
        "model": "Sonnet 4.5",
        "phase": "Quality",
        "color": "#FF3B30",
        "description": (
            "Performs HIPAA compliance audits against 45 CFR 164.312. Runs 6 parallel "
            "security scanners. Checks code, infrastructure, and dependencies."
        ),
    },
    {
        "name": "DevOps",
        "icon": "🚀",
        "model": "Haiku 4.5",
        "phase": "Deploy",
        "color": "#34C759",
        "description": (
            "Manages Vercel deployments, GitHub Actions CI/CD, Neon DB branching, "
            "environment variables, and branch protection rules."
        ),
    },
    {
        "name": "QA Tester",
        "icon": "🧪",
        "model": "Sonnet 4.5",
        "phase": "Quality",
        "color": "#FF9500",
        "description": (
            "Writes Jest + RTL tests, performs Chrome browser testing, validates "
            "accessibility, and ensures PHI is never exposed in test data."
        ),
    },
    {
        "name": "Documentation",
        "icon": "📝",
        "model": "Haiku 4.5",
        "phase": "All Phases",
        "color": "#8E8E93",
        "description": (
            "Maintains the project memory file, writes JSDoc comments, updates "
            "CHANGELOG.md, and documents all architectural decisions."
        ),
    },
]

AGENTS: tuple[CatalogEntry, ...] = tuple(CatalogEntry.from_dict(d) for d in _AGENT_DATA)

COMMANDS: tuple[CommandEntry, ...] = (
    CommandEntry("/build-feature", "Orchestrate the full team to build from a PRD or description"),
    CommandEntry("/security-review", "Run comprehensive HIPAA security audit with 6 parallel scanners"),
    CommandEntry("/deploy", "Pre-flight checks + deploy to Vercel production"),
    CommandEntry("/update-memory", "Update project memory file with recent changes"),
)

TECH_STACK: tuple[str, ...] = (
    "React + Next.js",
    "Clerk Auth (MFA)",
    "Node.js APIs",
    "Prisma ORM",
    "Neon DB (HIPAA)",
    "Vercel Deploy",
    "GitHub Actions",
    "Mount Sinai Brand",
)

_AGENTS_BY_KEY = {agent.key: agent for agent in AGENTS}


def agent_keys() -> list[str]:
    """Catalog keys in display order."""
    return [agent.key for agent in AGENTS]


def get_agent(key: str) -> CatalogEntry:
    """Look up an agent by key, raising CatalogError if unknown."""
    agent = _AGENTS_BY_KEY.get(key)
    if agent is None:
        raise CatalogError(key=key)
    return agent
