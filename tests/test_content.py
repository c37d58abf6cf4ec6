"""Tests for the static catalog content."""

import dataclasses

import pytest

from teamdeck import content
from teamdeck.exceptions import CatalogError
from teamdeck.models.catalog import CatalogEntry, slugify


def test_catalog_sizes():
    assert len(content.AGENTS) == 10
    assert len(content.COMMANDS) == 4
    assert len(content.TECH_STACK) == 8


def test_keys_are_unique_and_ordered():
    keys = content.agent_keys()
    assert len(set(keys)) == len(keys)
    assert keys[:3] == ["team-lead", "product-manager", "ux-designer"]
    assert "backend-dev" in keys


@pytest.mark.parametrize(
    "name,expected",
    [
        ("Product Manager", "product-manager"),
        ("Security / HIPAA", "security-hipaa"),
        ("QA Tester", "qa-tester"),
        ("DevOps", "devops"),
    ],
)
def test_slugify(name, expected):
    assert slugify(name) == expected


def test_entries_are_immutable():
    agent = content.AGENTS[0]
    with pytest.raises(dataclasses.FrozenInstanceError):
        agent.name = "Someone Else"  # type: ignore[misc]


def test_get_agent():
    agent = content.get_agent("devops")
    assert agent.icon == "🚀"
    assert agent.phase == "Deploy"


def test_get_unknown_agent_raises():
    with pytest.raises(CatalogError) as excinfo:
        content.get_agent("intern")
    assert excinfo.value.context == {"key": "intern"}


def test_from_dict_keeps_explicit_key():
    entry = CatalogEntry.from_dict(
        {
            "key": "lead",
            "name": "Team Lead",
            "icon": "🎯",
            "model": "Opus 4.6",
            "phase": "All Phases",
            "color": "#212070",
            "description": "Orchestrates.",
        }
    )
    assert entry.key == "lead"
    assert entry.to_dict()["name"] == "Team Lead"


def test_install_command():
    assert content.INSTALL_COMMAND == "cp -r ~/Downloads/hipaa-dev-team ~/.claude/skills/"
    assert content.DOWNLOAD_URL.endswith("hipaa-dev-team.plugin")
