"""Tests for the template engine."""

import textwrap

import pytest

from generator import BUILTIN_TEMPLATES_DIR, Engine, ItemType, TemplateNotFoundError


class TestEngineLoad:
    def test_loads_all_item_types(self):
        engine = Engine()
        assert engine.templates_dir == BUILTIN_TEMPLATES_DIR
        for item_type in ItemType:
            assert item_type in engine.templates
            assert engine.templates[item_type]

    def test_custom_directory(self, tmp_path):
        (tmp_path / "skills" / "lint").mkdir(parents=True)
        (tmp_path / "skills" / "lint" / "SKILL.md").write_text("---\nname: lint\n---\nRun lint.")
        (tmp_path / "skills" / "no-skill-file").mkdir()
        (tmp_path / "commands").mkdir()
        (tmp_path / "commands" / "ship.md").write_text("ship it")
        (tmp_path / "commands" / "notes.txt").write_text("ignored")

        engine = Engine(tmp_path)

        assert engine.list(ItemType.SKILL) == ["lint"]
        assert engine.list(ItemType.COMMAND) == ["ship"]
        # Missing category directory still maps to an empty index
        assert engine.templates[ItemType.AGENT] == {}
        assert engine.list(ItemType.AGENT) == []


class TestEngineGenerate:
    @pytest.mark.parametrize(
        "item_type,name",
        [
            (ItemType.SKILL, "coding"),
            (ItemType.AGENT, "golang-code-reviewer"),
            (ItemType.COMMAND, "feature"),
        ],
    )
    def test_known_template_contains_name(self, item_type, name):
        result = Engine().generate(item_type, name)
        assert result
        assert name in result

    def test_every_builtin_template_contains_its_name(self):
        engine = Engine()
        for item_type in ItemType:
            for name in engine.list(item_type):
                assert name in engine.generate(item_type, name)

    def test_returns_raw_content(self, tmp_path):
        content = "---\nname: ship\n---\n\nShip $ARGUMENTS now.\n"
        (tmp_path / "commands").mkdir()
        (tmp_path / "commands" / "ship.md").write_text(content)

        assert Engine(tmp_path).generate(ItemType.COMMAND, "ship") == content

    def test_unknown_name(self):
        with pytest.raises(TemplateNotFoundError) as exc_info:
            Engine().generate(ItemType.SKILL, "nonexistent")

        assert "template nonexistent not found for type skill" in str(exc_info.value)
        assert exc_info.value.item_type is ItemType.SKILL
        assert exc_info.value.name == "nonexistent"

    def test_unknown_type(self):
        with pytest.raises(TemplateNotFoundError) as exc_info:
            Engine().generate("invalid", "test")

        assert "no templates found for type: invalid" in str(exc_info.value)
        assert exc_info.value.item_type == "invalid"
        assert exc_info.value.name == "test"

    def test_plain_string_type_is_not_registered(self):
        with pytest.raises(TemplateNotFoundError) as exc_info:
            Engine().generate("skill", "coding")
        assert "no templates found for type: skill" in str(exc_info.value)

    def test_not_found_is_lookup_error(self):
        with pytest.raises(LookupError):
            Engine().generate(ItemType.AGENT, "missing")


class TestEngineList:
    @pytest.mark.parametrize(
        "item_type,expected",
        [
            (ItemType.SKILL, ["coding", "docker", "bash"]),
            (ItemType.AGENT, ["golang-code-reviewer", "golang-engineer", "software-architect"]),
            (ItemType.COMMAND, ["feature", "fix", "refactor"]),
        ],
    )
    def test_builtin_names(self, item_type, expected):
        names = Engine().list(item_type)
        assert names
        for name in expected:
            assert name in names

    def test_sorted(self):
        engine = Engine()
        for item_type in ItemType:
            names = engine.list(item_type)
            assert names == sorted(names)

    def test_unknown_type_is_empty(self):
        assert Engine().list("invalid") == []

    def test_plain_string_type_is_empty(self):
        assert Engine().list("skill") == []
        assert Engine().describe("skill") == []


def test_describe_reads_frontmatter(tmp_path):
    agents = tmp_path / "agents"
    agents.mkdir()
    (agents / "reviewer.md").write_text(
        textwrap.dedent(
            """
            ---
            name: reviewer
            description: Review code.
            ---

            You review code.
            """
        ).strip()
    )
    (agents / "plain.md").write_text("No frontmatter here.")

    infos = Engine(tmp_path).describe(ItemType.AGENT)

    assert [(i.name, i.description) for i in infos] == [("plain", ""), ("reviewer", "Review code.")]
    assert all(i.item_type is ItemType.AGENT for i in infos)


def test_describe_builtins_have_descriptions():
    engine = Engine()
    for item_type in ItemType:
        for info in engine.describe(item_type):
            assert info.description, f"{item_type} '{info.name}' has no description"


def test_describe_unknown_type_is_empty():
    assert Engine().describe("invalid") == []
