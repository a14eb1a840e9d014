"""Unit tests for goscaffold configuration (goscaffold.config).

Tests cover:
- ProjectConfig defaults, validation and immutability
- JSON save / load round trip
- TemplateKind coercion
- resolve_module_path precedence
- expand_aggregate_flags
"""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from goscaffold.config import (
    TEMPLATE_DESCRIPTIONS,
    ProjectConfig,
    TemplateKind,
    expand_aggregate_flags,
    resolve_module_path,
)

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# ProjectConfig
# ---------------------------------------------------------------------------


class TestProjectConfig:
    def test_defaults(self):
        config = ProjectConfig(name="widget", module_path="github.com/acme/widget")
        assert config.template is TemplateKind.BASIC
        assert config.include_makefile is False
        assert config.include_docker is False
        assert config.include_ci is False
        assert config.include_lint is False
        assert config.include_precommit is False
        assert config.include_tests is False
        assert config.init_git is False

    def test_template_from_string(self):
        config = ProjectConfig(name="widget", module_path="widget", template="grpc")
        assert config.template is TemplateKind.GRPC

    def test_rejects_unknown_template(self):
        with pytest.raises(ValidationError):
            ProjectConfig(name="widget", module_path="widget", template="desktop")

    def test_name_is_required(self):
        with pytest.raises(ValidationError):
            ProjectConfig(module_path="widget")

    def test_is_frozen(self, widget_config):
        with pytest.raises(ValidationError):
            widget_config.name = "other"

    def test_is_hashable(self, widget_config):
        assert hash(widget_config) == hash(widget_config.model_copy())


class TestProjectConfigPersistence:
    def test_save_writes_json(self, tmp_path, full_config):
        path = full_config.save(tmp_path / "nested" / "scaffold.json")
        assert path.exists()
        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["name"] == "widget"
        assert data["template"] == "api"
        assert data["include_docker"] is True

    def test_load_round_trip(self, tmp_path, full_config):
        path = full_config.save(tmp_path / "scaffold.json")
        assert ProjectConfig.load(path) == full_config

    def test_load_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text('{"name": "widget"}', encoding="utf-8")
        with pytest.raises(ValidationError):
            ProjectConfig.load(path)

    def test_load_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            ProjectConfig.load(tmp_path / "absent.json")


# ---------------------------------------------------------------------------
# TemplateKind
# ---------------------------------------------------------------------------


class TestTemplateKind:
    def test_values(self):
        assert [k.value for k in TemplateKind] == ["basic", "cli", "api", "grpc", "library"]

    def test_coerce_known(self):
        assert TemplateKind.coerce("api") is TemplateKind.API
        assert TemplateKind.coerce(TemplateKind.CLI) is TemplateKind.CLI

    def test_coerce_unknown(self):
        assert TemplateKind.coerce("desktop") is None

    def test_every_kind_has_description(self):
        assert set(TEMPLATE_DESCRIPTIONS) == set(TemplateKind)


# ---------------------------------------------------------------------------
# resolve_module_path
# ---------------------------------------------------------------------------


class TestResolveModulePath:
    def test_explicit_module_wins(self):
        assert resolve_module_path("demo", "example.com/x/demo", "u") == "example.com/x/demo"

    def test_github_user(self):
        assert resolve_module_path("demo", None, "u") == "github.com/u/demo"

    def test_bare_name(self):
        assert resolve_module_path("demo") == "demo"

    def test_empty_strings_fall_through(self):
        assert resolve_module_path("demo", "", "") == "demo"


# ---------------------------------------------------------------------------
# expand_aggregate_flags
# ---------------------------------------------------------------------------


class TestExpandAggregateFlags:
    def test_no_aggregates_is_identity(self):
        flags = {"include_makefile": False, "include_lint": True}
        assert expand_aggregate_flags(flags) == flags

    def test_all_devops(self):
        expanded = expand_aggregate_flags({}, all_devops=True)
        assert expanded == {
            "include_makefile": True,
            "include_docker": True,
            "include_ci": True,
        }

    def test_all_quality(self):
        expanded = expand_aggregate_flags({}, all_quality=True)
        assert expanded == {
            "include_lint": True,
            "include_precommit": True,
            "include_tests": True,
        }

    def test_does_not_mutate_input(self):
        flags = {"include_makefile": False}
        expand_aggregate_flags(flags, all_devops=True)
        assert flags == {"include_makefile": False}

    def test_never_switches_flags_off(self):
        expanded = expand_aggregate_flags({"include_tests": True}, all_devops=True)
        assert expanded["include_tests"] is True

    def test_result_builds_config(self):
        flags = expand_aggregate_flags({}, all_devops=True, all_quality=True)
        config = ProjectConfig(name="demo", module_path="demo", **flags)
        assert config.include_ci and config.include_precommit
