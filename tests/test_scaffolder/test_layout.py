"""Tests for directory planning (goscaffold.scaffolder.layout)."""

from __future__ import annotations

import pytest

from goscaffold.config import TemplateKind
from goscaffold.scaffolder.layout import CI_WORKFLOW_DIR, plan_directories

pytestmark = pytest.mark.unit


EXPECTED_LAYOUTS = {
    TemplateKind.BASIC: ["widget"],
    TemplateKind.CLI: ["widget", "widget/cmd/widget", "widget/internal"],
    TemplateKind.API: [
        "widget",
        "widget/cmd/widget",
        "widget/internal/handler",
        "widget/internal/middleware",
        "widget/internal/router",
        "widget/pkg",
    ],
    TemplateKind.GRPC: [
        "widget",
        "widget/cmd/widget",
        "widget/internal/server",
        "widget/proto",
        "widget/pkg",
    ],
    TemplateKind.LIBRARY: ["widget", "widget/pkg/widget", "widget/examples"],
}


class TestPlanDirectories:
    @pytest.mark.parametrize("kind", list(TemplateKind))
    def test_layout_per_kind(self, kind):
        assert plan_directories("widget", kind) == EXPECTED_LAYOUTS[kind]

    @pytest.mark.parametrize("kind", list(TemplateKind))
    def test_root_first(self, kind):
        assert plan_directories("widget", kind, include_ci=True)[0] == "widget"

    @pytest.mark.parametrize("kind", list(TemplateKind))
    def test_ci_appends_workflow_dir(self, kind):
        planned = plan_directories("widget", kind, include_ci=True)
        assert planned[-1] == f"widget/{CI_WORKFLOW_DIR}"
        assert planned[:-1] == EXPECTED_LAYOUTS[kind]

    @pytest.mark.parametrize("kind", list(TemplateKind))
    def test_no_duplicates(self, kind):
        planned = plan_directories("widget", kind, include_ci=True)
        assert len(planned) == len(set(planned))

    def test_accepts_plain_strings(self):
        assert plan_directories("widget", "cli") == EXPECTED_LAYOUTS[TemplateKind.CLI]

    def test_unknown_kind_falls_back(self):
        assert plan_directories("widget", "desktop") == [
            "widget",
            "widget/cmd",
            "widget/internal",
            "widget/pkg",
        ]

    def test_unknown_kind_with_ci(self):
        planned = plan_directories("widget", "desktop", include_ci=True)
        assert planned[-1] == "widget/.github/workflows"

    def test_name_is_substituted(self):
        planned = plan_directories("demo", TemplateKind.LIBRARY)
        assert "demo/pkg/demo" in planned

    def test_kinds_do_not_share_layouts(self):
        layouts = {tuple(plan_directories("widget", kind)[1:]) for kind in TemplateKind}
        assert len(layouts) == len(TemplateKind)
