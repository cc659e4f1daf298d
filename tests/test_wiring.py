"""Tests for the per-feature wiring procedures."""

from __future__ import annotations

from pathlib import Path

from conftest import FakeRunner

from nextkit.starter.scaffold.metadata import PackageManager, ProjectContext
from nextkit.starter.scaffold.runner import CommandRunner
from nextkit.starter.scaffold.wiring import (
    PRISMA_SCHEMA,
    TAILWIND_CONTENT,
    TAILWIND_DIRECTIVES,
    i18n_steps,
    prisma_steps,
    render_i18n_config,
    rewrite_tailwind_content,
    shadcn_steps,
    tailwind_steps,
    write_global_styles,
    write_i18n_config,
    write_prisma_schema,
)

DEFAULT_TAILWIND_CONFIG = """/** @type {import('tailwindcss').Config} */
module.exports = {
  content: [
    "./pages/**/*.{js,ts,jsx,tsx}",
  ],
  theme: {
    extend: {},
  },
  plugins: [],
}
"""


class TestTailwind:
    def test_content_globs_are_rewritten(self, tmp_path: Path):
        (tmp_path / "tailwind.config.js").write_text(DEFAULT_TAILWIND_CONFIG)

        assert rewrite_tailwind_content(tmp_path) == tmp_path / "tailwind.config.js"

        content = (tmp_path / "tailwind.config.js").read_text()
        assert TAILWIND_CONTENT in content
        assert "./pages/**/*" not in content
        assert "theme: {" in content
        assert "plugins: []" in content

    def test_typescript_config_is_used_when_js_is_absent(self, tmp_path: Path):
        (tmp_path / "tailwind.config.ts").write_text("export default {\n  content: [],\n  plugins: [],\n}\n")

        assert rewrite_tailwind_content(tmp_path) == tmp_path / "tailwind.config.ts"
        assert TAILWIND_CONTENT in (tmp_path / "tailwind.config.ts").read_text()

    def test_missing_config_is_left_alone(self, tmp_path: Path):
        assert rewrite_tailwind_content(tmp_path) is None
        assert list(tmp_path.iterdir()) == []

    def test_existing_global_stylesheets_are_overwritten(self, tmp_path: Path):
        app = tmp_path / "src" / "app"
        pages = tmp_path / "src" / "pages"
        app.mkdir(parents=True)
        pages.mkdir(parents=True)
        (app / "globals.css").write_text("body {}\n")
        (pages / "globals.css").write_text("html {}\n")

        written = write_global_styles(tmp_path)

        assert written == [app / "globals.css", pages / "globals.css"]
        assert (app / "globals.css").read_text() == TAILWIND_DIRECTIVES
        assert (pages / "globals.css").read_text() == TAILWIND_DIRECTIVES

    def test_missing_global_stylesheets_are_not_created(self, tmp_path: Path):
        assert write_global_styles(tmp_path) == []
        assert not (tmp_path / "src").exists()

    def test_directives_are_three_lines(self):
        assert TAILWIND_DIRECTIVES.splitlines() == [
            "@tailwind base;",
            "@tailwind components;",
            "@tailwind utilities;",
        ]

    def test_steps(self, tmp_path: Path):
        runner = FakeRunner()
        ctx = ProjectContext(tmp_path, PackageManager.NPM, runner)

        steps = tailwind_steps(ctx)
        for step in steps:
            step.action()

        assert [s.name for s in steps] == ["tailwind-init", "tailwind-config", "tailwind-globals"]
        assert runner.calls == [("npx", ["tailwindcss", "init", "-p"], tmp_path)]
        assert steps[0].command == "npx tailwindcss init -p"


class TestPrisma:
    def test_schema_written_and_directory_created(self, tmp_path: Path):
        schema = write_prisma_schema(tmp_path)

        assert schema == tmp_path / "prisma" / "schema.prisma"
        assert schema.read_text() == PRISMA_SCHEMA

    def test_existing_schema_is_replaced(self, tmp_path: Path):
        (tmp_path / "prisma").mkdir()
        (tmp_path / "prisma" / "schema.prisma").write_text("model Old {}\n")

        write_prisma_schema(tmp_path)

        assert (tmp_path / "prisma" / "schema.prisma").read_text() == PRISMA_SCHEMA

    def test_schema_targets_local_sqlite(self):
        assert 'provider = "sqlite"' in PRISMA_SCHEMA
        assert 'url      = "file:./dev.db"' in PRISMA_SCHEMA
        assert "model User {" in PRISMA_SCHEMA

    def test_steps_order(self, tmp_path: Path):
        ctx = ProjectContext(tmp_path, PackageManager.NPM, FakeRunner())

        steps = prisma_steps(ctx)

        assert [s.name for s in steps] == ["prisma-schema", "prisma-generate", "prisma-migrate"]
        assert steps[2].command == "npx prisma migrate dev --name init"


class TestI18n:
    def test_config_written(self, tmp_path: Path):
        path = write_i18n_config(tmp_path)

        content = path.read_text()
        assert path == tmp_path / "next-i18next.config.js"
        assert "defaultLocale: 'en'" in content
        assert "locales: ['en', 'fr', 'ar']" in content

    def test_render_custom_locales(self):
        content = render_i18n_config("de", ("de", "en"))

        assert "defaultLocale: 'de'" in content
        assert "locales: ['de', 'en']" in content

    def test_steps_are_static(self, tmp_path: Path):
        runner = FakeRunner()
        steps = i18n_steps(ProjectContext(tmp_path, PackageManager.PNPM, runner))

        steps[0].action()

        assert runner.calls == []
        assert (tmp_path / "next-i18next.config.js").exists()


def test_shadcn_init_step(tmp_path: Path):
    runner = FakeRunner()
    steps = shadcn_steps(ProjectContext(tmp_path, PackageManager.NPM, runner))

    steps[0].action()

    assert runner.commands == ["npx shadcn@latest init"]


def test_context_accepts_the_real_runner(tmp_path: Path):
    runner = CommandRunner()
    ctx = ProjectContext(tmp_path, PackageManager.NPM, runner)

    steps = i18n_steps(ctx)
    steps[0].action()

    assert ctx.runner is runner
    assert (tmp_path / "next-i18next.config.js").exists()
