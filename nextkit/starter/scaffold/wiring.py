import logging
import re
from pathlib import Path
from typing import List, Optional
from .metadata import ProjectContext, Step
from .runner import npx_command


logger = logging.getLogger(__name__)


TAILWIND_CONFIG_NAMES = ("tailwind.config.js", "tailwind.config.ts")

TAILWIND_CONTENT = 'content: ["./src/**/*.{js,ts,jsx,tsx}"]'

# Non-greedy: the first closing bracket ends the content list, later keys survive.
TAILWIND_CONTENT_PATTERN = re.compile(r"content: \[.*?\]", re.S)

GLOBAL_STYLESHEETS = (
    Path("src") / "app" / "globals.css",
    Path("src") / "pages" / "globals.css",
)

TAILWIND_DIRECTIVES = "@tailwind base;\n@tailwind components;\n@tailwind utilities;\n"

PRISMA_SCHEMA = """generator client {
  provider = "prisma-client-js"
}

datasource db {
  provider = "sqlite"
  url      = "file:./dev.db"
}

model User {
  id    Int     @id @default(autoincrement())
  email String  @unique
  name  String?
}
"""

I18N_DEFAULT_LOCALE = "en"
I18N_LOCALES = ("en", "fr", "ar")


def render_i18n_config(default_locale: str = I18N_DEFAULT_LOCALE, locales=I18N_LOCALES) -> str:
    quoted = ", ".join(f"'{locale}'" for locale in locales)
    return (
        "module.exports = {\n"
        "  i18n: {\n"
        f"    defaultLocale: '{default_locale}',\n"
        f"    locales: [{quoted}]\n"
        "  }\n"
        "}\n"
    )


def rewrite_tailwind_content(project_path: Path) -> Optional[Path]:
    """Point the Tailwind content globs at the ``src`` tree. Returns the rewritten config, if any."""
    for name in TAILWIND_CONFIG_NAMES:
        config_path = Path(project_path) / name
        if config_path.exists():
            content = config_path.read_text(encoding="utf-8")
            content = TAILWIND_CONTENT_PATTERN.sub(TAILWIND_CONTENT, content, count=1)
            config_path.write_text(content, encoding="utf-8")
            logger.info(f"Rewrote content globs in {config_path}")
            return config_path

    logger.info("No Tailwind config found, content globs left unchanged")
    return None


def write_global_styles(project_path: Path) -> List[Path]:
    """Replace existing global stylesheets with the Tailwind directives."""
    written = []
    for relative in GLOBAL_STYLESHEETS:
        stylesheet = Path(project_path) / relative
        if stylesheet.exists():
            stylesheet.write_text(TAILWIND_DIRECTIVES, encoding="utf-8")
            logger.info(f"Wrote Tailwind directives to {stylesheet}")
            written.append(stylesheet)
    return written


def write_prisma_schema(project_path: Path) -> Path:
    prisma_dir = Path(project_path) / "prisma"
    prisma_dir.mkdir(parents=True, exist_ok=True)

    schema_path = prisma_dir / "schema.prisma"
    schema_path.write_text(PRISMA_SCHEMA, encoding="utf-8")
    logger.info(f"Wrote {schema_path}")
    return schema_path


def write_i18n_config(project_path: Path) -> Path:
    config_path = Path(project_path) / "next-i18next.config.js"
    config_path.write_text(render_i18n_config(), encoding="utf-8")
    logger.info(f"Wrote {config_path}")
    return config_path


def _tool_step(ctx: ProjectContext, name: str, message: str, *args: str) -> Step:
    command = npx_command(*args)
    return Step(
        name=name,
        message=message,
        action=lambda: ctx.runner.run_command(command, cwd=ctx.path),
        command=str(command),
    )


def tailwind_steps(ctx: ProjectContext) -> List[Step]:
    return [
        _tool_step(ctx, "tailwind-init", "Initializing Tailwind config", "tailwindcss", "init", "-p"),
        Step("tailwind-config", "Pointing Tailwind at src/", lambda: rewrite_tailwind_content(ctx.path)),
        Step("tailwind-globals", "Writing Tailwind base styles", lambda: write_global_styles(ctx.path)),
    ]


def shadcn_steps(ctx: ProjectContext) -> List[Step]:
    return [
        _tool_step(ctx, "shadcn-init", "Initializing shadcn/ui (this will prompt)", "shadcn@latest", "init"),
    ]


def prisma_steps(ctx: ProjectContext) -> List[Step]:
    return [
        Step("prisma-schema", "Writing Prisma schema (SQLite)", lambda: write_prisma_schema(ctx.path)),
        _tool_step(ctx, "prisma-generate", "Generating Prisma client", "prisma", "generate"),
        _tool_step(ctx, "prisma-migrate", "Running initial Prisma migration", "prisma", "migrate", "dev", "--name", "init"),
    ]


def i18n_steps(ctx: ProjectContext) -> List[Step]:
    return [
        Step("i18n-config", "Wiring i18n config", lambda: write_i18n_config(ctx.path)),
    ]
