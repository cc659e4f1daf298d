"""Shared pytest fixtures for the create-next-starter test suite.

Provides:
- A recording ``FakeRunner`` that never spawns processes
- A small template tree
- Selections helpers
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterable, Optional

import pytest

from nextkit.starter.config import StarterConfig
from nextkit.starter.scaffold.exceptions import CommandFailed
from nextkit.starter.scaffold.metadata import FeatureId, LocationMode, PackageManager, UserSelections
from nextkit.starter.scaffold.runner import CommandRunner


class FakeRunner(CommandRunner):
    """Records every invocation instead of running it.

    ``fail`` holds command prefixes (``"npx prisma generate"``) that should
    raise ``CommandFailed``. ``on_run`` is called for every successful command
    so tests can simulate the files external tools leave behind.
    """

    def __init__(self, fail: Iterable[str] = (), on_run: Optional[Callable] = None):
        self.calls: list[tuple[str, list[str], Optional[Path]]] = []
        self.fail = tuple(fail)
        self.on_run = on_run

    def run(self, executable, args=(), cwd=None, inherit_stdio=True):
        args = list(args)
        self.calls.append((executable, args, cwd))
        command = " ".join([executable, *args])
        if any(command.startswith(prefix) for prefix in self.fail):
            raise CommandFailed(executable, args, returncode=1)
        if self.on_run is not None:
            self.on_run(executable, args, cwd)

    @property
    def commands(self) -> list[str]:
        return [" ".join([executable, *args]) for executable, args, _ in self.calls]


def simulate_next_app(executable, args, cwd):
    """Leave behind what create-next-app and tailwind init would write."""
    command = " ".join([executable, *args])
    if "create-next-app@latest" in command or "next-app@latest" in command:
        app_dir = Path(cwd) / "src" / "app"
        app_dir.mkdir(parents=True, exist_ok=True)
        (app_dir / "globals.css").write_text("body { margin: 0; }\n")
        (app_dir / "page.tsx").write_text("export default function Page() { return null }\n")
        (Path(cwd) / "package.json").write_text('{"name": "demo"}\n')
    elif command == "npx tailwindcss init -p":
        (Path(cwd) / "tailwind.config.js").write_text(
            "module.exports = {\n  content: [],\n  theme: {\n    extend: {},\n  },\n  plugins: [],\n}\n"
        )


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner(on_run=simulate_next_app)


@pytest.fixture
def templates_dir(tmp_path: Path) -> Path:
    root = tmp_path / "templates"
    (root / "src" / "components").mkdir(parents=True)
    (root / "src" / "lib").mkdir(parents=True)
    (root / "src" / "components" / "Button.tsx").write_text("export default function Button() {}\n")
    (root / "src" / "lib" / "api.ts").write_text("export async function fetcher() {}\n")
    (root / ".prettierrc").write_text('{"semi": true}\n')
    (root / "README.md").write_text("# Starter\n")
    return root


@pytest.fixture
def workdir(tmp_path: Path) -> Path:
    path = tmp_path / "work"
    path.mkdir()
    return path.resolve()


@pytest.fixture
def make_selections() -> Callable[..., UserSelections]:
    def _make(name="demo", location=LocationMode.NEW_FOLDER, package_manager=PackageManager.NPM, features=()):
        return UserSelections(
            name=name,
            location=location,
            package_manager=package_manager,
            features=frozenset(FeatureId(f) for f in features),
        )

    return _make


@pytest.fixture
def config(templates_dir: Path) -> StarterConfig:
    return StarterConfig(templates_dir=templates_dir)
