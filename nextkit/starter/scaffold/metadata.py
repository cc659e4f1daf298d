from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Any, Callable, FrozenSet, Optional
from .exceptions import InputError

if TYPE_CHECKING:
    from .runner import CommandRunner


class LocationMode(str, Enum):
    NEW_FOLDER = "new"
    CURRENT_DIR = "current"


class PackageManager(str, Enum):
    NPM = "npm"
    PNPM = "pnpm"


class FeatureId(str, Enum):
    TAILWIND = "tailwind"
    SHADCN = "shadcn"
    PRISMA = "prisma"
    REDUX = "redux"
    REACT_QUERY = "react-query"
    FRAMER = "framer"
    I18N = "i18n"
    JOSE = "jose"


@dataclass(frozen=True)
class UserSelections:
    name: str
    location: LocationMode
    package_manager: PackageManager
    features: FrozenSet[FeatureId] = field(default_factory=frozenset)

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise InputError("Project name is required.")

        # Enforce features as a frozenset (immutable safety)
        object.__setattr__(self, "features", frozenset(FeatureId(f) for f in self.features))

    def resolve_project_path(self, cwd: Optional[Path] = None) -> Path:
        """Return the absolute directory the project lives in."""
        base = Path(cwd or Path.cwd()).resolve()
        if self.location == LocationMode.CURRENT_DIR:
            return base
        return base / self.name

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "location": self.location.value,
            "package_manager": self.package_manager.value,
            "features": sorted(f.value for f in self.features),
        }


@dataclass(frozen=True)
class ProjectContext:
    """What a wiring procedure needs to act on the generated project."""
    path: Path
    package_manager: PackageManager
    runner: "CommandRunner"


@dataclass(frozen=True)
class Step:
    """
    One unit of the generation pipeline.

    ``name`` is looked up in the failure policy table and ``message`` is announced
    before the step runs. ``command`` is the external command behind the step,
    shown in dry runs and in the manual recovery hint when the step fails.
    """
    name: str
    message: str
    action: Callable[[], Any]
    command: Optional[str] = None
