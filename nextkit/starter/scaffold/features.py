from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Tuple
from .metadata import FeatureId, ProjectContext, Step
from .wiring import i18n_steps, prisma_steps, shadcn_steps, tailwind_steps


# Always installed as dev dependencies, whatever the feature selection.
BASELINE_DEV_PACKAGES: Tuple[str, ...] = (
    "eslint@latest",
    "@types/react@latest",
    "@types/node@latest",
    "@types/react-dom@latest",
)


@dataclass(frozen=True)
class Feature:
    id: FeatureId
    title: str
    runtime: Tuple[str, ...] = ()
    dev: Tuple[str, ...] = ()
    wiring: Optional[Callable[[ProjectContext], List[Step]]] = None

    def to_dict(self) -> dict:
        return {
            "id": self.id.value,
            "title": self.title,
            "runtime": list(self.runtime),
            "dev": list(self.dev),
            "wiring": self.wiring is not None,
        }


# Declaration order drives prompt order, install order and wiring order.
FEATURES: Tuple[Feature, ...] = (
    Feature(
        FeatureId.TAILWIND,
        "TailwindCSS",
        runtime=("tailwindcss@latest", "postcss@latest", "autoprefixer@latest"),
        wiring=tailwind_steps,
    ),
    Feature(
        FeatureId.SHADCN,
        "shadcn/ui",
        runtime=(
            "@shadcn/ui@latest",
            "class-variance-authority@latest",
            "tailwind-variants@latest",
            "lucide-react@latest",
            "react-hook-form@latest",
            "zod@latest",
            "@radix-ui/react-accordion@latest",
        ),
        wiring=shadcn_steps,
    ),
    Feature(
        FeatureId.PRISMA,
        "Prisma (SQLite)",
        runtime=("@prisma/client@latest",),
        dev=("prisma@latest",),
        wiring=prisma_steps,
    ),
    Feature(
        FeatureId.REDUX,
        "Redux Toolkit",
        runtime=("@reduxjs/toolkit@latest", "react-redux@latest"),
    ),
    Feature(
        FeatureId.REACT_QUERY,
        "TanStack React Query",
        runtime=("@tanstack/react-query@latest",),
    ),
    Feature(
        FeatureId.FRAMER,
        "Framer Motion",
        runtime=("framer-motion@latest",),
    ),
    Feature(
        FeatureId.I18N,
        "i18next",
        runtime=(
            "i18next@latest",
            "react-i18next@latest",
            "next-i18next@latest",
            "i18next-browser-languagedetector@latest",
        ),
        wiring=i18n_steps,
    ),
    Feature(
        FeatureId.JOSE,
        "jose",
        runtime=("jose@latest",),
    ),
)


def selected_features(features: Iterable[FeatureId]) -> List[Feature]:
    """Return the selected features in declaration order."""
    wanted = {FeatureId(f) for f in features}
    return [feature for feature in FEATURES if feature.id in wanted]


def _unique(packages: Iterable[str]) -> List[str]:
    seen = set()
    result = []
    for package in packages:
        if package not in seen:
            seen.add(package)
            result.append(package)
    return result


def plan_dependencies(features: Iterable[FeatureId]) -> Tuple[List[str], List[str]]:
    """
    Derive the runtime and dev package lists for a feature selection.

    Runtime packages are each selected feature's packages in declaration order.
    Dev packages are the baseline set followed by the features' dev packages.
    Duplicates are dropped, first occurrence wins.
    """
    chosen = selected_features(features)

    runtime = _unique(package for feature in chosen for package in feature.runtime)
    dev = _unique([*BASELINE_DEV_PACKAGES, *(package for feature in chosen for package in feature.dev)])
    return runtime, dev
