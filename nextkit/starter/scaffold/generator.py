import json
import logging
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional
import click # type: ignore
from nextkit.starter.config import StarterConfig
from .exceptions import CommandFailed, InputError
from .features import plan_dependencies, selected_features
from .mergers import merge_templates
from .metadata import LocationMode, ProjectContext, Step, UserSelections
from .runner import CommandRunner, bootstrap_command, install_command, npx_command, reinstall_command


logger = logging.getLogger(__name__)


class Policy(str, Enum):
    FATAL = "fatal"
    RECOVERABLE = "recoverable"


# What a failing step does to the run. Fatal failures abort everything,
# recoverable ones become a warning and the next step runs.
FAILURE_POLICY: Dict[str, Policy] = {
    "bootstrap": Policy.FATAL,
    "templates": Policy.FATAL,
    "install": Policy.FATAL,
    "install-dev": Policy.FATAL,
    "tailwind-init": Policy.RECOVERABLE,
    "tailwind-config": Policy.FATAL,
    "tailwind-globals": Policy.FATAL,
    "shadcn-init": Policy.RECOVERABLE,
    "prisma-schema": Policy.FATAL,
    "prisma-generate": Policy.RECOVERABLE,
    "prisma-migrate": Policy.RECOVERABLE,
    "i18n-config": Policy.FATAL,
    "update-dependencies": Policy.RECOVERABLE,
}


class ProjectGenerator:
    """
    Create a new Next.js starter project from the user's selections.

    The project path is resolved once, here, and every step runs inside it.
    Steps run strictly one after another; see ``FAILURE_POLICY`` for which
    failures abort the run.
    """

    def __init__(self, selections: UserSelections, config: Optional[StarterConfig] = None, runner: Optional[CommandRunner] = None, cwd: Optional[Path] = None):
        self.selections = selections
        self.config = config or StarterConfig()
        self.runner = runner or CommandRunner()
        self.dry_run = self.config.dry_run

        self.project_path = selections.resolve_project_path(cwd)
        self.runtime_packages, self.dev_packages = plan_dependencies(selections.features)

        self.context = ProjectContext(self.project_path, selections.package_manager, self.runner)
        self.warnings: List[str] = []

    def _prepare_base_dir(self):
        """Validate the target directory and create it for a new folder."""
        if self.selections.location == LocationMode.NEW_FOLDER:
            if self.project_path.exists():
                raise InputError(f"Folder {self.project_path} already exists.")

            if self.dry_run:
                logger.info(f"[dry-run] Would create directory: {self.project_path}")
            else:
                self.project_path.mkdir(parents=True)
        else:
            logger.info("Using current directory as project.")

        logger.info(f"Creating project at '{self.project_path}'...")

    def _run(self, command):
        self.runner.run_command(command, cwd=self.project_path)

    def _update_dependencies(self):
        self._run(npx_command("npm-check-updates", "-u"))
        self._run(reinstall_command(self.selections.package_manager))

    def _core_steps(self) -> List[Step]:
        package_manager = self.selections.package_manager
        steps = []

        bootstrap = bootstrap_command(package_manager, self.project_path)
        steps.append(Step("bootstrap", "Bootstrapping Next.js (TypeScript + ESLint)", lambda: self._run(bootstrap), str(bootstrap)))

        steps.append(Step(
            "templates",
            "Copying templates (configs, styles, starter code)",
            lambda: merge_templates(self.config.templates_dir, self.project_path),
        ))

        if self.runtime_packages:
            install = install_command(package_manager, self.runtime_packages)
            steps.append(Step("install", "Installing dependencies", lambda: self._run(install), str(install)))

        if self.dev_packages:
            install_dev = install_command(package_manager, self.dev_packages, dev=True)
            steps.append(Step("install-dev", "Installing dev dependencies", lambda: self._run(install_dev), str(install_dev)))

        return steps

    def steps(self) -> List[Step]:
        """Return the ordered pipeline for the current selections."""
        steps = self._core_steps()

        for feature in selected_features(self.selections.features):
            if feature.wiring is not None:
                steps.extend(feature.wiring(self.context))

        update = f"{npx_command('npm-check-updates', '-u')} && {reinstall_command(self.selections.package_manager)}"
        steps.append(Step("update-dependencies", "Updating package.json versions to latest where possible", self._update_dependencies, update))
        return steps

    def _run_step(self, step: Step):
        click.secho(f"\n{step.message}...", fg="cyan")

        if self.dry_run:
            logger.info(f"[dry-run] Would run step '{step.name}'" + (f": {step.command}" if step.command else ""))
            return

        try:
            step.action()
        except CommandFailed as e:
            if FAILURE_POLICY[step.name] == Policy.FATAL:
                raise

            warning = f"{step.message} failed ({e}). Run '{step.command}' inside {self.project_path} to finish this step."
            logger.debug(warning)
            click.secho(f"Warning: {warning}", fg="yellow", err=True)
            self.warnings.append(warning)

    def generate(self) -> dict:
        """Run the full project creation flow."""
        self._prepare_base_dir()

        for step in self.steps():
            self._run_step(step)

        return self.summary()

    def summary(self) -> dict:
        """Return project metadata (paths, packages, flags and warnings)."""
        return {
            **self.selections.to_dict(),
            "project_path": str(self.project_path),
            "templates_dir": str(self.config.templates_dir),
            "dependencies": list(self.runtime_packages),
            "dev_dependencies": list(self.dev_packages),
            "dry_run": self.dry_run,
            "warnings": list(self.warnings),
        }

    def print_summary(self):
        click.echo(json.dumps(self.summary(), indent=4))
