import logging
import shutil
import subprocess
from pathlib import Path
from typing import Iterable, NamedTuple, Optional, Sequence, Tuple
from .exceptions import CommandFailed
from .metadata import PackageManager


logger = logging.getLogger(__name__)


IMPORT_ALIAS = "@/*"


class Command(NamedTuple):
    executable: str
    args: Tuple[str, ...]

    def __str__(self) -> str:
        return " ".join([self.executable, *self.args])


class CommandRunner:
    """
    Runs external commands one at a time.

    Standard streams are inherited by default so the user sees live output and
    can answer interactive tools. A non-zero exit or a spawn failure raises
    ``CommandFailed``; callers decide whether that is fatal.
    """

    def run(self, executable: str, args: Sequence[str] = (), cwd: Optional[Path] = None, inherit_stdio: bool = True) -> None:
        # Resolve through PATH so shims like npx.cmd are found on Windows
        resolved = shutil.which(executable) or executable
        command = [resolved, *args]
        logger.debug(f"Running {' '.join(command)} in {cwd or Path.cwd()}")

        try:
            if inherit_stdio:
                subprocess.run(command, cwd=str(cwd) if cwd else None, check=True)
            else:
                subprocess.run(
                    command,
                    cwd=str(cwd) if cwd else None,
                    check=True,
                    stdout=subprocess.PIPE,
                    stderr=subprocess.PIPE,
                )
        except subprocess.CalledProcessError as e:
            raise CommandFailed(executable, args, returncode=e.returncode, cause=e) from e
        except OSError as e:
            raise CommandFailed(executable, args, cause=e) from e

    def run_command(self, command: Command, cwd: Optional[Path] = None) -> None:
        self.run(command.executable, command.args, cwd=cwd)


def bootstrap_command(package_manager: PackageManager, project_path: Path) -> Command:
    flags = ("--typescript", "--eslint", "--import-alias", IMPORT_ALIAS)
    if package_manager == PackageManager.PNPM:
        return Command("pnpm", ("create", "next-app@latest", str(project_path), *flags))
    return Command("npx", ("create-next-app@latest", str(project_path), *flags))


def install_command(package_manager: PackageManager, packages: Iterable[str], dev: bool = False) -> Command:
    if package_manager == PackageManager.PNPM:
        head = ("add", "-D") if dev else ("add",)
        return Command("pnpm", (*head, *packages))
    head = ("install", "--save-dev") if dev else ("install",)
    return Command("npm", (*head, *packages))


def reinstall_command(package_manager: PackageManager) -> Command:
    return Command(package_manager.value, ("install",))


def npx_command(*args: str) -> Command:
    return Command("npx", tuple(args))
