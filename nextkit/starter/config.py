import logging
from dataclasses import dataclass, field
from os import environ
from pathlib import Path
from typing import Optional


DEFAULT_TEMPLATES_DIR = Path(__file__).parent / "commands" / "stubs" / "project"


@dataclass
class StarterConfig:
    """
    Runtime settings for the starter.

    Values come from the environment (``NEXTKIT_TEMPLATES_DIR``, ``NEXTKIT_LOG_LEVEL``)
    and can be overridden by command line options.
    """

    ENV_PREFIX = "NEXTKIT_"

    templates_dir: Path = field(default_factory=lambda: DEFAULT_TEMPLATES_DIR)
    log_level: str = "INFO"
    dry_run: bool = False

    @classmethod
    def from_env(cls) -> "StarterConfig":
        config = cls()

        templates_dir = environ.get(f"{cls.ENV_PREFIX}TEMPLATES_DIR")
        if templates_dir:
            config.templates_dir = Path(templates_dir)

        log_level = environ.get(f"{cls.ENV_PREFIX}LOG_LEVEL")
        if log_level:
            config.log_level = log_level.upper()

        return config

    def override(self, templates_dir: Optional[Path] = None, verbose: bool = False, dry_run: bool = False) -> "StarterConfig":
        if templates_dir is not None:
            self.templates_dir = Path(templates_dir)
        if verbose:
            self.log_level = "DEBUG"
        if dry_run:
            self.dry_run = True
        return self


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(levelname)s %(name)s: %(message)s",
        force=True,
    )
