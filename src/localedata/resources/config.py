"""Loader configuration.

Provides a single frozen dataclass that carries the resource roots a Loader
reads from. Both roots are fixed for the lifetime of the Loader.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from localedata.constants import CUSTOM_RESOURCES_SUBDIR

__all__ = ["LoaderConfig"]


@dataclass(frozen=True, slots=True)
class LoaderConfig:
    """Immutable configuration for a resource Loader.

    Both directories are resolved to absolute paths at construction time,
    so a later change of working directory cannot redirect a Loader.

    Attributes:
        resources_dir: Root holding the base resources.
        custom_resources_dir: Optional root holding user overrides. It mirrors
            the relative layout of ``resources_dir``. None disables overrides.

    Example:
        >>> config = LoaderConfig("/srv/resources", "/etc/myapp/overrides")
        >>> loader = Loader(config)

    Example - Overrides inside the resources root:
        >>> config = LoaderConfig.with_custom_subdir("/srv/resources")
        >>> config.custom_resources_dir
        PosixPath('/srv/resources/custom')
    """

    resources_dir: str | Path
    custom_resources_dir: str | Path | None = None

    def __post_init__(self) -> None:
        """Validate and resolve configured directories.

        Raises:
            ValueError: If a directory is given as an empty string
        """
        if not str(self.resources_dir):
            msg = "resources_dir cannot be empty"
            raise ValueError(msg)
        object.__setattr__(self, "resources_dir", Path(self.resources_dir).resolve())

        if self.custom_resources_dir is not None:
            if not str(self.custom_resources_dir):
                msg = "custom_resources_dir cannot be empty; pass None to disable overrides"
                raise ValueError(msg)
            object.__setattr__(
                self, "custom_resources_dir", Path(self.custom_resources_dir).resolve()
            )

    @classmethod
    def with_custom_subdir(cls, resources_dir: str | Path) -> LoaderConfig:
        """Build a config whose overrides live in ``<resources_dir>/custom``."""
        return cls(resources_dir, Path(resources_dir) / CUSTOM_RESOURCES_SUBDIR)
