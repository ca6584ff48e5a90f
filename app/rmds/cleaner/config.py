"""Immutable run configuration for a cleanup walk."""

import os
from dataclasses import dataclass, replace

# Finder folder metadata file
DS_STORE_NAME = ".DS_Store"

# AppleDouble companion files carry the original name behind this prefix
APPLEDOUBLE_PREFIX = "._"


@dataclass(frozen=True, slots=True)
class CleanConfig:
    """Options controlling one traversal.

    A CleanConfig is built once per invocation and never mutated. Each
    starting path gets its own copy carrying that path's device id
    (see :meth:`for_root`).

    Attributes:
        dry_run: Report intended deletions without performing them.
        quiet: Suppress all output except deletion failures.
        verbose: Report every directory entered and every skipped subtree.
        interactive: Ask before deleting each matching file.
        max_depth: Deepest level that is scanned (root is 0). None is unlimited.
        one_file_system: Do not descend into directories on another device.
        root_device: Device id of the current root, set by for_root().
        excluded_names: Directory base names that are never entered.
        target_name: Exact file name to delete when clean_all is off.
        clean_all: Delete .DS_Store and every ``._*`` file.
    """

    dry_run: bool = False
    quiet: bool = False
    verbose: bool = False
    interactive: bool = False
    max_depth: int | None = None
    one_file_system: bool = False
    root_device: int | None = None
    excluded_names: frozenset[str] = frozenset()
    target_name: str = DS_STORE_NAME
    clean_all: bool = False

    def __post_init__(self) -> None:
        """Validate configuration values after initialization."""
        if self.max_depth is not None and self.max_depth < 0:
            msg = f"max_depth must be non-negative, got {self.max_depth}"
            raise ValueError(msg)
        if not self.target_name:
            msg = "target_name cannot be empty"
            raise ValueError(msg)
        if os.sep in self.target_name or (os.altsep and os.altsep in self.target_name):
            msg = f"target_name must be a plain file name, got '{self.target_name}'"
            raise ValueError(msg)

    def for_root(self, path: str) -> "CleanConfig":
        """Return a copy bound to the device of a starting path.

        Args:
            path: Starting directory of the walk. Symlinks are followed.

        Returns:
            New CleanConfig with root_device set.

        Raises:
            OSError: If the path cannot be stat'ed.
        """
        return replace(self, root_device=os.stat(path).st_dev)

    def describe_target(self) -> str:
        """Human-readable description of what is being deleted."""
        if self.clean_all:
            return f"{DS_STORE_NAME} and {APPLEDOUBLE_PREFIX}* files"
        return f"{self.target_name} files"
