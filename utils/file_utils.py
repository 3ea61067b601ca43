from __future__ import annotations

import os
from pathlib import Path

__all__: list[str] = ["FileUtils"]


class FileUtils:
    """Utility class for resolving user-supplied paths."""

    @staticmethod
    def resolve_path(path: str | Path, *, base_dir: Path | None = None) -> Path:
        """Convert a user-input path to an absolute path.

        Expands environment variables (e.g., $HOME, %APPDATA%) and ``~``; relative paths are
        resolved against ``base_dir``, or the current working directory when omitted.

        Args:
            path (str | Path): The input path (e.g., "~/logs/$APP_ENV/translator.log").
            base_dir (Path | None): Directory relative paths are joined to.

        Returns:
            Path: The absolute path.
        """
        expanded: Path = Path(os.path.expandvars(str(path))).expanduser()
        if expanded.is_absolute():
            return expanded.resolve()
        return ((base_dir or Path.cwd()) / expanded).resolve()

    @staticmethod
    def find_config_file(filename: str | Path, script_path: str | Path) -> Path:
        """Locate a configuration file.

        The current working directory is searched first, then the directory of the running
        script. When neither holds the file, the working-directory path is returned so that
        the caller reports it as missing.

        Args:
            filename (str | Path): Configuration file name or path.
            script_path (str | Path): Path of the running script.

        Returns:
            Path: The absolute path of the configuration file.
        """
        candidate: Path = FileUtils.resolve_path(filename)
        if candidate.exists() or Path(filename).is_absolute():
            return candidate
        beside_script: Path = FileUtils.resolve_path(filename, base_dir=Path(script_path).resolve().parent)
        return beside_script if beside_script.exists() else candidate
