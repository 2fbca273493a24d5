"""Files kept under the configuration, data and temporary directories."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Union

PathLike = Union[str, "os.PathLike[str]"]

REQUESTS_FOLDER = "collection/"


def _create_file_if_not_exists(path: Path) -> Path:
    if not path.exists():
        path.parent.mkdir(parents=True, exist_ok=True)
        path.touch()
    return path


def _files_in(directory: Path) -> list[Path]:
    return sorted(entry for entry in directory.iterdir() if not entry.is_dir())


class FileService:
    """Creates, lists, removes and renames files below three root directories."""

    def __init__(
        self,
        config_root_path: PathLike,
        data_app_root_path: PathLike,
        temp_root_path: PathLike,
    ) -> None:
        self.config_root_path = Path(config_root_path)
        self.data_app_root_path = Path(data_app_root_path)
        self.temp_root_path = Path(temp_root_path)

    def get_or_create_config_file(self, path: str) -> Path:
        """Return the config file at ``path``, creating it empty if missing."""
        return _create_file_if_not_exists(self.config_root_path / path)

    def get_or_create_data_file(self, path: str) -> Path:
        """Return the data file at ``path``, creating it empty if missing."""
        return _create_file_if_not_exists(self.data_app_root_path / path)

    def get_or_create_temp_file(self, path: str) -> Path:
        """Return the temporary file at ``path``, creating it empty if missing."""
        return _create_file_if_not_exists(self.temp_root_path / path)

    def find_all_data_files(self) -> list[Path]:
        """List the files (not directories) directly in the data directory."""
        return _files_in(self.data_app_root_path)

    def find_all_data_files_in_folders(self, folders: Iterable[str]) -> list[Path]:
        """List the files directly in a sub-folder of the data directory."""
        return _files_in(self.data_app_root_path / "/".join(folders))

    def remove_file(self, path: PathLike) -> None:
        """Delete a file; a missing file raises ``FileNotFoundError``."""
        os.remove(path)

    def remove_data_file(self, path: str) -> None:
        self.remove_file(self.data_app_root_path / path)

    def remove_temp_file(self, path: str) -> None:
        self.remove_file(self.temp_root_path / path)

    def rename_file(self, source: PathLike, target: PathLike) -> None:
        """Move ``source`` to ``target``, replacing any file already there."""
        os.replace(source, target)

    def rename_data_file(self, source: str, target: str) -> None:
        self.rename_file(self.data_app_root_path / source, self.data_app_root_path / target)

    def rename_temp_file(self, source: str, target: str) -> None:
        self.rename_file(self.temp_root_path / source, self.temp_root_path / target)

    def get_or_create_saved_request_file(self, name: str) -> Path:
        """Return the file holding the saved request ``name``."""
        return self.get_or_create_data_file(f"{REQUESTS_FOLDER}/{name}")

    def find_all_saved_request_files(self) -> list[Path]:
        """List the files of all saved requests."""
        return self.find_all_data_files_in_folders([REQUESTS_FOLDER])

    def remove_saved_request_file(self, name: str) -> None:
        self.remove_data_file(f"{REQUESTS_FOLDER}/{name}")

    def rename_saved_request_file(self, name: str, new_name: str) -> None:
        self.rename_data_file(f"{REQUESTS_FOLDER}{name}", f"{REQUESTS_FOLDER}{new_name}")