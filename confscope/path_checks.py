"""Path normalization and checks on filesystem paths."""

from __future__ import annotations

import os
from typing import Union

from confscope.checks import CheckBase

PathLike = Union[str, "os.PathLike[str]"]


def normalize_path(value: PathLike) -> str:
    """Lexically normalize a path, keeping a trailing separator for directories."""
    text = os.fspath(value)
    if not text:
        return ""
    absolute = text.startswith("/")
    segments = text.split("/")
    trailing = text.endswith("/") or segments[-1] in (".", "..")

    parts: list[str] = []
    for segment in segments:
        if segment in ("", "."):
            continue
        if segment == "..":
            if parts and parts[-1] != "..":
                parts.pop()
            elif not absolute:
                parts.append("..")
            continue
        parts.append(segment)

    if not parts:
        return "/" if absolute else "."
    result = ("/" if absolute else "") + "/".join(parts)
    if trailing and parts[-1] != "..":
        result += "/"
    return result


class PathCheck(CheckBase):
    """Base for checks on a single path."""

    def __init__(self, path: PathLike, name: str = "") -> None:
        self.path = os.fspath(path)
        self._name = name

    def name(self) -> str:
        return self._name

    def _missing_message(self) -> str:
        return f"path '{self.path}' does not exist"


class IsSet(PathCheck):
    """The path is not empty."""

    def valid(self) -> bool:
        return bool(self.path)

    def message(self) -> str:
        return "path is not set"


class Exists(PathCheck):
    """The path exists."""

    def valid(self) -> bool:
        return os.path.exists(self.path)

    def message(self) -> str:
        return self._missing_message()


class DoesNotExist(PathCheck):
    """The path does not exist yet."""

    def valid(self) -> bool:
        return not os.path.exists(self.path)

    def message(self) -> str:
        return f"path '{self.path}' already exists"


class IsFile(PathCheck):
    """The path is a regular file."""

    def valid(self) -> bool:
        return os.path.isfile(self.path)

    def message(self) -> str:
        if not os.path.exists(self.path):
            return self._missing_message()
        return f"path '{self.path}' is not a file"


class IsDirectory(PathCheck):
    """The path is a directory."""

    def valid(self) -> bool:
        return os.path.isdir(self.path)

    def message(self) -> str:
        if not os.path.exists(self.path):
            return self._missing_message()
        return f"path '{self.path}' is not a directory"


class IsEmptyDirectory(PathCheck):
    """The path is a directory without entries."""

    def valid(self) -> bool:
        return os.path.isdir(self.path) and not os.listdir(self.path)

    def message(self) -> str:
        if not os.path.exists(self.path):
            return self._missing_message()
        if not os.path.isdir(self.path):
            return f"path '{self.path}' is not a directory"
        return f"path '{self.path}' is not an empty directory"


class HasExtension(PathCheck):
    """The path's file name carries the given extension (without the dot)."""

    def __init__(self, path: PathLike, extension: str, name: str = "") -> None:
        super().__init__(path, name)
        self.extension = extension

    def _raw_extension(self) -> str:
        return os.path.splitext(self.path)[1]

    def valid(self) -> bool:
        extension = self._raw_extension()
        if not extension:
            return False
        return extension[1:] == self.extension

    def message(self) -> str:
        extension = self._raw_extension()[1:]
        prefix = f"path '{self.path}' is not a file with extension '{self.extension}'"
        if not extension:
            return f"{prefix} (has no extension)"
        return f"{prefix} (is: '{extension}')"