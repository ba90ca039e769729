from __future__ import annotations

import os

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _single_segment(name: str) -> str:
    if not name or "/" in name or os.sep in name:
        raise ValueError(f"entry name must be a single path segment, got {name!r}")
    return name


class FileEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str

    @field_validator("name")
    @classmethod
    def check_name(cls, v: str) -> str:
        return _single_segment(v)


class DirectoryEntry(BaseModel):
    name: str
    subdirectories: list[DirectoryEntry] = Field(default_factory=list)
    files: list[FileEntry] = Field(default_factory=list)

    @field_validator("name")
    @classmethod
    def check_name(cls, v: str) -> str:
        return _single_segment(v)

    def register_file(self, file: FileEntry) -> None:
        self.files.append(file)

    def register_directory(self, directory: DirectoryEntry) -> None:
        self.subdirectories.append(directory)
