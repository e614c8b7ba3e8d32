"""Filesystem Gateway - Infrastructure implementation of FileSystemProtocol."""

import shutil
from pathlib import Path

from attribute_order_linter.domain.protocols import FileSystemProtocol


class FileSystemGateway(FileSystemProtocol):
    """Infrastructure implementation of FileSystemProtocol using pathlib."""

    def resolve_path(self, path: str) -> str:
        """Resolve and normalize a path string."""
        return str(Path(path).resolve())

    def is_directory(self, path: str) -> bool:
        """Check if path is a directory."""
        return Path(path).is_dir()

    def glob_files(self, path: str, suffix: str) -> list[str]:
        """Get all files ending in suffix under path (recursive if directory)."""
        path_obj = Path(path).resolve()
        if path_obj.is_dir():
            return sorted(str(p) for p in path_obj.glob(f"**/*{suffix}") if p.is_file())
        return [str(path_obj)] if path_obj.name.endswith(suffix) else []

    def read_text(self, path: str, encoding: str = "utf-8") -> str:
        """Read text content from a file."""
        return Path(path).read_text(encoding=encoding)

    def write_text(self, path: str, content: str, encoding: str = "utf-8") -> None:
        """Write text content to a file."""
        Path(path).write_text(content, encoding=encoding)

    def copy_file(self, source: str, destination: str) -> None:
        """Copy a file, preserving metadata."""
        shutil.copy2(source, destination)
