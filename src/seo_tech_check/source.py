"""Discovery and loading of the markup files to audit."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional

from pathspec import GitIgnoreSpec

from .models import AuditInput

logger = logging.getLogger(__name__)

BINARY_SNIFF_BYTES = 1024


class NoInputError(Exception):
    """Raised when no file is left to scan after discovery and filtering."""

    def __init__(self, root: Path):
        self.root = root
        super().__init__(f"No files found for analysis in {root}")


@dataclass(frozen=True)
class SourceFile:
    """A scanned file: POSIX path relative to the root and its raw text."""

    path: str
    content: str


@dataclass
class ReadStats:
    read: int = 0
    skipped: int = 0


def load_ignore_spec(root: Path, ignore_file: str = ".gitignore") -> Optional[GitIgnoreSpec]:
    """Load gitignore-style exclusion rules from the root of the tree.

    Returns None when there is no ignore file or it cannot be read, which
    means nothing is excluded.
    """
    ignore_path = root / ignore_file
    if not ignore_path.is_file():
        return None

    try:
        lines = ignore_path.read_text(encoding="utf-8").splitlines()
        return GitIgnoreSpec.from_lines(lines)
    except (OSError, UnicodeDecodeError, ValueError) as e:
        logger.warning(f"Could not load {ignore_path}, ignoring nothing: {e}")
        return None


def _is_candidate(name: str, extensions: set[str], filenames: set[str]) -> bool:
    return name in filenames or any(name.endswith(ext) for ext in extensions)


def discover_files(config: AuditInput) -> list[Path]:
    """Find every markup file under the root that is not excluded.

    The walk includes dot-directories and dotfiles, follows symlinked
    directories (each real directory is visited once) and is sorted so the
    result order is stable between runs.

    Raises:
        NotADirectoryError: If the root is not a directory.
        NoInputError: If no file remains after filtering.
    """
    root = Path(config.path).resolve()
    if not root.is_dir():
        raise NotADirectoryError(f"Not a directory: {root}")

    spec = load_ignore_spec(root, config.ignore_file)
    extensions = set(config.extensions)
    filenames = set(config.filenames)
    files: list[Path] = []
    ignored = 0
    visited: set[str] = set()

    for dirpath, dirs, names in os.walk(root, followlinks=True):
        # Symlinked directories are followed once per real location
        real = os.path.realpath(dirpath)
        if real in visited:
            dirs[:] = []
            continue
        visited.add(real)
        dirs.sort()
        for name in sorted(names):
            if not _is_candidate(name, extensions, filenames):
                continue

            filepath = Path(dirpath) / name
            if not filepath.is_file():
                continue

            relative = filepath.relative_to(root).as_posix()
            if spec is not None and spec.match_file(relative):
                ignored += 1
                continue
            files.append(filepath)

    logger.info(f"Discovered {len(files)} file(s) in {root} ({ignored} ignored)")

    if not files:
        raise NoInputError(root)
    return files


def read_sources(
    root: Path, paths: list[Path], stats: Optional[ReadStats] = None
) -> Iterator[SourceFile]:
    """Yield the text content of each file, skipping files that cannot be read.

    Content is decoded as UTF-8 with replacement characters so pages in legacy
    encodings are still scanned. Binary files (NUL bytes in the first
    kilobyte) and files that vanish or lack permissions are dropped silently
    apart from a debug log entry.
    """
    if stats is None:
        stats = ReadStats()

    for filepath in paths:
        try:
            data = filepath.read_bytes()
        except OSError as e:
            logger.debug(f"Skipping unreadable file {filepath}: {e}")
            stats.skipped += 1
            continue

        if b"\x00" in data[:BINARY_SNIFF_BYTES]:
            logger.debug(f"Skipping binary file {filepath}")
            stats.skipped += 1
            continue

        content = data.decode("utf-8", errors="replace")
        stats.read += 1
        yield SourceFile(path=filepath.relative_to(root).as_posix(), content=content)
