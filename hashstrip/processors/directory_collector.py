"""Collect the directories a rename run should visit."""

import os
from pathlib import Path

from rich.console import Console
from rich.markup import escape


console = Console()


def collect_directories(root: Path, recursive: bool = False) -> list[Path]:
    """Build the list of directories to process.

    The root always comes first. When recursive, every descendant directory at
    any depth follows it in file system enumeration order, which is platform
    dependent. Callers should not rely on the order of descendants. Symlinks to
    directories are followed, and a directory reachable through more than one
    path is only listed the first time it is seen.

    Args:
        root: Directory to start from.
        recursive: If True, include all descendant directories.

    Returns:
        List of directory paths, root first.

    Raises:
        FileNotFoundError: If the root does not exist, is not a directory, or cannot be read.
    """
    if not root.is_dir():
        raise FileNotFoundError(f"Directory not found: {root}")

    directories = [root]
    if not recursive:
        return directories

    def _on_error(error: OSError) -> None:
        if error.filename is not None and Path(error.filename) == root:
            raise FileNotFoundError(f"Directory not found: {root}") from error
        console.print(f"[yellow]Warning:[/yellow] {escape(str(error))}", soft_wrap=True)

    # Symlinked directories are followed; each real directory is visited once so loops terminate
    visited: set[tuple[int, int]] = set()
    for dirpath, dirnames, _filenames in os.walk(root, onerror=_on_error, followlinks=True):
        path = Path(dirpath)
        stat = os.stat(path)
        key = (stat.st_dev, stat.st_ino)
        if key in visited:
            dirnames[:] = []
            console.print(
                f"[yellow]Warning:[/yellow] skipping already visited directory {escape(str(path))}",
                soft_wrap=True,
            )
            continue
        visited.add(key)

        if path != root:
            directories.append(path)

    return directories
