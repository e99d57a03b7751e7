"""Strip hash prefixes from exported XML filenames."""

from collections.abc import Sequence
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from hashstrip.models.rename import DEFAULT_PREFIX_LENGTH, RenameOp, RenameResult


console = Console()

# Only files matching this pattern are renamed, one level deep in each directory
XML_PATTERN = "*.xml"


class BatchRenamer:
    """Renames matching files in a list of directories, one directory at a time."""

    def __init__(
        self,
        prefix_length: int | None = None,
        append_parent: bool = True,
        verbose: bool = False,
    ) -> None:
        """Initialize the renamer.

        Args:
            prefix_length: Number of leading characters to strip. Defaults to 32.
            append_parent: Prepend the parent directory name to the stripped filename.
            verbose: Print a line for every rename.
        """
        if prefix_length is not None and prefix_length < 0:
            raise ValueError(f"Prefix length must not be negative, got {prefix_length}")

        self.prefix_length = DEFAULT_PREFIX_LENGTH if prefix_length is None else prefix_length
        self.append_parent = append_parent
        self.verbose = verbose

    def find_matches(self, directory: Path) -> list[Path]:
        """Find files directly inside a directory that should be renamed.

        Args:
            directory: Directory to scan (not recursively).

        Returns:
            Matching files sorted by name.
        """
        return sorted(path for path in directory.glob(XML_PATTERN) if path.is_file())

    def build_operation(self, source: Path) -> RenameOp:
        """Compute the target path for a single file.

        Args:
            source: File to rename.

        Returns:
            RenameOp pointing at the new name in the same directory.

        Raises:
            IndexError: If the filename is shorter than the prefix length.
        """
        name = source.name
        if len(name) < self.prefix_length:
            raise IndexError(
                f"Filename '{name}' is shorter than the prefix length ({len(name)} < {self.prefix_length})"
            )

        new_name = name[self.prefix_length :]
        if self.append_parent:
            # Relative parents such as "." have no name of their own
            new_name = source.absolute().parent.name + new_name

        return RenameOp(source=source, target=source.parent / new_name)

    def apply(self, op: RenameOp) -> None:
        """Rename a file on disk.

        Args:
            op: Operation to apply.

        Raises:
            FileNotFoundError: If the source file doesn't exist.
            FileExistsError: If a different file already exists at the target.
        """
        if not op.source.exists():
            raise FileNotFoundError(f"Source file not found: {op.source}")

        # Renaming a file onto itself leaves it unchanged
        if op.target != op.source:
            if op.target.exists():
                raise FileExistsError(f"Target file already exists: {op.target}")
            op.source.rename(op.target)

        if self.verbose:
            console.print(f"file {escape(str(op.source))} renamed to {escape(str(op.target))}", soft_wrap=True)

    def rename_all(self, directories: Sequence[Path]) -> RenameResult:
        """Rename every matching file in the given directories.

        Directories are processed in order and each file is renamed before the
        next one is computed. The first error aborts the run; files renamed
        before it stay renamed.

        Args:
            directories: Directories to process.

        Returns:
            RenameResult with the applied operations.
        """
        result = RenameResult()
        for directory in directories:
            for source in self.find_matches(directory):
                op = self.build_operation(source)
                self.apply(op)
                result.operations.append(op)

        return result


def rename_all(
    directories: Sequence[Path],
    prefix_length: int | None = None,
    append_parent: bool = True,
    verbose: bool = False,
) -> RenameResult:
    """Rename matching files in every directory with a one-off BatchRenamer."""
    renamer = BatchRenamer(prefix_length=prefix_length, append_parent=append_parent, verbose=verbose)
    return renamer.rename_all(directories)
