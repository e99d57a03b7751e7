"""Rename data models."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


# Length of a hex-encoded 128-bit hash, the prefix upstream exports put on every file
DEFAULT_PREFIX_LENGTH = 32


class RunConfig(BaseModel):
    """Options for a single rename run, parsed once from the command line."""

    model_config = ConfigDict(frozen=True)

    directory: Path = Field(description="Root directory that contains the files to rename")
    prefix_length: int | None = Field(
        default=None,
        description="Number of leading characters to strip from each filename",
        ge=0,
    )
    recursive: bool = Field(default=False, description="Also process every descendant directory")
    append_parent: bool = Field(default=True, description="Prepend the parent directory name to the new filename")
    verbose: bool = Field(default=False, description="Report every rename")

    @property
    def effective_prefix_length(self) -> int:
        """Prefix length to strip, falling back to the default."""
        return DEFAULT_PREFIX_LENGTH if self.prefix_length is None else self.prefix_length


class RenameOp(BaseModel):
    """A single file rename operation."""

    model_config = ConfigDict(frozen=True)

    source: Path = Field(description="Current path of the file")
    target: Path = Field(description="Path the file is renamed to, always in the same directory")

    def __str__(self) -> str:
        return f"RenameOp('{self.source}' -> '{self.target}')"


class RenameResult(BaseModel):
    """Rename operations applied during a run, in the order they were applied."""

    operations: list[RenameOp] = Field(
        description="List of applied rename operations",
        default_factory=list,
    )

    def __len__(self) -> int:
        return len(self.operations)
