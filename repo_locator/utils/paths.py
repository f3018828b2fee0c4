"""Path helpers shared by the VCS lookups."""

from pathlib import Path


def normalize_path(path: str | Path) -> Path:
    """Absolute path with symlinks resolved in the parent directories only.

    A symlink in the last component is kept, so a link inside a repository is
    looked up under its own name rather than its target's.

    Example:
        >>> normalize_path("/repo/link.go")  # link.go -> src/a.go
        PosixPath('/repo/link.go')
    """
    path = Path(path).absolute()
    if path.name in ("", ".."):
        return path.resolve()
    return path.parent.resolve() / path.name
