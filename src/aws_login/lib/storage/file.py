"""Local file storage."""

from pathlib import Path


def read(path: Path) -> str | None:
    """Read file contents, or None if doesn't exist."""
    if not path.exists():
        return None
    return path.read_text(encoding="utf-8")


def write(path: Path, data: str) -> None:
    """Write data to file, creating parent dirs if needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(data, encoding="utf-8")


def append_line(path: Path, line: str) -> None:
    """Append one newline-terminated line, creating the file if needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("a", encoding="utf-8") as handle:
        handle.write(f"{line}\n")


def contains(path: Path, text: str) -> bool:
    """Check if the file exists and contains text."""
    if not path.exists():
        return False
    return text in path.read_text(encoding="utf-8")
