"""Per-note document context: frontmatter block plus source/destination paths."""

from __future__ import annotations

from collections.abc import Iterator, Mapping, MutableMapping
from pathlib import Path
from typing import Any

from vault_export.errors import MissingRequiredFrontmatterKey


class Frontmatter(MutableMapping[str, Any]):
    """YAML frontmatter with accessors that report absence instead of raising.

    Values follow the YAML data model: None, bool, int/float, str, list or dict.
    """

    def __init__(self, data: Mapping[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = dict(data or {})

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self._data[key] = value

    def __delitem__(self, key: str) -> None:
        del self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"Frontmatter({self._data!r})"

    def get_str(self, key: str) -> str | None:
        value = self._data.get(key)
        return value if isinstance(value, str) else None

    def get_sequence(self, key: str) -> list | None:
        value = self._data.get(key)
        if isinstance(value, (list, tuple)):
            return list(value)
        return None

    def require_str(self, key: str, file: Path | None = None) -> str:
        """Return a string value or raise MissingRequiredFrontmatterKey."""
        value = self.get_str(key)
        if value is None:
            raise MissingRequiredFrontmatterKey(key, file)
        return value


class Context:
    """Mutable state for one note while it moves through the pipeline."""

    def __init__(
        self,
        current_file: str | Path,
        destination: str | Path,
        frontmatter: Mapping[str, Any] | None = None,
    ) -> None:
        self._current_file = Path(current_file)
        self.destination = Path(destination)
        if isinstance(frontmatter, Frontmatter):
            self.frontmatter = frontmatter
        else:
            self.frontmatter = Frontmatter(frontmatter)

    @property
    def current_file(self) -> Path:
        return self._current_file

    def __repr__(self) -> str:
        return (
            f"Context(current_file={str(self._current_file)!r}, "
            f"destination={str(self.destination)!r}, frontmatter={self.frontmatter!r})"
        )
