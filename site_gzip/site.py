from pathlib import Path
from typing import Iterator, Mapping, Protocol


class SiteFile(Protocol):
    def destination(self, root) -> str: ...


class Site(Protocol):
    config: Mapping
    dest: str

    def each_site_file(self) -> Iterator[SiteFile]: ...


class StaticFile:
    """An output file addressed relative to the site's output root."""

    def __init__(self, relative_path):
        self.relative_path = Path(relative_path)

    def destination(self, root) -> str:
        return str(Path(root).resolve() / self.relative_path)

    def __repr__(self):
        return f"StaticFile({str(self.relative_path)!r})"


class DirectorySite:
    """A site that has already been written to ``dest``."""

    def __init__(self, dest, config=None):
        self.dest = str(dest)
        self.config = config or {}

    def each_site_file(self) -> Iterator[StaticFile]:
        root = Path(self.dest)
        if not root.exists():
            return
        # Materialise first so .gz files written during traversal are not picked up
        for path in sorted(root.rglob("*")):
            if path.is_file():
                yield StaticFile(path.relative_to(root))
