from pathlib import Path

from content_normalizer.storage.base import BaseStorage
from content_normalizer.storage.exceptions import StorageError


class LocalStorage(BaseStorage):
    """Stores blobs as files below a root directory."""

    ROOT = Path("storage")

    def __init__(self, root: Path | None = None) -> None:
        self._root = root if root is not None else self.ROOT

    @property
    def root(self) -> Path:
        return self._root

    def put(self, name: str, data: bytes) -> None:
        path = self._resolve_path(name)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(data)
        except OSError as exc:
            raise StorageError(f"Cannot write {path}: {exc}") from exc

    def get(self, name: str) -> bytes:
        path = self._resolve_path(name)
        if not path.exists():
            raise StorageError(f"File not found: {path}")
        try:
            return path.read_bytes()
        except OSError as exc:
            raise StorageError(f"Cannot read {path}: {exc}") from exc

    def _resolve_path(self, name: str) -> Path:
        return self._root / name
