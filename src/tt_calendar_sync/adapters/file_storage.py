"""File storage backends consumed by the cached repositories."""

from __future__ import annotations

import logging
from pathlib import Path
import shutil
from typing import Protocol, runtime_checkable

import anyio


logger = logging.getLogger(__name__)

TMP_SUFFIX = ".tmp"


@runtime_checkable
class FileStorage(Protocol):
    """Whole-file text storage.

    ``read`` raises ``FileNotFoundError`` when the resource does not exist; any
    other exception is a genuine read failure. ``write`` must be all-or-nothing.
    """

    async def read(self, path: Path) -> str: ...

    async def write(self, path: Path, content: str) -> None: ...


class LocalFileStorage:
    """Local filesystem storage with atomic replace-on-write."""

    def __init__(self, base_dir: Path | None = None, *, encoding: str = "utf-8"):
        self.base_dir = base_dir.expanduser().resolve(strict=False) if base_dir else None
        self.encoding = encoding

    def resolve(self, path: Path | str) -> Path:
        """Resolve ``path`` against the base directory when it is relative."""

        candidate = Path(path).expanduser()
        if not candidate.is_absolute() and self.base_dir is not None:
            candidate = self.base_dir / candidate
        return candidate.resolve(strict=False)

    async def read(self, path: Path) -> str:
        target = self.resolve(path)
        async with await anyio.open_file(target, "r", encoding=self.encoding) as fp:
            return await fp.read()

    async def write(self, path: Path, content: str) -> None:
        target = self.resolve(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = target.with_suffix(target.suffix + TMP_SUFFIX)
        try:
            async with await anyio.open_file(tmp_path, "w", encoding=self.encoding) as fp:
                await fp.write(content)
            await anyio.to_thread.run_sync(shutil.move, str(tmp_path), str(target))
        except BaseException:
            tmp_path.unlink(missing_ok=True)
            raise
        logger.debug("Wrote %d characters to %s", len(content), target)


class InMemoryFileStorage:
    """Dict-backed storage for tests; counts physical reads and writes."""

    def __init__(self, files: dict[Path, str] | None = None):
        self.files: dict[Path, str] = dict(files or {})
        self.read_count = 0
        self.write_count = 0

    async def read(self, path: Path) -> str:
        self.read_count += 1
        # Yield so concurrent callers can pile up behind an in-flight read
        await anyio.sleep(0)
        try:
            return self.files[Path(path)]
        except KeyError:
            raise FileNotFoundError(f"{path} not found") from None

    async def write(self, path: Path, content: str) -> None:
        self.write_count += 1
        await anyio.sleep(0)
        self.files[Path(path)] = content
