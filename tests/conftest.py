"""Shared test fixtures for all tests."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
from fsspec.implementations.memory import MemoryFileSystem

from resloc.core.paths import FileSystem
from resloc.resolution.loaders.local import LocalLoader

# ============================================================================
# Test Data Constants
# ============================================================================


FS_RESOURCES = [f"/tmp/fs_resource_{i}.nfo" for i in range(10)]
FS_INNER_RESOURCES = [f"/tmp/inner/fs_inner_resource_{i}.nfo" for i in range(10)]
FS_DUP_RESOURCE = "/tmp/dup_resource.nfo"

CLASSPATH_RESOURCES = {
    "META-INF/cl_resource.nfo": "classpath resource",
    "META-INF/fallback/cl_resource_2.nfo": "nested classpath resource",
    "META-INF/dup_resource.nfo": "duplicated in the filesystem",
    "top_resource.nfo": "top level classpath resource",
}


def _reset_memory_store() -> None:
    # The in-memory store is shared by every MemoryFileSystem instance
    MemoryFileSystem.store.clear()
    MemoryFileSystem.pseudo_dirs.clear()
    MemoryFileSystem.pseudo_dirs.append("")


# ============================================================================
# Filesystem Fixtures
# ============================================================================


@pytest.fixture
def memory_fs() -> Iterator[MemoryFileSystem]:
    """In-memory filesystem populated with the test resources."""
    _reset_memory_store()
    fs = MemoryFileSystem()
    for path in [*FS_RESOURCES, *FS_INNER_RESOURCES, FS_DUP_RESOURCE]:
        fs.pipe(path, f"content of {path}".encode())
    yield fs
    _reset_memory_store()


@pytest.fixture
def memory_filesystem(memory_fs: MemoryFileSystem) -> FileSystem:
    """Filesystem collaborator over the in-memory filesystem, rooted at "/"."""
    return FileSystem(memory_fs, cwd="/")


@pytest.fixture
def local_loader(memory_filesystem: FileSystem) -> LocalLoader:
    """Local loader reading from the in-memory filesystem."""
    return LocalLoader(memory_filesystem)


# ============================================================================
# Classpath Fixtures
# ============================================================================


@pytest.fixture
def classpath_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Directory of bundled resources placed at the front of sys.path."""
    root = tmp_path / "classpath"
    for name, content in CLASSPATH_RESOURCES.items():
        target = root / name
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content)

    monkeypatch.syspath_prepend(str(root))
    return root
