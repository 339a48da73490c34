"""
Pytest configuration file.

Ensures the repo root is on sys.path so that 'import csvpack' works without
installation, and provides the record types, schemas and recording
collaborators shared by the test modules.
"""
import io
import sys
import zipfile
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional

import pytest

# Add the repo root to sys.path
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from csvpack import Column, CsvPackConfig, RecordSchema  # noqa: E402


# ============================================================================
# Record types used throughout the tests
# ============================================================================

@dataclass(frozen=True)
class Person:
    name: str
    age: int


@dataclass(frozen=True)
class Pet:
    name: str
    species: str
    owner: Optional[str] = None


PERSON_SCHEMA = RecordSchema(
    record_type=Person,
    save_base_name="people",
    columns=(
        Column.attr("Name", "name"),
        Column.attr("Age", "age"),
    ),
    parser=lambda row: Person(row["Name"], int(row["Age"])),
)

PET_SCHEMA = RecordSchema(
    record_type=Pet,
    save_base_name="pets",
    columns=(
        Column.attr("Pet Name", "name"),
        Column.attr("Species", "species"),
        Column.attr("Owner", "owner"),
    ),
    parser=lambda row: Pet(row["Pet Name"], row["Species"], row["Owner"] or None),
)

FIXED_NOW = datetime(2024, 3, 7, 9, 15)


# ============================================================================
# Recording collaborators
# ============================================================================

class RecordingShareTarget:
    def __init__(self) -> None:
        self.shared: List[Path] = []

    def share(self, archive_path: Path) -> None:
        self.shared.append(Path(archive_path))


class RecordingNotifier:
    def __init__(self) -> None:
        self.messages: List[str] = []

    def notify(self, message: str) -> None:
        self.messages.append(message)


# ============================================================================
# Helpers
# ============================================================================

def make_zip(entries: Dict[str, bytes]) -> bytes:
    """Build an in-memory ZIP with the given entry names, in order."""
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w", zipfile.ZIP_DEFLATED) as zf:
        for name, data in entries.items():
            zf.writestr(name, data)
    return buf.getvalue()


def read_zip(path: Path) -> Dict[str, bytes]:
    with zipfile.ZipFile(path) as zf:
        return {name: zf.read(name) for name in zf.namelist()}


# ============================================================================
# Fixtures
# ============================================================================

@pytest.fixture
def work_dir(tmp_path: Path) -> Path:
    return tmp_path / "work"


@pytest.fixture
def config(work_dir: Path) -> CsvPackConfig:
    return CsvPackConfig(work_dir=str(work_dir))


@pytest.fixture
def share_target() -> RecordingShareTarget:
    return RecordingShareTarget()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()
