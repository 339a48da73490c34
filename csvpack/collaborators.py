"""
Interfaces to the host environment, plus local implementations.

csvpack never talks to a UI directly. The exporter hands its archive to a
ShareTarget and reports per-pack failures to a Notifier; the import
launcher asks a FilePicker for an archive. Hosts plug in their own
implementations; the local ones below cover scripts, the CLI and tests.
"""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Callable, Optional, Protocol, Union

logger = logging.getLogger(__name__)


# ----------------------------------------------------------------------
# Protocols (interfaces)
# ----------------------------------------------------------------------

class ShareTarget(Protocol):
    """Presents a finished archive to the user (save, send, ...)."""

    def share(self, archive_path: Path) -> None:
        raise NotImplementedError


class Notifier(Protocol):
    """Surfaces a non-fatal failure message to the user. Fire-and-forget."""

    def notify(self, message: str) -> None:
        raise NotImplementedError


class PickedFile(Protocol):
    """A resource chosen through a FilePicker."""

    display_name: str

    def open(self) -> BinaryIO:
        raise NotImplementedError


class FilePicker(Protocol):
    """
    Lets the user choose a resource.

    ``on_result`` is called once, with the picked file or None when the
    user cancelled.
    """

    def pick(
        self,
        mime_type: str,
        on_result: Callable[[Optional[PickedFile]], None],
    ) -> None:
        raise NotImplementedError


# ----------------------------------------------------------------------
# Local implementations
# ----------------------------------------------------------------------

class LoggingNotifier:
    """Notifier that writes messages to the log."""

    def notify(self, message: str) -> None:
        logger.warning(message)


class DirectoryShareTarget:
    """
    ShareTarget that copies each archive into an outbox directory.
    """

    def __init__(self, outbox_dir: Union[str, Path]) -> None:
        self.outbox_dir = Path(outbox_dir)

    def share(self, archive_path: Path) -> None:
        self.outbox_dir.mkdir(parents=True, exist_ok=True)
        dest = self.outbox_dir / Path(archive_path).name
        shutil.copy2(archive_path, dest)
        logger.info("Shared %s to %s", archive_path, dest)


@dataclass
class LocalFile:
    """PickedFile backed by a path on disk."""

    path: Path

    @property
    def display_name(self) -> str:
        return Path(self.path).name

    def open(self) -> BinaryIO:
        return open(self.path, "rb")


class LocalFilePicker:
    """
    FilePicker that always "picks" the same local file.

    ``path=None`` behaves like a user who cancels the picker.
    """

    def __init__(self, path: Optional[Union[str, Path]] = None) -> None:
        self.path = Path(path) if path is not None else None
        self.last_mime_type: Optional[str] = None

    def pick(
        self,
        mime_type: str,
        on_result: Callable[[Optional[PickedFile]], None],
    ) -> None:
        self.last_mime_type = mime_type
        on_result(LocalFile(self.path) if self.path is not None else None)


__all__ = [
    "ShareTarget",
    "Notifier",
    "PickedFile",
    "FilePicker",
    "LoggingNotifier",
    "DirectoryShareTarget",
    "LocalFile",
    "LocalFilePicker",
]
