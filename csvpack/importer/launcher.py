"""
ImportLauncher - user-initiated imports through a FilePicker.

The launcher asks the host's file picker for a ZIP, and when one arrives
runs the import and hands the ResultMap to the caller's action. A
cancelled pick, or a file that is not one of our archives (its name does
not start with the archive prefix), ends the request silently.
"""

from __future__ import annotations

import logging
import zipfile
from typing import List, Optional

from ..collaborators import FilePicker, PickedFile
from ..errors import PathTraversalError
from ..packs import ImportPack
from ..result_map import ResultMap
from .importer import CompletionCallback, CsvImporter, ErrorHandler

logger = logging.getLogger(__name__)

ZIP_MIME_TYPE = "application/zip"


class ImportLauncher:
    """
    Binds an importer, a picker and one set of import packs.

    Parameters
    ----------
    importer:
        Runs the actual import.
    file_picker:
        Host collaborator that lets the user choose the archive.
    prefix:
        Required start of the picked file's display name.
    packs:
        Record types to recognise.
    action:
        Called with the ResultMap once the import completes.
    exception_handler:
        Receives entry-level ParseErrors, the PathTraversalError of a
        rejected archive, and the BadZipFile of a file that is not a ZIP
        (the action then still receives an empty ResultMap).
    """

    def __init__(
        self,
        importer: CsvImporter,
        file_picker: FilePicker,
        prefix: str,
        packs: List[ImportPack],
        action: CompletionCallback,
        exception_handler: Optional[ErrorHandler] = None,
    ) -> None:
        self.importer = importer
        self.file_picker = file_picker
        self.prefix = prefix
        self.packs = list(packs)
        self.action = action
        self.exception_handler = exception_handler

    def launch(self) -> None:
        """Ask the picker for an archive; the import runs on delivery."""
        self.file_picker.pick(ZIP_MIME_TYPE, self.on_picked)

    def on_picked(self, picked: Optional[PickedFile]) -> None:
        if picked is None:
            logger.debug("Import cancelled")
            return

        if not picked.display_name.startswith(self.prefix):
            logger.info(
                "Ignoring %s: not a %s* archive", picked.display_name, self.prefix
            )
            return

        try:
            with picked.open() as stream:
                self.importer.import_archive(
                    stream,
                    self.packs,
                    on_complete=self.action,
                    on_error=self.exception_handler,
                )
        except PathTraversalError as exc:
            logger.error("Rejected archive %s: %s", picked.display_name, exc)
            if self.exception_handler is not None:
                self.exception_handler(exc)
        except zipfile.BadZipFile as exc:
            # Not a ZIP: nothing to import, the request still completes.
            logger.error("Unreadable archive %s: %s", picked.display_name, exc)
            if self.exception_handler is not None:
                self.exception_handler(exc)
            self.action(ResultMap())


__all__ = [
    "ZIP_MIME_TYPE",
    "ImportLauncher",
]
