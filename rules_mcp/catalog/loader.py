"""
Document Loader

Reads every markdown document in a content directory. A file that cannot
be read, parsed or validated is logged and skipped; a directory that
cannot be listed yields no documents.
"""

import logging
from pathlib import Path
from typing import Iterable

from rules_mcp.catalog.parser import ParsedDocument, parse_document, validate_required_fields
from rules_mcp.errors import InvalidDocument, UnreadableDirectory

logger = logging.getLogger(__name__)

DOCUMENT_EXTENSION = ".md"


class DocumentLoader:
    """Loads frontmatter documents from a directory."""

    def __init__(self, extension: str = DOCUMENT_EXTENSION):
        self.extension = extension

    def load_all(
        self,
        directory: Path,
        required_fields: Iterable[str] = (),
        recursive: bool = False,
    ) -> list[ParsedDocument]:
        """
        Load all documents in a directory.

        Args:
            directory: Directory to scan
            required_fields: Frontmatter keys every document must define
            recursive: Also descend into subdirectories

        Returns:
            Documents that parsed and validated, in directory listing order
        """
        required = list(required_fields)
        try:
            return self._load_directory(Path(directory), required, recursive)
        except UnreadableDirectory as e:
            logger.warning(f"Error loading documents from {directory}: {e.reason}")
            return []

    def load_file(self, path: Path, required_fields: Iterable[str] = ()) -> ParsedDocument:
        """
        Load a single document.

        Raises:
            InvalidDocument: file unreadable, frontmatter invalid or fields missing
        """
        source_id = str(path)
        try:
            raw_text = path.read_text(encoding="utf-8-sig")
        except (OSError, UnicodeDecodeError) as e:
            raise InvalidDocument(source_id, f"cannot read file ({e})") from e

        document = parse_document(raw_text, source_id, path=path)
        validate_required_fields(document.metadata, required_fields, source_id)
        return document

    def _load_directory(self, directory: Path, required: list[str], recursive: bool) -> list[ParsedDocument]:
        documents: list[ParsedDocument] = []

        for entry in self._list_entries(directory):
            if entry.is_dir():
                if recursive:
                    try:
                        documents.extend(self._load_directory(entry, required, recursive))
                    except UnreadableDirectory as e:
                        logger.warning(f"Skipping unreadable directory {entry}: {e.reason}")
                continue

            if not entry.is_file() or entry.suffix != self.extension:
                continue

            try:
                documents.append(self.load_file(entry, required))
            except InvalidDocument as e:
                logger.warning(f"Skipping invalid document {entry}: {e.reason}")

        return documents

    def _list_entries(self, directory: Path) -> list[Path]:
        if not directory.is_dir():
            raise UnreadableDirectory(directory, "not an existing directory")
        try:
            return sorted(directory.iterdir())
        except OSError as e:
            raise UnreadableDirectory(directory, str(e)) from e
