# file_analyzer/storage/file_store.py
import logging
from typing import NamedTuple, Optional

from file_analyzer.core.models import RawTable, TableAnalysis

logger = logging.getLogger(__name__)


class StoredFile(NamedTuple):
    table: RawTable
    analysis: TableAnalysis


class FileStore:
    """In-memory uploads keyed by file name.

    Entries are added on upload and read on query. Re-uploading a name
    replaces the previous entry. Nothing is persisted and there is no
    locking.
    """

    def __init__(self):
        self._files = {}

    def save(self, table: RawTable, analysis: TableAnalysis) -> StoredFile:
        if analysis.file_name in self._files:
            logger.info("Replacing stored file %s", analysis.file_name)
            del self._files[analysis.file_name]
        stored = StoredFile(table, analysis)
        self._files[analysis.file_name] = stored
        return stored

    def get(self, file_name: str) -> Optional[StoredFile]:
        return self._files.get(file_name)

    def delete(self, file_name: str) -> bool:
        return self._files.pop(file_name, None) is not None

    def list_files(self) -> list:
        return [
            {
                "fileName": name,
                "rowCount": stored.analysis.row_count,
                "columnCount": stored.analysis.column_count,
            }
            for name, stored in self._files.items()
        ]

    def clear(self) -> None:
        self._files.clear()

    def __len__(self) -> int:
        return len(self._files)

    def __contains__(self, file_name: str) -> bool:
        return file_name in self._files
