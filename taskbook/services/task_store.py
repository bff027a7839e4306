"""JSON document store for task records."""

import contextlib
import json
import logging
import os
import stat
import tempfile
from typing import List, Sequence

from ..config import StoreConfig
from ..models.task import TaskRecord
from ..schemas import TaskErrorCode

logger = logging.getLogger(__name__)


class JsonTaskStore:
    """Loads and overwrites the whole task collection as one JSON array."""

    def __init__(self, config: StoreConfig):
        """Initialize the store.

        Args:
            config: Store location and formatting
        """
        self.config = config
        logger.info(f"Task store initialized at {config.path}")

    def load_all(self) -> List[TaskRecord]:
        """Load every task record from the document.

        A missing, unreadable or malformed document yields an empty list;
        the failure is logged and never raised.

        Returns:
            Task records in stored order
        """
        path = self.config.path
        try:
            with open(path, "r", encoding=self.config.encoding) as f:
                data = json.load(f)
        except FileNotFoundError:
            logger.info(f"Task store {path} does not exist yet, starting empty")
            return []
        except (OSError, ValueError) as e:
            logger.error(f"{TaskErrorCode.STORE_READ_FAILURE.value}: cannot read {path}: {str(e)}")
            return []

        if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
            logger.error(
                f"{TaskErrorCode.STORE_READ_FAILURE.value}: {path} is not a JSON array of task objects"
            )
            return []

        logger.debug(f"Loaded {len(data)} tasks from {path}")
        return data

    def save_all(self, tasks: Sequence[TaskRecord]) -> bool:
        """Overwrite the document with the given records.

        The records are written to a temporary file beside the document and
        renamed over it, so the previous content survives a failed write.

        Args:
            tasks: Full ordered collection to persist

        Returns:
            True if the document was written, False otherwise
        """
        path = self.config.path
        tmp_name = None
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
            with os.fdopen(fd, "w", encoding=self.config.encoding) as f:
                json.dump(list(tasks), f, ensure_ascii=False, indent=self.config.indent)
                f.flush()
            os.chmod(tmp_name, self._document_mode())
            os.replace(tmp_name, path)
        except (OSError, TypeError, ValueError) as e:
            logger.error(f"{TaskErrorCode.STORE_WRITE_FAILURE.value}: cannot write {path}: {str(e)}")
            if tmp_name is not None:
                with contextlib.suppress(OSError):
                    os.remove(tmp_name)
            return False

        logger.debug(f"Saved {len(tasks)} tasks to {path}")
        return True

    def _document_mode(self) -> int:
        """Permission bits for the written document: keep the current ones, else the umask default."""
        try:
            return stat.S_IMODE(os.stat(self.config.path).st_mode)
        except FileNotFoundError:
            umask = os.umask(0)
            os.umask(umask)
            return 0o666 & ~umask
