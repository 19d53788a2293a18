"""JSON file store for the account registry."""

import json
from pathlib import Path

from console_bank.exceptions import PersistenceError
from console_bank.logging import get_logger
from console_bank.persistence.serialization import registry_from_document, registry_to_document
from console_bank.store import AccountRegistry

logger = get_logger(__name__)


class JsonAccountStore:
    """Persist the registry to a single JSON file.

    The file is rewritten in full on every save. There is no temporary file
    or rename, so a crash mid-write can leave a truncated file; ``load``
    then falls back to an empty registry.
    """

    def __init__(self, path: str | Path, pretty: bool = True) -> None:
        """Initialize JSON account store.

        Parameters
        ----------
        path : str | Path
            File holding the serialized registry.
        pretty : bool
            Pretty-print JSON output.
        """
        self.path = Path(path)
        self.pretty = pretty
        self.last_error: str | None = None

    def save(self, registry: AccountRegistry) -> bool:
        """Write the registry, overwriting previous contents.

        Returns
        -------
        bool
            False if the file could not be written. The in-memory registry
            is unaffected either way.
        """
        document = registry_to_document(registry)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                if self.pretty:
                    json.dump(document, f, indent=2, ensure_ascii=False)
                else:
                    json.dump(document, f, ensure_ascii=False)
        except OSError as e:
            self.last_error = f"Could not write {self.path}: {e}"
            logger.error(self.last_error)
            return False

        self.last_error = None
        logger.debug("Saved %d accounts to %s", len(registry), self.path)
        return True

    def load(self) -> AccountRegistry:
        """Read the registry from disk.

        A missing file yields an empty registry. An unreadable or corrupt
        file is logged, recorded in ``last_error``, and also yields an
        empty registry; its contents are lost on the next save.
        """
        if not self.path.exists():
            self.last_error = None
            logger.info("No account file at %s, starting empty", self.path)
            return AccountRegistry()

        try:
            with open(self.path, encoding="utf-8") as f:
                document = json.load(f)
            registry = registry_from_document(document)
        except (OSError, ValueError, PersistenceError) as e:
            self.last_error = f"Could not load {self.path}: {e}"
            logger.error(self.last_error)
            return AccountRegistry()

        self.last_error = None
        logger.info("Loaded %d accounts from %s", len(registry), self.path)
        return registry
