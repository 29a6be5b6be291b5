"""
In-memory document store.

Mirrors the parts of the Firestore client API the loader uses, for dry runs
and tests.
"""

import copy
import logging
import secrets
import string
import threading
from typing import Dict, List, Optional, Tuple

logger = logging.getLogger(__name__)

AUTO_ID_ALPHABET = string.ascii_letters + string.digits
AUTO_ID_LENGTH = 20


def auto_id() -> str:
    """Generate a 20-character document id like Firestore does."""
    return "".join(secrets.choice(AUTO_ID_ALPHABET) for _ in range(AUTO_ID_LENGTH))


class DocumentReference:
    """Address of a single document."""

    def __init__(self, collection_id: str, document_id: str):
        self.collection_id = collection_id
        self.id = document_id

    @property
    def path(self) -> str:
        return f"{self.collection_id}/{self.id}"

    def __repr__(self) -> str:
        return f"DocumentReference({self.path!r})"


class CollectionReference:
    """Handle on a named collection."""

    def __init__(self, collection_id: str):
        self.id = collection_id

    def document(self, document_id: Optional[str] = None) -> DocumentReference:
        """
        Reference a document by key.

        Args:
            document_id: Document key; a random id is generated when omitted
        """
        return DocumentReference(self.id, document_id or auto_id())


class WriteBatch:
    """
    Accumulates writes and applies them all at once on commit.
    """

    def __init__(self, store: "InMemoryDocumentStore"):
        self._store = store
        self._writes: List[Tuple[DocumentReference, dict]] = []
        self._committed = False

    def __len__(self) -> int:
        return len(self._writes)

    def set(self, reference: DocumentReference, document_data: dict) -> "WriteBatch":
        """Stage an overwrite of the referenced document."""
        self._check_not_committed()
        self._writes.append((reference, copy.deepcopy(document_data)))
        return self

    def commit(self) -> List[str]:
        """
        Apply every staged write atomically.

        Returns:
            Paths of the written documents

        Raises:
            ValueError: If the batch was already committed
        """
        self._check_not_committed()
        self._store._apply(self._writes)
        self._committed = True
        return [reference.path for reference, _ in self._writes]

    def _check_not_committed(self):
        if self._committed:
            raise ValueError("Cannot reuse a committed WriteBatch")


class InMemoryDocumentStore:
    """
    Dict-backed store organised as collections of keyed documents.
    """

    def __init__(self):
        self._collections: Dict[str, Dict[str, dict]] = {}
        self._lock = threading.Lock()

    def collection(self, collection_id: str) -> CollectionReference:
        return CollectionReference(collection_id)

    def batch(self) -> WriteBatch:
        return WriteBatch(self)

    def get(self, collection_id: str, document_id: str) -> Optional[dict]:
        """Return a copy of a document, or None if it doesn't exist."""
        with self._lock:
            document = self._collections.get(collection_id, {}).get(document_id)
            return copy.deepcopy(document) if document is not None else None

    def documents(self, collection_id: str) -> Dict[str, dict]:
        """Return a copy of every document in a collection, keyed by id."""
        with self._lock:
            return copy.deepcopy(self._collections.get(collection_id, {}))

    def count(self, collection_id: str) -> int:
        with self._lock:
            return len(self._collections.get(collection_id, {}))

    def _apply(self, writes: List[Tuple[DocumentReference, dict]]) -> None:
        # Build the new state first so a bad write leaves the store untouched
        with self._lock:
            updated = {name: dict(docs) for name, docs in self._collections.items()}
            for reference, data in writes:
                if not isinstance(data, dict):
                    raise TypeError(
                        f"Document data for {reference.path} must be a dict, "
                        f"got {type(data).__name__}"
                    )
                updated.setdefault(reference.collection_id, {})[reference.id] = data
            self._collections = updated

        logger.debug(f"Committed {len(writes)} writes")
