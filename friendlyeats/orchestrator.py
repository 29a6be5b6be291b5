"""
Populate Orchestrator.

Runs the fabricator and hands its dataset to the batch loader.
"""

import logging
from concurrent.futures import Future
from datetime import datetime, timezone
from typing import Optional

from friendlyeats.pipeline.fabricator import SampleData, SampleDataFabricator
from friendlyeats.pipeline.loader import BatchLoader, CommitCallback
from friendlyeats.utils.storage import DatasetStorage
from friendlyeats.utils.summary import check_consistency, write_summary
import config.settings as settings

logger = logging.getLogger(__name__)


def default_fabricator() -> SampleDataFabricator:
    """Fabricator sized from settings."""
    return SampleDataFabricator(
        user_count=settings.USER_COUNT,
        restaurant_count=settings.RESTAURANT_COUNT,
        reviews_per_restaurant=settings.REVIEWS_PER_RESTAURANT,
        max_yums_per_review=settings.MAX_YUMS_PER_REVIEW,
        legacy_average=settings.LEGACY_AVERAGE_FORMULA
    )


class PopulateOrchestrator:
    """
    Coordinates one populate run.

    1. Fabrication → 2. Snapshot / summary (optional) → 3. Batch commit
    """

    def __init__(
        self,
        client,
        fabricator: Optional[SampleDataFabricator] = None,
        storage: Optional[DatasetStorage] = None,
        summary_dir: Optional[str] = None
    ):
        """
        Initialize populate orchestrator.

        Args:
            client: Document store client (Firestore or in-memory)
            fabricator: Fabricator to use; sized from settings when omitted
            storage: Where to save a JSON snapshot of the dataset, if anywhere
            summary_dir: Where to write the CSV summary, if anywhere
        """
        self.fabricator = fabricator or default_fabricator()
        self.loader = BatchLoader(client)
        self.storage = storage
        self.summary_dir = summary_dir
        self.last_dataset: Optional[SampleData] = None

    def run(
        self,
        wait: bool = False,
        on_complete: Optional[CommitCallback] = None
    ) -> Future:
        """
        Fabricate a dataset and submit it in a single batch.

        Args:
            wait: Block until the commit finishes
            on_complete: Called with the commit error, or None on success

        Returns:
            Future resolving to the commit error, or None on success

        Raises:
            ValueError: If the fabricator hits an invariant violation
        """
        data = self.fabricator.generate()
        self.last_dataset = data

        problems = check_consistency(data)
        for problem in problems:
            logger.warning(problem)

        if self.storage is not None:
            name = datetime.now(timezone.utc).strftime("sample_data_%Y%m%dT%H%M%SZ")
            self.storage.save_snapshot(data, name)

        if self.summary_dir is not None:
            write_summary(data, self.summary_dir)

        future = self.loader.prepopulate(data, on_complete=on_complete)
        if wait:
            future.result()
        return future

    def close(self) -> None:
        self.loader.shutdown(wait=True)


def prepopulate(client, on_complete: Optional[CommitCallback] = None) -> Future:
    """
    Populate the store with sample data sized from settings.

    Does not block; the returned future resolves once the commit finishes.
    """
    orchestrator = PopulateOrchestrator(client, fabricator=default_fabricator())
    future = orchestrator.run(on_complete=on_complete)
    orchestrator.loader.shutdown(wait=False)
    return future
