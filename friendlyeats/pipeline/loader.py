"""
Batch Loader.

Writes a fabricated dataset to the document store in one atomic batch.
"""

import logging
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from typing import Callable, Optional

from friendlyeats.pipeline.fabricator import SampleData
import config.settings as settings

logger = logging.getLogger(__name__)

CommitCallback = Callable[[Optional[Exception]], None]


class BatchLoader:
    """
    Loads sample data into a Firestore-shaped document store.

    The client needs collection(name), document(key=None) on the returned
    collection, and batch() returning an object with set(ref, data) and
    commit(). google.cloud.firestore.Client and InMemoryDocumentStore both
    qualify.
    """

    def __init__(self, client, executor: Optional[Executor] = None):
        """
        Initialize batch loader.

        Args:
            client: Document store client
            executor: Executor the commit runs on. A single-worker thread
                pool is created when omitted.
        """
        self.client = client
        self.executor = executor or ThreadPoolExecutor(
            max_workers=1, thread_name_prefix="friendlyeats-commit"
        )

    def build_batch(self, data: SampleData):
        """
        Stage every record of the dataset in a new write batch.

        Users, restaurants and reviews are keyed by their ids; yums get
        store-generated keys.

        Returns:
            The uncommitted batch
        """
        batch = self.client.batch()

        users = self.client.collection(settings.USERS_COLLECTION)
        for user in data.users:
            batch.set(users.document(user.user_id), user.to_dict())

        restaurants = self.client.collection(settings.RESTAURANTS_COLLECTION)
        for restaurant in data.restaurants:
            batch.set(restaurants.document(restaurant.restaurant_id), restaurant.to_dict())

        reviews = self.client.collection(settings.REVIEWS_COLLECTION)
        for review in data.reviews:
            batch.set(reviews.document(review.review_id), review.to_dict())

        yums = self.client.collection(settings.YUMS_COLLECTION)
        for yum in data.yums:
            batch.set(yums.document(), yum.to_dict())

        total = sum(data.counts().values())
        logger.info(f"Staged {total} writes in one batch")
        return batch

    def prepopulate(
        self,
        data: SampleData,
        on_complete: Optional[CommitCallback] = None
    ) -> Future:
        """
        Write the dataset to the store without blocking the caller.

        A commit failure is logged and handed to on_complete; it is never
        raised or retried.

        Args:
            data: Fabricated dataset
            on_complete: Called with the commit error, or None on success

        Returns:
            Future resolving to the commit error, or None on success
        """
        batch = self.build_batch(data)
        return self.executor.submit(self._commit, batch, on_complete)

    def _commit(self, batch, on_complete: Optional[CommitCallback]) -> Optional[Exception]:
        error = None
        try:
            batch.commit()
            logger.info("Sample data committed")
        except Exception as e:
            logger.error(f"Error populating document store: {e}")
            error = e

        if on_complete is not None:
            try:
                on_complete(error)
            except Exception:
                logger.exception("Commit callback failed")

        return error

    def shutdown(self, wait: bool = True) -> None:
        """Release the commit executor."""
        self.executor.shutdown(wait=wait)
