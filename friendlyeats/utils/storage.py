"""
Storage utility.

JSON snapshots of fabricated datasets, for inspecting a run or replaying it.
"""

import json
import os
import logging
from datetime import datetime
from typing import List, Optional

from friendlyeats.models.user import User
from friendlyeats.models.restaurant import Restaurant
from friendlyeats.models.review import Review
from friendlyeats.models.yum import Yum
from friendlyeats.pipeline.fabricator import SampleData

logger = logging.getLogger(__name__)


def _json_default(value):
    if isinstance(value, datetime):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


class DatasetStorage:
    """
    Saves and loads dataset snapshots under data/snapshots/<name>.json.

    Each snapshot maps collection names to {document id: document body}.
    Yums have no natural key and are stored as a list.
    """

    def __init__(self, data_root: str):
        """
        Initialize dataset storage.

        Args:
            data_root: Root data directory (e.g., /path/to/data)
        """
        self.data_root = data_root
        self.snapshot_dir = os.path.join(data_root, "snapshots")

        os.makedirs(self.snapshot_dir, exist_ok=True)

        logger.info(f"Initialized DatasetStorage with data_root={data_root}")

    def snapshot_path(self, name: str) -> str:
        return os.path.join(self.snapshot_dir, f"{name}.json")

    def save_snapshot(self, data: SampleData, name: str) -> str:
        """
        Save a dataset snapshot.

        Args:
            data: Fabricated dataset
            name: Snapshot name (file stem)

        Returns:
            Path to the written file
        """
        filepath = self.snapshot_path(name)
        snapshot = {
            "users": {u.user_id: u.to_dict() for u in data.users},
            "restaurants": {r.restaurant_id: r.to_dict() for r in data.restaurants},
            "reviews": {r.review_id: r.to_dict() for r in data.reviews},
            "yums": [y.to_dict() for y in data.yums],
        }

        try:
            with open(filepath, 'w') as f:
                json.dump(snapshot, f, indent=2, default=_json_default)
            logger.info(f"Saved snapshot {name} to {filepath}")
        except Exception as e:
            logger.error(f"Failed to save snapshot {name}: {e}")
            raise

        return filepath

    def load_snapshot(self, name: str) -> Optional[SampleData]:
        """
        Load a dataset snapshot.

        Args:
            name: Snapshot name (file stem)

        Returns:
            SampleData, or None if the snapshot doesn't exist
        """
        filepath = self.snapshot_path(name)

        if not os.path.exists(filepath):
            logger.warning(f"No snapshot found named {name}")
            return None

        with open(filepath, 'r') as f:
            snapshot = json.load(f)

        data = SampleData(
            users=[User.from_dict(doc) for doc in snapshot["users"].values()],
            restaurants=[
                Restaurant.from_dict(doc, restaurant_id)
                for restaurant_id, doc in snapshot["restaurants"].items()
            ],
            reviews=[
                Review.from_dict(doc, review_id)
                for review_id, doc in snapshot["reviews"].items()
            ],
            yums=[Yum.from_dict(doc) for doc in snapshot["yums"]],
        )
        logger.debug(f"Loaded snapshot {name}: {data.counts()}")
        return data

    def list_snapshots(self) -> List[str]:
        """
        Get all saved snapshot names.

        Returns:
            Sorted list of snapshot names
        """
        names = []
        for filename in os.listdir(self.snapshot_dir):
            if filename.endswith('.json'):
                names.append(filename[:-len('.json')])

        return sorted(names)
