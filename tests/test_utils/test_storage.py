"""
Unit tests for dataset snapshots.
"""

import json
import os
import random
import tempfile
from friendlyeats.pipeline.fabricator import SampleDataFabricator
from friendlyeats.utils.storage import DatasetStorage


def small_dataset():
    return SampleDataFabricator(
        user_count=3,
        restaurant_count=2,
        reviews_per_restaurant=3,
        max_yums_per_review=3,
        rng=random.Random(21)
    ).generate()


def test_snapshot_save_and_load():
    """Test a saved snapshot loads back as the same dataset."""
    data = small_dataset()

    with tempfile.TemporaryDirectory() as tmpdir:
        storage = DatasetStorage(tmpdir)
        path = storage.save_snapshot(data, "run-1")

        assert os.path.exists(path)
        with open(path) as f:
            raw = json.load(f)
        assert set(raw) == {"users", "restaurants", "reviews", "yums"}
        # Timestamps are written as ISO-8601 strings
        first_review = next(iter(raw["reviews"].values()))
        assert isinstance(first_review["timestamp"], str)

        restored = storage.load_snapshot("run-1")

    assert restored == data


def test_missing_snapshot():
    """Test loading an unknown snapshot returns None."""
    with tempfile.TemporaryDirectory() as tmpdir:
        storage = DatasetStorage(tmpdir)
        assert storage.load_snapshot("nope") is None


def test_list_snapshots():
    """Test snapshot names are listed in sorted order."""
    data = small_dataset()

    with tempfile.TemporaryDirectory() as tmpdir:
        storage = DatasetStorage(tmpdir)
        storage.save_snapshot(data, "b")
        storage.save_snapshot(data, "a")

        assert storage.list_snapshots() == ["a", "b"]
