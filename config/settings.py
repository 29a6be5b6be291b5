"""
Configuration settings for the FriendlyEats sample data populator.

Centralized configuration for dataset sizes, the document store and logging.
"""

import os
from pathlib import Path

# Project paths
PROJECT_ROOT = Path(__file__).parent.parent
DATA_ROOT = PROJECT_ROOT / "data"
OUTPUT_ROOT = PROJECT_ROOT / "output"

# Firestore Configuration
FIRESTORE_PROJECT = os.getenv("GOOGLE_CLOUD_PROJECT", "")
FIRESTORE_EMULATOR_HOST = os.getenv("FIRESTORE_EMULATOR_HOST", "")

# Collection names
USERS_COLLECTION = "users"
RESTAURANTS_COLLECTION = "restaurants"
REVIEWS_COLLECTION = "reviews"
YUMS_COLLECTION = "yums"

# Dataset sizes
USER_COUNT = int(os.getenv("FRIENDLYEATS_USER_COUNT", "20"))
RESTAURANT_COUNT = int(os.getenv("FRIENDLYEATS_RESTAURANT_COUNT", "20"))
REVIEWS_PER_RESTAURANT = int(os.getenv("FRIENDLYEATS_REVIEWS_PER_RESTAURANT", "20"))
# Must be <= USER_COUNT: the i-th yum on a review is authored by the i-th user
MAX_YUMS_PER_REVIEW = int(os.getenv("FRIENDLYEATS_MAX_YUMS_PER_REVIEW", "20"))

# Use the legacy running-average formula, which divides by
# (average + 1) instead of (count + 1). Only for comparing against old data.
LEGACY_AVERAGE_FORMULA = False

# Logging
LOG_LEVEL = "INFO"  # DEBUG, INFO, WARNING, ERROR
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FILE = "friendlyeats.log"
