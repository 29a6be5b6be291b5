"""
Firestore client factory.

Creates the google-cloud-firestore client the loader writes to.
"""

import logging
import os

from google.cloud import firestore

logger = logging.getLogger(__name__)


def create_client(project: str = "", emulator_host: str = "") -> firestore.Client:
    """
    Create a Firestore client.

    Args:
        project: Google Cloud project id. Falls back to the environment's
            default project when empty.
        emulator_host: host:port of a local Firestore emulator. The client
            library reads FIRESTORE_EMULATOR_HOST, so it is exported here.

    Returns:
        Configured firestore.Client
    """
    if emulator_host:
        os.environ["FIRESTORE_EMULATOR_HOST"] = emulator_host
        logger.info(f"Using Firestore emulator at {emulator_host}")

    client = firestore.Client(project=project or None)
    logger.info(f"Initialized Firestore client for project={client.project}")
    return client
