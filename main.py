"""
FriendlyEats - Sample Data Populator

CLI entry point for filling a Firestore database with sample data.
"""

import argparse
import logging
import sys

from friendlyeats.orchestrator import PopulateOrchestrator
from friendlyeats.pipeline.fabricator import SampleDataFabricator
from friendlyeats.store.memory_store import InMemoryDocumentStore
from friendlyeats.utils.storage import DatasetStorage
import config.settings as settings


def setup_logging(log_level: str = "INFO"):
    """Configure logging for the entire application."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format=settings.LOG_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stdout),
            logging.FileHandler(settings.LOG_FILE)
        ]
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="FriendlyEats - populate Firestore with sample data",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Populate the project's Firestore database
  python main.py --project my-friendlyeats

  # Populate a local emulator
  python main.py --project demo --emulator-host localhost:8080

  # Fabricate without writing to Firestore, keeping a snapshot and summary
  python main.py --dry-run --snapshot-dir data --summary-dir output
        """
    )

    parser.add_argument(
        "--users",
        type=int,
        default=settings.USER_COUNT,
        help=f"Number of users (default: {settings.USER_COUNT})"
    )

    parser.add_argument(
        "--restaurants",
        type=int,
        default=settings.RESTAURANT_COUNT,
        help=f"Number of restaurants (default: {settings.RESTAURANT_COUNT})"
    )

    parser.add_argument(
        "--reviews-per-restaurant",
        type=int,
        default=settings.REVIEWS_PER_RESTAURANT,
        help=f"Reviews per restaurant (default: {settings.REVIEWS_PER_RESTAURANT})"
    )

    parser.add_argument(
        "--max-yums",
        type=int,
        default=settings.MAX_YUMS_PER_REVIEW,
        help=f"Exclusive upper bound on yums per review, <= --users "
             f"(default: {settings.MAX_YUMS_PER_REVIEW})"
    )

    parser.add_argument(
        "--project",
        default=settings.FIRESTORE_PROJECT,
        help="Google Cloud project id (default: $GOOGLE_CLOUD_PROJECT)"
    )

    parser.add_argument(
        "--emulator-host",
        default=settings.FIRESTORE_EMULATOR_HOST,
        help="Firestore emulator host:port (default: $FIRESTORE_EMULATOR_HOST)"
    )

    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Commit to an in-memory store instead of Firestore"
    )

    parser.add_argument(
        "--snapshot-dir",
        help="Save a JSON snapshot of the dataset under this data directory"
    )

    parser.add_argument(
        "--summary-dir",
        help="Write a per-restaurant CSV summary to this directory"
    )

    parser.add_argument(
        "--legacy-average",
        action=argparse.BooleanOptionalAction,
        default=settings.LEGACY_AVERAGE_FORMULA,
        help="Use the legacy (skewed) running-average formula "
             f"(default: {settings.LEGACY_AVERAGE_FORMULA})"
    )

    parser.add_argument(
        "--log-level",
        default=settings.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help=f"Logging level (default: {settings.LOG_LEVEL})"
    )

    return parser


def main(argv=None):
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    setup_logging(args.log_level)
    logger = logging.getLogger(__name__)

    try:
        fabricator = SampleDataFabricator(
            user_count=args.users,
            restaurant_count=args.restaurants,
            reviews_per_restaurant=args.reviews_per_restaurant,
            max_yums_per_review=args.max_yums,
            legacy_average=args.legacy_average
        )
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)

    print("=" * 60)
    print("FriendlyEats - Sample Data Populator")
    print("=" * 60)
    print(f"Target: {'in-memory store' if args.dry_run else 'Firestore'}")
    print(f"Users: {args.users}  Restaurants: {args.restaurants}")
    print(f"Reviews per restaurant: {args.reviews_per_restaurant}  Max yums: {args.max_yums}")
    print("=" * 60)

    orchestrator = None
    # Commit failures are logged by the loader and not reflected in the exit status
    try:
        if args.dry_run:
            client = InMemoryDocumentStore()
        else:
            from friendlyeats.store.firestore_client import create_client
            client = create_client(args.project, args.emulator_host)

        storage = DatasetStorage(args.snapshot_dir) if args.snapshot_dir else None

        orchestrator = PopulateOrchestrator(
            client,
            fabricator=fabricator,
            storage=storage,
            summary_dir=args.summary_dir
        )
        orchestrator.run(wait=True)

    except KeyboardInterrupt:
        logger.warning("Populate interrupted by user")
        sys.exit(1)

    except Exception as e:
        logger.error(f"Sample data generation failed: {e}", exc_info=True)
        print(f"\nPopulate failed: {e}")
        print(f"Check {settings.LOG_FILE} for details")
        sys.exit(1)

    finally:
        if orchestrator is not None:
            orchestrator.close()

    if args.dry_run:
        for name in (settings.USERS_COLLECTION, settings.RESTAURANTS_COLLECTION,
                     settings.REVIEWS_COLLECTION, settings.YUMS_COLLECTION):
            print(f"{name}: {client.count(name)} documents")

    sys.exit(0)


if __name__ == "__main__":
    main()
