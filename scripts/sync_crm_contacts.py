"""Push stored member profiles to the CRM in bulk."""

from __future__ import annotations

import argparse

from sqlalchemy.exc import SQLAlchemyError

from app.application.use_cases.contacts import sync_profiles
from app.config import get_settings
from app.infrastructure.database import SessionLocal, initialize_database
from app.infrastructure.gohighlevel import build_crm_client
from app.logging_config import configure_logging


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for the bulk sync."""

    parser = argparse.ArgumentParser(
        description="Create or update a CRM contact for every stored member profile.",
    )
    parser.add_argument(
        "--missing-only",
        action="store_true",
        help="Only sync profiles that do not have a CRM contact id yet.",
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=None,
        help="Maximum number of profiles to sync (default: all).",
    )
    return parser.parse_args()


def main() -> None:
    """Sync profiles using the provided command line arguments."""

    args = parse_args()
    settings = get_settings()
    configure_logging(settings.log_level)

    crm_client = build_crm_client(settings)
    if crm_client is None:
        raise SystemExit("GOHIGHLEVEL_API_KEY and GOHIGHLEVEL_LOCATION_ID are required.")

    initialize_database()

    session = SessionLocal()
    try:
        summary = sync_profiles(
            session,
            crm_client,
            missing_contact_only=args.missing_only,
            limit=args.limit,
        )
    except SQLAlchemyError as exc:
        session.rollback()
        raise SystemExit(f"Could not read profiles from the database: {exc}") from exc
    finally:
        session.close()
        crm_client.close()

    print(
        "CRM sync finished:\n"
        f"  Synced: {summary.synced}\n"
        f"  Failed: {summary.failed}"
    )
    for error in summary.errors:
        print(f"  - {error}")
    if summary.failed:
        raise SystemExit(1)


if __name__ == "__main__":
    main()
