import argparse
import sys
from datetime import timedelta
from pathlib import Path

# Ensure repo root is on sys.path when running this script directly.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from sqlalchemy import select

from hospital_inventory.core.session import issue_session_token
from hospital_inventory.database import new_session
from hospital_inventory.models import Hospital


def parse_args():
    parser = argparse.ArgumentParser(description="Print a session token for a hospital.")
    parser.add_argument("hospital", help="Hospital name as stored in the database.")
    parser.add_argument(
        "--minutes",
        type=int,
        default=None,
        help="Token lifetime in minutes (defaults to SESSION_TOKEN_TTL_MINUTES).",
    )
    return parser.parse_args()


def main():
    args = parse_args()
    db = new_session()
    try:
        hospital = (
            db.execute(select(Hospital).where(Hospital.hospital_name == args.hospital))
            .scalars()
            .first()
        )
    finally:
        db.close()

    if hospital is None:
        print(f"Hospital not found: {args.hospital}", file=sys.stderr)
        sys.exit(1)

    ttl = timedelta(minutes=args.minutes) if args.minutes else None
    print(issue_session_token(hospital.id, hospital.hospital_name, ttl=ttl))


if __name__ == "__main__":
    main()
