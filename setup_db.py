"""
Create any missing car rental tables and optionally promote an existing
profile to admin.

    python setup_db.py
    python setup_db.py --promote-admin owner@example.com
"""

import argparse
import logging
import sys

from app.db.init_db import init_db
from app.db.session import SessionLocal
from app.models.enums import UserRole
from app.models.profile import Profile

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

def promote_admin(email: str) -> bool:
    """Give the profile with this e-mail the admin role. Returns False if it does not exist."""
    db = SessionLocal()
    try:
        profile = db.query(Profile).filter(Profile.email == email.strip().lower()).first()
        if profile is None:
            logger.error(f"No profile with e-mail {email}")
            return False
        profile.role = UserRole.ADMIN.value
        db.commit()
        logger.info(f"Profile {profile.id} ({profile.email}) is now an admin")
        return True
    finally:
        db.close()

def main() -> int:
    parser = argparse.ArgumentParser(description="Initialize the car rental database")
    parser.add_argument("--promote-admin", metavar="EMAIL", help="Promote an existing profile to admin")
    args = parser.parse_args()

    logger.info("Creating car rental database tables...")
    try:
        init_db()
    except Exception as e:
        logger.error(f"Error creating database tables: {e}")
        raise
    logger.info("Database tables created successfully!")

    if args.promote_admin and not promote_admin(args.promote_admin):
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
