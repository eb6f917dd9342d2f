#!/usr/bin/env python3
"""Create the initial admin user.

There is no public registration; further users are added through the
``/users`` endpoints once signed in.

Usage:
    ADMIN_EMAIL=me@example.com ADMIN_PASSWORD=secret123 python scripts/seed_admin.py

    # or pass them as arguments
    python scripts/seed_admin.py me@example.com secret123 "Site Owner"
"""

import os
import sys

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from portfolio.database import SessionLocal, init_db
from portfolio.services.auth import create_user, get_user_by_email


def seed_admin(email: str, password: str, name: str) -> None:
    """Create the admin user unless one with this email already exists."""
    init_db()
    session = SessionLocal()
    try:
        if get_user_by_email(session, email):
            print(f"User {email} already exists, nothing to do.")
            return
        user = create_user(session, email, password, name)
        print(f"Created admin user {user.email} (id {user.id})")
    finally:
        session.close()


if __name__ == "__main__":
    args = sys.argv[1:]
    email = args[0] if len(args) > 0 else os.getenv("ADMIN_EMAIL")
    password = args[1] if len(args) > 1 else os.getenv("ADMIN_PASSWORD")
    name = args[2] if len(args) > 2 else os.getenv("ADMIN_NAME", "Admin")

    if not email or not password:
        print(__doc__)
        sys.exit(1)
    if len(password) < 6:
        print("Password must be at least 6 characters")
        sys.exit(1)

    seed_admin(email, password, name)
