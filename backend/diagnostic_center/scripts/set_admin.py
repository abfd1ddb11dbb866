#!/usr/bin/env python3
"""
Script to set a user as admin in the database.

Promoting over HTTP requires an admin token, so the first admin has to be
created here.

Usage:
    python -m diagnostic_center.scripts.set_admin <email>
    python -m diagnostic_center.scripts.set_admin --list

Examples:
    python -m diagnostic_center.scripts.set_admin admin@example.com
"""

import argparse
import sys

from pymongo.database import Database

from diagnostic_center.config import get_settings
from diagnostic_center.context import AppContext
from diagnostic_center.repositories.user import UserRepository


def get_db() -> Database:
    """Get MongoDB database connection."""
    return AppContext.build(get_settings()).db


def set_admin_by_email(db: Database, email: str) -> bool:
    """Set user as admin by email. Returns False when no such user exists."""
    repo = UserRepository(db)
    user = repo.find_by_email(email)
    if user is None:
        return False
    repo.promote_to_admin(user.id)
    return True


def list_users(db: Database) -> None:
    """List all users with their roles."""
    print("\nCurrent Users:")
    print("-" * 60)
    for user in UserRepository(db).find_many():
        role_badge = "ADMIN" if user.is_admin else "user "
        print(f"  {role_badge} | {user.email} | {user.status or 'N/A'}")
    print("-" * 60)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Set a user as admin in the Diagnostic Center database"
    )
    parser.add_argument(
        "email",
        nargs="?",
        help="Email address of the user to make admin",
    )
    parser.add_argument(
        "--list",
        "-l",
        action="store_true",
        help="List all users and their roles",
    )

    args = parser.parse_args(argv)
    db = get_db()

    if args.list:
        list_users(db)
        return

    if not args.email:
        parser.print_help()
        print("\nError: Please provide an email")
        sys.exit(1)

    print(f"Looking up user with email: {args.email}")
    if set_admin_by_email(db, args.email):
        print(f"Successfully set {args.email} as admin!")
        list_users(db)
    else:
        print(f"User not found: {args.email}")
        print("   Make sure the user has registered through POST /users.")
        sys.exit(1)


if __name__ == "__main__":
    main()
