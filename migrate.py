"""Migration / setup helper
This script creates the rides table in the configured database.
Run: python migrate.py
"""
from db import init_db, DATABASE_URL


def main():
    init_db()
    print(f"Database initialized ({DATABASE_URL})")


if __name__ == "__main__":
    main()
