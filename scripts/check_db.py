#!/usr/bin/env python3
# scripts/check_db.py - Check database connection and status
import sys
import os

# Add the project root to Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sqlalchemy import inspect

from app.core.db import db_manager, get_engine
from app.models import Base


def check_database_connection():
    """Check if database connection is working and which tables exist"""
    print("Database Connection Check")
    print("=" * 40)

    status = db_manager.health_check()
    if status["status"] != "connected":
        print(f"❌ Connection failed: {status.get('error')}")
        print("\nTroubleshooting:")
        print("1. Check that the database server is running")
        print("2. Verify DATABASE_URL in the .env file")
        return False

    print(f"✅ Connection successful! ({status['response_time_ms']} ms)")
    print(f"Database: {status['database_url']}")

    existing = set(inspect(get_engine()).get_table_names())
    expected = set(Base.metadata.tables)
    print(f"Tables in database: {len(existing)}")

    missing = sorted(expected - existing)
    if missing:
        print("📝 Missing tables - run `alembic upgrade head`:")
        for table in missing:
            print(f"  - {table}")
    else:
        print("📋 All application tables present")
    return True


if __name__ == "__main__":
    sys.exit(0 if check_database_connection() else 1)
