#!/usr/bin/env python3
"""
One-shot local installer: writes .env for a local SQLite database, creates the
tables and seeds sample data.

Usage:
  python scripts/setup_backend.py
"""
import os
import sys

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, ROOT)

DEFAULT_DATABASE_URL = "sqlite:///./var/dev.db"


def write_env(path: str) -> bool:
    if os.path.exists(path):
        print(f"   {path} already exists, keeping it")
        return False
    with open(path, "w", encoding="utf-8") as fh:
        fh.write(f'DATABASE_URL="{DEFAULT_DATABASE_URL}"\n')
    print(f"   {path} created")
    return True


def main() -> int:
    print("=============================================")
    print("🚀 PMS backend setup")
    print("=============================================")

    print("\n⚙️  Configuring local database (SQLite)...")
    os.chdir(ROOT)
    write_env(os.path.join(ROOT, ".env"))
    os.makedirs(os.path.join(ROOT, "var"), exist_ok=True)

    # Settings read .env at import time, so import only after it is written
    from pms.db import Base, engine, SessionLocal
    from pms.services.seed import seed

    try:
        print("\n🗄️  Creating tables...")
        Base.metadata.create_all(bind=engine)

        print("\n🌱 Inserting sample data...")
        db = SessionLocal()
        try:
            seed(db)
        finally:
            db.close()
    except Exception as e:
        print(f"\n❌ Setup failed: {e}")
        return 1

    print("\n✅ Setup complete. Start the API with: uvicorn pms.main:app --port 3001")
    return 0


if __name__ == "__main__":
    sys.exit(main())
