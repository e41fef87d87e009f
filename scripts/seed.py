"""
Seed the database with default catalogs and sample records.

Usage:
  python scripts/seed.py            # wipe and repopulate
  python scripts/seed.py --if-empty # only seed a fresh database
"""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from pms.db import SessionLocal, Base, engine
from pms.services.seed import seed, seed_if_empty


def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        if "--if-empty" in argv:
            if not seed_if_empty(db):
                print("Database already has data, nothing to do")
                return 0
            print("✅ Seed complete")
            return 0
        counts = seed(db)
        for table, rows in counts.items():
            print(f"  {table}: {rows}")
        print("✅ Seed complete")
        return 0
    except Exception as e:
        db.rollback()
        print(f"❌ Error seeding database: {e}")
        raise
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
