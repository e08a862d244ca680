from simconnect.core.database import Base, SessionLocal, engine
from simconnect.services.catalog import CatalogStore


def main():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        seeded = CatalogStore(db).initialize()
    finally:
        db.close()
    if seeded:
        print(f"Seeded: {', '.join(seeded)}")
    else:
        print("Catalog already initialized; nothing to seed.")


if __name__ == "__main__":
    main()
