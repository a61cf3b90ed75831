import argparse

from sqlalchemy import delete

from supply_api.config import get_settings
from supply_api.core.logging import setup_logging
from supply_api.database import Base, create_db_engine, create_session_factory, ensure_search_indexes
from supply_api.database.seed import seed_demo_data
from supply_api.models import (
    Branch,
    Delivery,
    Headquarters,
    Order,
    OrderDetail,
    Product,
    Supplier,
    import_all_models,
)


def parse_args():
    parser = argparse.ArgumentParser(description="Seed sample supply-chain data.")
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Clear existing data before seeding.",
    )
    return parser.parse_args()


def main():
    settings = get_settings()
    setup_logging(settings)
    args = parse_args()

    engine = create_db_engine(settings.DATABASE_URL)
    import_all_models()
    Base.metadata.create_all(bind=engine)
    ensure_search_indexes(engine)

    db = create_session_factory(engine)()
    try:
        if args.reset:
            for model in (OrderDetail, Order, Delivery, Product, Supplier, Branch, Headquarters):
                db.execute(delete(model))
            db.commit()

        if seed_demo_data(db):
            print("Seed data created.")
        else:
            print("Seed skipped: headquarters already exist.")
    finally:
        db.close()
        engine.dispose()


if __name__ == "__main__":
    main()
