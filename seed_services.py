#!/usr/bin/env python3
"""
Script to insert the default salon services into the services table
Usage: python seed_services.py
"""

import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent))

from app.database import Base, SessionLocal, engine
from app.models import Service

logging.basicConfig(level=logging.INFO, format="%(message)s")
logger = logging.getLogger(__name__)

DEFAULT_SERVICES = [
    {
        "name": "Women's Haircut",
        "description": "Professional haircut and styling with wash and blow dry",
        "duration": 60,
        "price": 35,
        "category": "hair",
    },
    {
        "name": "Men's Haircut",
        "description": "Classic men's haircut with clipper work and styling",
        "duration": 45,
        "price": 25,
        "category": "hair",
    },
    {
        "name": "Hair Coloring",
        "description": "Full hair coloring service with conditioning treatment",
        "duration": 120,
        "price": 80,
        "category": "hair",
    },
    {
        "name": "Classic Manicure",
        "description": "Basic manicure with cuticle care and polish",
        "duration": 45,
        "price": 20,
        "category": "nails",
    },
    {
        "name": "Spa Pedicure",
        "description": "Luxurious pedicure with foot massage and exfoliation",
        "duration": 60,
        "price": 35,
        "category": "nails",
    },
    {
        "name": "Deep Cleansing Facial",
        "description": "Professional facial treatment for deep pore cleansing",
        "duration": 75,
        "price": 65,
        "category": "skin",
    },
]


def seed_services(db) -> int:
    """Insert any default service not already present (matched by name)"""
    existing = {name for (name,) in db.query(Service.name).all()}
    inserted = 0

    for data in DEFAULT_SERVICES:
        if data["name"] in existing:
            logger.info(f"   ⏭️  '{data['name']}' already exists")
            continue
        db.add(Service(available=True, **data))
        inserted += 1
        logger.info(f"   ✅ Added '{data['name']}'")

    db.commit()
    return inserted


def main():
    Base.metadata.create_all(bind=engine, checkfirst=True)
    db = SessionLocal()

    try:
        logger.info("🔍 Seeding salon services...\n")
        inserted = seed_services(db)
        logger.info(f"\n✅ Seeding complete: {inserted} service(s) added")
    except Exception as e:
        db.rollback()
        logger.error(f"❌ Seeding failed: {e}")
        sys.exit(1)
    finally:
        db.close()


if __name__ == "__main__":
    main()
