"""Database initialization script with seed data."""

from datetime import date

from sqlalchemy.orm import Session

from app.database import Base, SessionLocal, engine
from app.models import Category, Employee
from app.schemas.asset import AssetDraft
from app.schemas.category import CategoryReference
from app.services import (
    AssetLifecycleService,
    AssetRepository,
    CategoryRepository,
    EmployeeRepository,
)

SAMPLE_CATEGORIES = [
    ("Electronics", "Laptops, monitors and other IT hardware"),
    ("Furniture", "Desks, chairs and storage"),
]

SAMPLE_EMPLOYEES = [
    (1001, "Asha Verma", "Software Engineer"),
    (1002, "Daniel Okafor", "Office Manager"),
]


def create_tables():
    """Create all database tables."""
    print("Creating database tables...")
    Base.metadata.create_all(bind=engine)
    print("Tables created successfully!")


def seed_data(db: Session):
    """Seed the database with sample data for local development.

    Skips seeding if any category exists already.
    """
    categories = CategoryRepository(db)
    if categories.find_all():
        print("Database already seeded, skipping.")
        return

    print("\nSeeding database with sample data...")

    print("Creating categories...")
    saved_categories = {
        name: categories.save(Category(name=name, description=description))
        for name, description in SAMPLE_CATEGORIES
    }

    print("Creating employees...")
    employees = EmployeeRepository(db)
    for employee_id, full_name, designation in SAMPLE_EMPLOYEES:
        employees.save(Employee(id=employee_id, full_name=full_name, designation=designation))

    print("Creating assets...")
    service = AssetLifecycleService(AssetRepository(db), categories, employees)
    electronics = CategoryReference(id=saved_categories["Electronics"].id)
    furniture = CategoryReference(id=saved_categories["Furniture"].id)

    laptop = service.create(
        AssetDraft(
            name="Laptop - ThinkPad T14",
            purchase_date=date(2024, 3, 15),
            condition_notes="New",
            category=electronics,
        )
    ).unwrap()
    service.create(AssetDraft(name="Monitor 27in", category=electronics)).unwrap()
    service.create(AssetDraft(name="Standing Desk", category=furniture)).unwrap()

    service.assign(laptop.id, SAMPLE_EMPLOYEES[0][0]).unwrap()

    print("Seed data created successfully!")


if __name__ == "__main__":
    create_tables()
    db = SessionLocal()
    try:
        seed_data(db)
    finally:
        db.close()
