from __future__ import annotations

from easybook.domain.entities.service import Service
from easybook.domain.entities.user import User

SEED_CATEGORIES: tuple[str, ...] = (
    "Plumbing",
    "Cleaning",
    "Electrical",
    "HVAC",
    "Beauty",
    "Tutoring",
    "Fitness",
)

CATEGORY_DESCRIPTIONS: dict[str, str] = {
    "plumbing": "Plumbing and water system services",
    "cleaning": "House and office cleaning services",
    "electrical": "Electrical installation and repair",
    "hvac": "Heating, ventilation, and air conditioning",
    "beauty": "Beauty and personal care services",
    "tutoring": "Educational and tutoring services",
    "fitness": "Personal training and fitness",
}

DEFAULT_CATEGORY_DESCRIPTION = "Professional services"

# (id, name, description, category, price, rating, duration minutes)
_SEED_SERVICE_ROWS: tuple[tuple[str, str, str, str, float, float, str], ...] = (
    ("1", "Emergency Plumbing Repair", "24/7 emergency plumbing services for leaks, clogs, and urgent repairs.", "Plumbing", 120.0, 4.5, "60"),
    ("2", "Pipe Installation", "Professional pipe installation and repair services.", "Plumbing", 200.0, 4.8, "120"),
    ("3", "Deep House Cleaning", "Complete deep cleaning of your home including all rooms and bathrooms.", "Cleaning", 150.0, 4.7, "180"),
    ("4", "Office Cleaning", "Professional office cleaning services for businesses.", "Cleaning", 100.0, 4.6, "120"),
    ("5", "Electrical Outlet Installation", "Professional installation of new electrical outlets and switches.", "Electrical", 85.0, 4.3, "45"),
    ("6", "Light Fixture Installation", "Installation of new light fixtures and electrical components.", "Electrical", 120.0, 4.4, "60"),
    ("7", "HVAC System Repair", "Professional heating, ventilation, and air conditioning system repair.", "HVAC", 200.0, 4.6, "120"),
    ("8", "Air Conditioning Installation", "Complete air conditioning system installation with warranty.", "HVAC", 800.0, 4.9, "240"),
    ("9", "Hair Styling", "Professional hair styling and cutting services.", "Beauty", 50.0, 4.5, "60"),
    ("10", "Facial Treatment", "Relaxing facial treatment and skincare services.", "Beauty", 80.0, 4.7, "90"),
    ("11", "Math Tutoring", "One-on-one math tutoring for all grade levels.", "Tutoring", 50.0, 4.7, "60"),
    ("12", "English Tutoring", "Professional English language tutoring and writing assistance.", "Tutoring", 45.0, 4.6, "60"),
    ("13", "Personal Training", "One-on-one personal training sessions with certified trainers.", "Fitness", 75.0, 4.8, "60"),
    ("14", "Yoga Classes", "Group and private yoga classes for all skill levels.", "Fitness", 40.0, 4.5, "60"),
)

_SEED_PROVIDER_ROWS: tuple[tuple[str, str, str, str, str], ...] = (
    ("provider1", "John", "Smith", "john.smith@email.com", "555-0101"),
    ("provider2", "Sarah", "Johnson", "sarah.johnson@email.com", "555-0102"),
    ("provider3", "Mike", "Wilson", "mike.wilson@email.com", "555-0103"),
    ("provider4", "Lisa", "Brown", "lisa.brown@email.com", "555-0104"),
    ("provider5", "David", "Davis", "david.davis@email.com", "555-0105"),
)


def seed_services() -> list[Service]:
    return [
        Service(
            id=service_id,
            name=name,
            description=description,
            category=category,
            price=price,
            rating=rating,
            duration=duration,
        )
        for service_id, name, description, category, price, rating, duration in _SEED_SERVICE_ROWS
    ]


def seed_providers() -> list[User]:
    return [
        User(
            id=provider_id,
            first_name=first_name,
            last_name=last_name,
            email=email,
            phone=phone,
            role="provider",
            is_verified=True,
        )
        for provider_id, first_name, last_name, email, phone in _SEED_PROVIDER_ROWS
    ]


def describe_category(name: str) -> str:
    return CATEGORY_DESCRIPTIONS.get(name.strip().lower(), DEFAULT_CATEGORY_DESCRIPTION)
