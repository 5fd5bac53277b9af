"""
api/seed.py -- Demo data loaded at startup.

Creates one admin account and two employee records so a fresh instance can be
exercised immediately:

    POST /login {"username": "admin", "password": "adminpassword"}
    GET  /employees  -> John Doe, Jane Smith

Disabled with SEED_DEMO_DATA=false. The admin password comes from
SEED_ADMIN_PASSWORD.
"""

import logging

from auth.models import ADMIN_ROLE
from auth.store import UserStore
from auth.tokens import register_user
from core.config import Settings
from directory.models import Employee
from directory.store import EmployeeStore

logger = logging.getLogger("staffdesk.seed")

SEED_ADMIN_USERNAME = "admin"

SEED_EMPLOYEES = (
    {"id": 1, "name": "John Doe", "position": "Software Engineer", "email": "john.doe@example.com"},
    {"id": 2, "name": "Jane Smith", "position": "Product Manager", "email": "jane.smith@example.com"},
)


def seed_demo_data(settings: Settings, user_store: UserStore, employee_store: EmployeeStore) -> None:
    """Populate empty stores with the demo admin and employees."""
    if not settings.seed_demo_data:
        logger.info("Demo seed disabled")
        return

    if not user_store.has_users():
        register_user(user_store, SEED_ADMIN_USERNAME, settings.seed_admin_password, ADMIN_ROLE)

    if employee_store.count() == 0:
        added = employee_store.seed(Employee(**row) for row in SEED_EMPLOYEES)
        logger.info("Seeded %d employees", added)
