"""Unit tests for auth/store.py and directory/store.py -- the in-memory repositories.

Covers:
- UserStore sequential ids, uniqueness, case-sensitive lookup
- EmployeeStore max + 1 id policy, in-place update, delete, seed
"""

import pytest

from auth.models import User
from auth.store import UsernameTakenError, UserStore
from directory.models import Employee
from directory.store import EmployeeStore

# ---------------------------------------------------------------------------
# UserStore
# ---------------------------------------------------------------------------


class TestUserStore:
    def test_ids_are_sequential(self) -> None:
        store = UserStore()
        assert not store.has_users()
        assert store.create_user(User(username="a", hashed_password="h")) == 1
        assert store.create_user(User(username="b", hashed_password="h")) == 2
        assert store.has_users()
        assert store.get_by_username("b").id == 2

    def test_created_at_is_set(self) -> None:
        store = UserStore()
        store.create_user(User(username="a", hashed_password="h"))
        assert store.get_by_username("a").created_at

    def test_duplicate_username_raises(self) -> None:
        store = UserStore()
        store.create_user(User(username="a", hashed_password="h"))
        with pytest.raises(UsernameTakenError) as exc_info:
            store.create_user(User(username="a", hashed_password="h2"))
        assert exc_info.value.username == "a"
        assert store.count() == 1

    def test_lookup_is_case_sensitive(self) -> None:
        store = UserStore()
        store.create_user(User(username="Admin", hashed_password="h"))
        assert store.get_by_username("admin") is None
        assert store.get_by_username("Admin") is not None

    def test_lookup_missing_username(self) -> None:
        assert UserStore().get_by_username("nobody") is None

    def test_default_role_is_member(self) -> None:
        store = UserStore()
        store.create_user(User(username="a", hashed_password="h"))
        assert store.get_by_username("a").role == "member"


# ---------------------------------------------------------------------------
# EmployeeStore
# ---------------------------------------------------------------------------


@pytest.fixture
def employees() -> EmployeeStore:
    """Store holding ids 1, 2, 5 (a gap, so max + 1 differs from count + 1)."""
    s = EmployeeStore()
    s.seed(
        [
            Employee(id=1, name="A", position="P", email="a@x"),
            Employee(id=2, name="B", position="P", email="b@x"),
            Employee(id=5, name="C", position="P", email="c@x"),
        ]
    )
    return s


class TestEmployeeStore:
    def test_first_id_is_one(self) -> None:
        store = EmployeeStore()
        assert store.create_employee("A", "P", "a@x").id == 1
        assert store.create_employee("B", "P", "b@x").id == 2

    def test_next_id_is_max_plus_one(self, employees: EmployeeStore) -> None:
        assert employees.create_employee("D", "P", "d@x").id == 6

    def test_seed_assigns_missing_ids(self) -> None:
        store = EmployeeStore()
        added = store.seed([Employee(name="A", position="P", email="a@x"), Employee(name="B", position="P", email="b@x")])
        assert added == 2
        assert [e.id for e in store.list_employees()] == [1, 2]

    def test_list_returns_copy(self, employees: EmployeeStore) -> None:
        listing = employees.list_employees()
        listing.clear()
        assert employees.count() == 3

    def test_update_keeps_id_and_position(self, employees: EmployeeStore) -> None:
        updated = employees.update_employee(2, "New", "Lead", "new@x")
        assert updated == Employee(id=2, name="New", position="Lead", email="new@x")
        assert [e.id for e in employees.list_employees()] == [1, 2, 5]
        assert employees.get_employee(2).name == "New"

    def test_update_missing_returns_none_without_change(self, employees: EmployeeStore) -> None:
        before = employees.list_employees()
        assert employees.update_employee(3, "X", "Y", "Z") is None
        assert employees.list_employees() == before

    def test_delete(self, employees: EmployeeStore) -> None:
        assert employees.delete_employee(2) is True
        assert employees.get_employee(2) is None
        assert employees.delete_employee(2) is False
        assert employees.count() == 2

    def test_deleting_max_id_reuses_it(self, employees: EmployeeStore) -> None:
        employees.delete_employee(5)
        assert employees.create_employee("D", "P", "d@x").id == 3

    def test_empty_after_deleting_all_restarts_at_one(self, employees: EmployeeStore) -> None:
        for e in employees.list_employees():
            employees.delete_employee(e.id)
        assert employees.count() == 0
        assert employees.create_employee("D", "P", "d@x").id == 1
