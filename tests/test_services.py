"""
Service layer tests against a real (in-memory) database session.

Covers UserService, MealService, MetricsService and SessionService without
going through HTTP.
"""

import uuid

import pytest
from sqlalchemy.orm import Session

from test_fixtures import db_session, at
from app.exceptions import ConflictError, NotFoundError
from domain.schemas.meal_schemas import MealCreate, MealPatch
from domain.schemas.user_schemas import UserCredentials
from services import MealService, MetricsService, SessionService, UserService


def _meal(name="Dinner", minutes=0, on_diet=True) -> MealCreate:
    return MealCreate(
        name=name, description="Grilled fish", date=at(minutes).isoformat(), isOnDiet=on_diet
    )


# =============================================================================
# SESSION SERVICE
# =============================================================================


def test_resolve_keeps_existing_session():
    assert SessionService.resolve("abc") == ("abc", False)


@pytest.mark.parametrize("incoming", [None, ""])
def test_resolve_issues_new_session(incoming):
    session_id, issued = SessionService.resolve(incoming)

    assert issued is True
    assert uuid.UUID(session_id)


# =============================================================================
# USER SERVICE
# =============================================================================


def test_register_generates_session(db_session: Session):
    user, issued = UserService.register(db_session, UserCredentials(name="Ana", password="pw"))

    assert issued is True
    assert uuid.UUID(user.id)
    assert user.name == "Ana"


def test_register_uses_current_session(db_session: Session):
    user, issued = UserService.register(
        db_session, UserCredentials(name="Ana", password="pw"), "existing-token"
    )

    assert issued is False
    assert user.id == "existing-token"


def test_register_duplicate_name(db_session: Session):
    UserService.register(db_session, UserCredentials(name="Ana", password="pw"))

    with pytest.raises(ConflictError, match="User already exists"):
        UserService.register(db_session, UserCredentials(name="Ana", password="other"))


def test_register_duplicate_session(db_session: Session):
    UserService.register(db_session, UserCredentials(name="Ana", password="pw"), "tok")

    with pytest.raises(ConflictError, match="Session ID already exists"):
        UserService.register(db_session, UserCredentials(name="Bea", password="pw"), "tok")


def test_authenticate(db_session: Session):
    user, _ = UserService.register(db_session, UserCredentials(name="Ana", password="pw"))

    assert UserService.authenticate(db_session, UserCredentials(name="Ana", password="pw")).id == user.id

    with pytest.raises(NotFoundError, match="User not found"):
        UserService.authenticate(db_session, UserCredentials(name="Ana", password="PW"))


# =============================================================================
# MEAL SERVICE
# =============================================================================


def test_create_meal_issues_session_when_missing(db_session: Session):
    meal, issued = MealService.create_meal(db_session, None, _meal())

    assert issued is True
    assert meal.session_id
    assert meal.id


def test_meal_ownership(db_session: Session):
    meal, _ = MealService.create_meal(db_session, "owner", _meal())

    assert MealService.get_meal(db_session, "owner", meal.id).id == meal.id
    with pytest.raises(NotFoundError):
        MealService.get_meal(db_session, "someone-else", meal.id)
    with pytest.raises(NotFoundError):
        MealService.delete_meal(db_session, "someone-else", meal.id)

    assert [m.id for m in MealService.list_meals(db_session, "owner")] == [meal.id]
    assert MealService.list_meals(db_session, "someone-else") == []


def test_replace_meal(db_session: Session):
    meal, _ = MealService.create_meal(db_session, "s1", _meal("Dinner", 0, True))

    updated = MealService.replace_meal(db_session, "s1", meal.id, _meal("Supper", 30, False))

    assert updated.name == "Supper"
    assert updated.is_on_diet is False


def test_patch_meal_merges_present_keys_only(db_session: Session):
    meal, _ = MealService.create_meal(db_session, "s1", _meal("Dinner", 0, True))

    patched = MealService.patch_meal(
        db_session, "s1", meal.id, MealPatch.model_validate({"isOnDiet": False})
    )

    assert patched.is_on_diet is False
    assert patched.name == "Dinner"
    assert patched.description == "Grilled fish"


def test_delete_meal(db_session: Session):
    meal, _ = MealService.create_meal(db_session, "s1", _meal())

    MealService.delete_meal(db_session, "s1", meal.id)

    with pytest.raises(NotFoundError):
        MealService.get_meal(db_session, "s1", meal.id)


# =============================================================================
# METRICS SERVICE
# =============================================================================


def test_compute_metrics_orders_by_date_time(db_session: Session):
    # Inserted out of order; chronologically: on, on, off, on
    for minutes, on_diet in [(3, True), (0, True), (2, False), (1, True)]:
        MealService.create_meal(db_session, "s1", _meal(minutes=minutes, on_diet=on_diet))
    MealService.create_meal(db_session, "s2", _meal(on_diet=True))

    metrics = MetricsService.compute_metrics(db_session, "s1")

    assert metrics.total_meals == 4
    assert metrics.meals_on_diet == 3
    assert metrics.meals_off_diet == 1
    assert metrics.best_sequence_on_diet == 2
