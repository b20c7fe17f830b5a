"""
Tests for guest registration and preference persistence
"""

import pytest
from datetime import datetime, timedelta
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from app.core.db import Base
from app.models import Guest
from app.services.catalog_service import CatalogService
from app.services.preference_service import PreferenceService

# Test database setup
SQLALCHEMY_DATABASE_URL = "sqlite:///./test_preferences.db"
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

@pytest.fixture
def db_session():
    """Create test database session"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)

@pytest.fixture
def seeded_catalog(db_session):
    """Default foods and drinks"""
    CatalogService.seed_defaults(db_session)
    return db_session

def test_register_guest_assigns_id(db_session):
    """Test a fresh registration gets id 1 and empty preferences"""
    guest = PreferenceService.register_guest("Anna", "Ivanova", db_session)
    
    assert guest.id == 1
    assert guest.first_name == "Anna"
    assert guest.last_name == "Ivanova"
    assert guest.foods is None
    assert guest.drinks is None
    assert guest.comments is None
    assert guest.created_at is not None

def test_register_guest_strips_names(db_session):
    """Test surrounding whitespace is dropped from names"""
    guest = PreferenceService.register_guest("  Anna ", " Ivanova  ", db_session)
    
    assert guest.full_name == "Anna Ivanova"

@pytest.mark.parametrize("first_name,last_name", [
    ("", "Ivanova"),
    ("Anna", ""),
    ("   ", "Ivanova"),
    ("Anna", None),
])
def test_register_guest_requires_both_names(db_session, first_name, last_name):
    """Test empty first or last name is rejected"""
    with pytest.raises(ValueError):
        PreferenceService.register_guest(first_name, last_name, db_session)
    
    assert db_session.query(Guest).count() == 0

def test_save_preferences_round_trip(seeded_catalog):
    """Test saved selections come back from the guest list in order"""
    db = seeded_catalog
    guest = PreferenceService.register_guest("Anna", "Ivanova", db)
    
    PreferenceService.save_preferences(
        guest_id=guest.id,
        foods=["Торт", "Пицца", "Суши"],
        drinks=["Вода", "Чай"],
        comments="  без орехов ",
        db=db
    )
    
    guests = PreferenceService.list_guests(db)
    assert guests[0].foods == ["Торт", "Пицца", "Суши"]
    assert guests[0].drinks == ["Вода", "Чай"]
    assert guests[0].comments == "без орехов"

def test_save_preferences_overwrites_wholesale(db_session):
    """Test a second submission replaces the first one entirely"""
    guest = PreferenceService.register_guest("Anna", "Ivanova", db_session)
    PreferenceService.save_preferences(guest.id, ["Пицца"], ["Сок"], "first", db_session)
    
    updated = PreferenceService.save_preferences(guest.id, None, ["Кофе"], None, db_session)
    
    assert updated.foods == []
    assert updated.drinks == ["Кофе"]
    assert updated.comments == ""

def test_save_preferences_unknown_guest(db_session):
    """Test saving for a guest that does not exist reports not found"""
    result = PreferenceService.save_preferences(42, ["Пицца"], [], "", db_session)
    
    assert result is None
    assert db_session.query(Guest).count() == 0

def test_list_guests_newest_first(db_session):
    """Test guest listing is ordered by creation time descending"""
    now = datetime.utcnow()
    db_session.add_all([
        Guest(first_name="Old", last_name="Guest", created_at=now - timedelta(days=2)),
        Guest(first_name="New", last_name="Guest", created_at=now),
        Guest(first_name="Middle", last_name="Guest", created_at=now - timedelta(days=1)),
    ])
    db_session.commit()
    
    names = [guest.first_name for guest in PreferenceService.list_guests(db_session)]
    
    assert names == ["New", "Middle", "Old"]

def test_removing_catalog_item_keeps_guest_choices(seeded_catalog):
    """Test guests keep names of catalog items deleted after submission"""
    db = seeded_catalog
    guest = PreferenceService.register_guest("Anna", "Ivanova", db)
    PreferenceService.save_preferences(guest.id, ["Пицца"], ["Вода"], "", db)
    
    foods, drinks = CatalogService.list_catalog(db)
    pizza = next(food for food in foods if food.name == "Пицца")
    water = next(drink for drink in drinks if drink.name == "Вода")
    assert CatalogService.remove_food(pizza.id, db)
    assert CatalogService.remove_drink(water.id, db)
    
    foods, drinks = CatalogService.list_catalog(db)
    assert "Пицца" not in [food.name for food in foods]
    assert "Вода" not in [drink.name for drink in drinks]
    
    stored = PreferenceService.list_guests(db)[0]
    assert stored.foods == ["Пицца"]
    assert stored.drinks == ["Вода"]

def test_delete_guest(db_session):
    """Test deleting a guest removes only that guest"""
    anna = PreferenceService.register_guest("Anna", "Ivanova", db_session)
    boris = PreferenceService.register_guest("Boris", "Petrov", db_session)
    
    assert PreferenceService.delete_guest(anna.id, db_session)
    assert not PreferenceService.delete_guest(anna.id, db_session)
    
    remaining = PreferenceService.list_guests(db_session)
    assert [guest.id for guest in remaining] == [boris.id]
