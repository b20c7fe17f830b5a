"""
Repository layer wrapping the SQLAlchemy queries for guests and the catalog.
"""

from __future__ import annotations

from typing import List, Optional, Type, Union

from sqlalchemy.orm import Session

from app.models import Drink, Food, Guest

CatalogModel = Type[Union[Food, Drink]]


# -------- Guest repository --------

class GuestRepo:
    @staticmethod
    def get_by_id(db: Session, guest_id: int) -> Optional[Guest]:
        return db.query(Guest).filter(Guest.id == guest_id).first()

    @staticmethod
    def create(db: Session, first_name: str, last_name: str) -> Guest:
        guest = Guest(first_name=first_name, last_name=last_name)
        db.add(guest)
        db.commit()
        db.refresh(guest)
        return guest

    @staticmethod
    def list_newest_first(db: Session) -> List[Guest]:
        return db.query(Guest).order_by(Guest.created_at.desc(), Guest.id.desc()).all()

    @staticmethod
    def set_preferences(db: Session, guest: Guest, foods: List[str], drinks: List[str], comments: str) -> Guest:
        # Fresh lists so the JSON columns are always flagged dirty
        guest.foods = list(foods)
        guest.drinks = list(drinks)
        guest.comments = comments
        db.commit()
        db.refresh(guest)
        return guest

    @staticmethod
    def delete(db: Session, guest: Guest) -> None:
        db.delete(guest)
        db.commit()


# -------- Catalog repository (foods and drinks share one shape) --------

class CatalogRepo:
    def __init__(self, model: CatalogModel):
        self.model = model

    def list_all(self, db: Session):
        return db.query(self.model).order_by(self.model.id).all()

    def get_by_id(self, db: Session, item_id: int):
        return db.query(self.model).filter(self.model.id == item_id).first()

    def count(self, db: Session) -> int:
        return db.query(self.model).count()

    def create(self, db: Session, name: str):
        item = self.model(name=name)
        db.add(item)
        db.commit()
        db.refresh(item)
        return item

    def create_many(self, db: Session, names: List[str]) -> None:
        db.add_all([self.model(name=name) for name in names])
        db.commit()

    def delete(self, db: Session, item) -> None:
        db.delete(item)
        db.commit()


FoodRepo = CatalogRepo(Food)
DrinkRepo = CatalogRepo(Drink)
