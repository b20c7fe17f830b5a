"""
Food and drink catalog management
"""

import logging
from typing import Dict, List, Tuple
from sqlalchemy.orm import Session

from app.core.config import settings
from app.models import Food, Drink
from app.services.repositories import CatalogRepo, FoodRepo, DrinkRepo

logger = logging.getLogger(__name__)

class CatalogService:
    """Service for the admin-curated food/drink catalog"""
    
    @staticmethod
    def list_catalog(db: Session) -> Tuple[List[Food], List[Drink]]:
        """Full catalog in insertion order"""
        return FoodRepo.list_all(db), DrinkRepo.list_all(db)
    
    @staticmethod
    def seed_defaults(db: Session) -> Dict[str, int]:
        """Fill empty catalog tables with the configured defaults.
        
        Tables that already hold rows are left alone, so running this on
        every startup never duplicates entries. Returns the number of rows
        inserted per table.
        """
        inserted = {"foods": 0, "drinks": 0}
        
        for key, repo, defaults in (
            ("foods", FoodRepo, settings.DEFAULT_FOODS),
            ("drinks", DrinkRepo, settings.DEFAULT_DRINKS),
        ):
            if repo.count(db) == 0:
                repo.create_many(db, defaults)
                inserted[key] = len(defaults)
                logger.info(f"Seeded {len(defaults)} default {key}")
        
        return inserted
    
    @staticmethod
    def _add_item(repo: CatalogRepo, name: str, db: Session):
        name = (name or "").strip()
        if not name:
            raise ValueError("Name is required")
        
        item = repo.create(db, name)
        logger.info(f"Added {repo.model.__tablename__} item {item.id}: {item.name}")
        return item
    
    @staticmethod
    def _remove_item(repo: CatalogRepo, item_id: int, db: Session) -> bool:
        item = repo.get_by_id(db, item_id)
        if not item:
            return False
        
        # Guests keep the names they already picked
        repo.delete(db, item)
        logger.info(f"Removed {repo.model.__tablename__} item {item_id}")
        return True
    
    @staticmethod
    def add_food(name: str, db: Session) -> Food:
        return CatalogService._add_item(FoodRepo, name, db)
    
    @staticmethod
    def remove_food(food_id: int, db: Session) -> bool:
        return CatalogService._remove_item(FoodRepo, food_id, db)
    
    @staticmethod
    def add_drink(name: str, db: Session) -> Drink:
        return CatalogService._add_item(DrinkRepo, name, db)
    
    @staticmethod
    def remove_drink(drink_id: int, db: Session) -> bool:
        return CatalogService._remove_item(DrinkRepo, drink_id, db)
