"""
Guest registration and preference persistence
"""

import logging
from typing import List, Optional
from sqlalchemy.orm import Session

from app.models import Guest
from app.services.repositories import GuestRepo

logger = logging.getLogger(__name__)

class PreferenceService:
    """Service for guest registration and food/drink preferences"""
    
    @staticmethod
    def register_guest(first_name: str, last_name: str, db: Session) -> Guest:
        """Create a guest with empty preferences.
        
        Raises ValueError when either name is blank.
        """
        first_name = (first_name or "").strip()
        last_name = (last_name or "").strip()
        if not first_name or not last_name:
            raise ValueError("Name fields are required")
        
        guest = GuestRepo.create(db, first_name, last_name)
        logger.info(f"Registered guest {guest.id}: {guest.full_name}")
        return guest
    
    @staticmethod
    def save_preferences(
        guest_id: int,
        foods: Optional[List[str]],
        drinks: Optional[List[str]],
        comments: Optional[str],
        db: Session
    ) -> Optional[Guest]:
        """Overwrite a guest's selections wholesale.
        
        Returns None when the guest does not exist.
        """
        guest = GuestRepo.get_by_id(db, guest_id)
        if not guest:
            logger.warning(f"Preferences submitted for unknown guest {guest_id}")
            return None
        
        guest = GuestRepo.set_preferences(
            db,
            guest,
            foods=foods or [],
            drinks=drinks or [],
            comments=(comments or "").strip()
        )
        logger.info(
            f"Saved preferences for guest {guest.id}: "
            f"{len(guest.foods)} foods, {len(guest.drinks)} drinks"
        )
        return guest
    
    @staticmethod
    def list_guests(db: Session) -> List[Guest]:
        """All guests, most recently registered first"""
        return GuestRepo.list_newest_first(db)
    
    @staticmethod
    def delete_guest(guest_id: int, db: Session) -> bool:
        guest = GuestRepo.get_by_id(db, guest_id)
        if not guest:
            return False
        
        GuestRepo.delete(db, guest)
        logger.info(f"Deleted guest {guest_id}")
        return True
