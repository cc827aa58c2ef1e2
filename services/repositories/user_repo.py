"""User repository for seller and administrator profiles."""

import logging
from typing import Optional, List, Dict

from .base import BaseRepository

logger = logging.getLogger(__name__)


class UserRepository(BaseRepository):
    """Read access to users plus self-service profile edits.

    Accounts themselves are created by the identity provider.
    """

    ROLE_ADMIN = "ADMIN"
    ROLE_SELLER = "SELLER"

    def get_by_id(self, user_id: int) -> Optional[Dict]:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User row or None
        """
        return self._fetch_one("SELECT * FROM users WHERE id = %s", (user_id,))

    def get_all(self) -> List[Dict]:
        """Get every user, ordered by name."""
        return self._fetch_all("SELECT * FROM users ORDER BY name ASC, id ASC")

    def get_sellers(self) -> List[Dict]:
        """Get users with the SELLER role, ordered by name."""
        query = "SELECT * FROM users WHERE role = %s ORDER BY name ASC, id ASC"
        return self._fetch_all(query, (self.ROLE_SELLER,))

    def is_admin(self, user_id: int) -> bool:
        user = self.get_by_id(user_id)
        return bool(user) and user.get("role") == self.ROLE_ADMIN

    def update_profile(
        self,
        user_id: int,
        name: str,
        phone: Optional[str] = None,
        gcash: Optional[str] = None
    ) -> bool:
        """Update the editable profile fields.

        Args:
            user_id: User ID
            name: Display name (required)
            phone: Phone number
            gcash: GCash account number for payouts

        Returns:
            True if updated

        Raises:
            ValueError: If name is blank
        """
        name = (name or "").strip()
        if not name:
            raise ValueError("Name is required")

        query = """
            UPDATE users
            SET name = %s, phone = %s, gcash = %s, updated_at = now()
            WHERE id = %s
        """
        affected = self._write(query, (
            name,
            (phone or "").strip() or None,
            (gcash or "").strip() or None,
            user_id
        ))
        if affected > 0:
            logger.info(f"Updated profile for user {user_id}")
            return True
        return False
