"""
User CRUD operations.

Dependencies: sqlalchemy, coachdesk.boundary.db.models
System role: Coach account persistence
"""

from coachdesk.boundary.db.CRUD.base_crud import BaseCRUD
from coachdesk.boundary.db.models.user_model import UserModel


class UserCRUD(BaseCRUD[UserModel]):
    """CRUD operations for UserModel (primary key is the auth provider uid)."""

    def __init__(self) -> None:
        """Initialize UserCRUD with UserModel."""
        super().__init__(UserModel)


user_crud = UserCRUD()
