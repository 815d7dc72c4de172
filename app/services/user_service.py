from typing import List
from sqlalchemy.orm import Session

from app.data.models.user import UserModel
from app.domain.enums import UserRole
from app.domain.errors import UserNotFound, DuplicateEmailError
from app.domain.schemas import UserCreate, UserUpdate, UserRead
from app.repos.user_repo import UserRepo
from app.utils.clock import utcnow
from app.utils.logging import get_logger

logger = get_logger(__name__)


class UserService:
    def __init__(self, db: Session):
        self.repo = UserRepo(db)

    def create_user(self, payload: UserCreate, role: UserRole = UserRole.CUSTOMER) -> UserRead:
        if self.repo.get_by_email(payload.email):
            raise DuplicateEmailError(payload.email)

        now = utcnow()
        user = UserModel(
            first_name=payload.first_name,
            last_name=payload.last_name,
            email=payload.email,
            phone=payload.phone,
            role=role.value,
            created_at=now,
            updated_at=now,
        )
        created = self.repo.create_user(user)
        logger.info(f"Created user {created.id} with role {created.role}")
        return UserRead.model_validate(created)

    def get_user(self, user_id: int) -> UserRead:
        user = self.repo.get_user(user_id)
        if not user:
            raise UserNotFound(user_id)
        return UserRead.model_validate(user)

    def list_users(self) -> List[UserRead]:
        return [UserRead.model_validate(u) for u in self.repo.list_users()]

    def update_user(self, user_id: int, payload: UserUpdate) -> UserRead:
        user = self.repo.get_user(user_id)
        if not user:
            raise UserNotFound(user_id)

        other = self.repo.get_by_email(payload.email)
        if other and other.id != user_id:
            raise DuplicateEmailError(payload.email)

        user.first_name = payload.first_name
        user.last_name = payload.last_name
        user.email = payload.email
        user.phone = payload.phone
        if payload.role is not None:
            user.role = payload.role.value
        user.updated_at = utcnow()

        saved = self.repo.save(user)
        logger.info(f"Updated user {user_id}")
        return UserRead.model_validate(saved)
