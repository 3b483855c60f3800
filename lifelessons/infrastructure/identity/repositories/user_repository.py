"""Repository for the user ledger."""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from lifelessons.domain.identity.entities.user import User
from lifelessons.domain.identity.exceptions import EmailAlreadyExistsError
from lifelessons.infrastructure.identity.mappers.user_mapper import UserMapper
from lifelessons.models import User as UserORM

logger = logging.getLogger(__name__)


class UserRepository:
    """Users looked up by their email, the ledger's natural key."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = UserMapper()

    def _find_orm(self, email: str) -> UserORM | None:
        return self.db.execute(select(UserORM).where(UserORM.email == email)).scalar_one_or_none()

    def find_by_email(self, email: str) -> User | None:
        orm_model = self._find_orm(email)
        return self.mapper.to_domain(orm_model) if orm_model else None

    def save(self, user: User) -> User:
        """
        Insert a new user or write back profile changes of an existing one.

        Raises:
            EmailAlreadyExistsError: If another request registered the email first
        """
        if not user.is_persisted:
            return self._insert(user)

        orm_model = self.db.get(UserORM, user.id.value)
        if orm_model is None:
            raise ValueError(f"User with id {user.id.value} not found")
        self.mapper.to_orm(user, orm_model)
        self.db.commit()
        self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)

    def _insert(self, user: User) -> User:
        orm_model = self.mapper.to_orm(user)
        self.db.add(orm_model)
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            if self._find_orm(user.email) is not None:
                raise EmailAlreadyExistsError(user.email) from e
            raise
        self.db.refresh(orm_model)
        logger.info(f"Provisioned user {orm_model.id} for {user.email}")
        return self.mapper.to_domain(orm_model)
