"""Mapper for User ORM ↔ Domain conversion."""

from lifelessons.domain.common.value_objects.ids import UserId
from lifelessons.domain.identity.entities.user import User
from lifelessons.models import User as UserORM


class UserMapper:
    """Mapper for User ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: UserORM) -> User:
        """Convert ORM model to domain entity."""
        return User.create_with_id(
            id=UserId(orm_model.id),
            email=orm_model.email,
            name=orm_model.name,
            photo_url=orm_model.photo_url,
            role=orm_model.role,
            is_premium=orm_model.is_premium,
            created_at=orm_model.created_at,
            last_login_at=orm_model.last_login_at,
        )

    def to_orm(self, domain_entity: User, orm_model: UserORM | None = None) -> UserORM:
        """
        Convert domain entity to ORM model.

        Updates only copy the mutable profile fields; role, is_premium and
        created_at are written once, on insert.
        """
        if orm_model:
            orm_model.name = domain_entity.name
            orm_model.photo_url = domain_entity.photo_url
            orm_model.last_login_at = domain_entity.last_login_at  # type: ignore[assignment]
            return orm_model

        return UserORM(
            email=domain_entity.email,
            name=domain_entity.name,
            photo_url=domain_entity.photo_url,
            role=domain_entity.role.value,
            is_premium=domain_entity.is_premium,
            created_at=domain_entity.created_at,
            last_login_at=domain_entity.last_login_at,
        )
