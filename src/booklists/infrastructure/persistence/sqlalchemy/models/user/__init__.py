from booklists.infrastructure.persistence.sqlalchemy.models.user.user_model import (
    AboutEntryModel,
    UserModel,
)

__all__ = ["AboutEntryModel", "UserModel"]
