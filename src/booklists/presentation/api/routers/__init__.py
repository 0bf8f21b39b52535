from booklists.presentation.api.routers.auth import router as auth_router
from booklists.presentation.api.routers.lists import router as lists_router
from booklists.presentation.api.routers.users import router as users_router

__all__ = [
    "auth_router",
    "lists_router",
    "users_router",
]
