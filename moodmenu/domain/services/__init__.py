"""Domain services."""

from moodmenu.domain.services.auth_service import (
    AuthError,
    AuthService,
    InvalidCredentialsError,
    UserExistsError,
)
from moodmenu.domain.services.catalog import (
    CatalogError,
    InvalidRecipeError,
    NoRecipesAvailableError,
    RecipeCatalog,
    RecipeNotFoundError,
)
from moodmenu.domain.services.selector import RecipeSelector
from moodmenu.domain.services.sessions import (
    InMemorySessionStore,
    RedisSessionStore,
    SessionManager,
)

__all__ = [
    "AuthError",
    "AuthService",
    "CatalogError",
    "InMemorySessionStore",
    "InvalidCredentialsError",
    "InvalidRecipeError",
    "NoRecipesAvailableError",
    "RecipeCatalog",
    "RecipeNotFoundError",
    "RecipeSelector",
    "RedisSessionStore",
    "SessionManager",
    "UserExistsError",
]
