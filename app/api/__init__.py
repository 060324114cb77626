from .auth import router as auth_router
from .config import router as config_router
from .catalog import router as catalog_router
from .quotes import router as quotes_router
from .contracts import router as contracts_router
from .dashboard import router as dashboard_router
from .settings import router as settings_router
from .profile import router as profile_router

__all__ = [
    "auth_router",
    "config_router",
    "catalog_router",
    "quotes_router",
    "contracts_router",
    "dashboard_router",
    "settings_router",
    "profile_router"
]
