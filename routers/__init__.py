# routers/__init__.py
from .auth import router as auth_router
from .properties import router as properties_router
from .tenants import router as tenants_router
from .leases import router as leases_router
from .rent_payments import router as rent_payments_router
from .expenses import router as expenses_router
from .valuations import router as valuations_router

all_routers = [
     auth_router,
     properties_router,
     tenants_router,
     leases_router,
     rent_payments_router,
     expenses_router,
     valuations_router,
]

__all__ = ["all_routers"]
