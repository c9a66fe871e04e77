from api.v1.router.contact import contact_router
from api.v1.router.health import health_router
from api.v1.router.subscribe import subscribe_router

__all__ = ["contact_router", "health_router", "subscribe_router"]
