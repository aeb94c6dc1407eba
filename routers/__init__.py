from .properties import router as properties_router
from .rent import router as rent_router

__all__ = [
     "properties_router",
     "rent_router",
]
