from .advocates import router as advocates_router

ROUTERS = (advocates_router,)

__all__ = ["ROUTERS", "advocates_router"]
