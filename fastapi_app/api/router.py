from fastapi import APIRouter

from fastapi_app.api.routes import orders, analytics, menu, admin, bot

api_router = APIRouter()

api_router.include_router(orders.router)
api_router.include_router(analytics.router)
api_router.include_router(menu.router)
api_router.include_router(admin.router)
api_router.include_router(bot.router)


@api_router.get("/health", tags=["health"])
def health():
    return {"status": "ok"}
