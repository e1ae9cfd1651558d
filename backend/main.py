import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tripgenius.api.routes_auth import router as auth_router
from tripgenius.api.routes_ai import router as ai_router
from tripgenius.api.routes_weather import router as weather_router
from tripgenius.api.routes_search import router as search_router
from tripgenius.api.routes_trips import router as trips_router
from tripgenius.api.routes_currency import router as currency_router
from tripgenius.api.routes_geo import router as geo_router
from tripgenius.api.routes_explore import router as explore_router
from tripgenius.api.routes_planner import router as planner_router
from tripgenius.api.routes_collab import router as collab_router

from tripgenius.core.config_loader import settings
from tripgenius.core.errors import register_exception_handlers
from tripgenius.core.logger import logger


app = FastAPI(
    title="TripGenius",
    description="Trip planning API: itineraries, trips, weather, geocoding and travel data",
    version="1.0.0"
)

# -------------------------------------------------------------
# CORS
# -------------------------------------------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# -------------------------------------------------------------
# ERRORS
# -------------------------------------------------------------
register_exception_handlers(app)

# -------------------------------------------------------------
# ROUTES
# -------------------------------------------------------------
for router in (
    auth_router,
    ai_router,
    weather_router,
    search_router,
    trips_router,
    currency_router,
    geo_router,
    explore_router,
    planner_router,
    collab_router,
):
    app.include_router(router, prefix="/api")


# -------------------------------------------------------------
# HEALTH
# -------------------------------------------------------------
@app.get("/health")
def health():
    return {"ok": True}


@app.get("/api/ping")
def ping():
    return {"message": settings.ping_message}


logger.info(f"TripGenius API ready (env={settings.environment}, store={settings.storage_backend})")


# -------------------------------------------------------------
# RUN LOCAL
# -------------------------------------------------------------
if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.environment == "development"
    )
