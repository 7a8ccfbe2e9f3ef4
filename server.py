from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from database.mongodb import db
from config import get_settings
from routes import fleet, trips, flight_logs, component_times
from services.indexes import ensure_indexes
import logging

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifecycle manager for the app"""
    # Startup
    await db.connect(settings.mongo_url, settings.db_name)
    await ensure_indexes(db.get_db())
    logger.info(f"FlightOps360 API started ({settings.environment})")
    yield
    # Shutdown
    await db.disconnect()
    logger.info("FlightOps360 API stopped")

app = FastAPI(
    title="FlightOps360 API",
    description="Part 135 charter operations back-office: fleet, trips, flight logs and component times",
    version="1.0.0",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(fleet.router)
app.include_router(trips.router)
app.include_router(flight_logs.router)
app.include_router(component_times.router)

@app.get("/")
async def root():
    return {
        "message": "FlightOps360 API",
        "version": "1.0.0",
        "status": "running"
    }

@app.get("/health")
async def health_check():
    return {"status": "healthy"}
