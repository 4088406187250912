from contextlib import asynccontextmanager
from creational.routers import demo, patterns, system
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from creational.core.config_manager import config_manager
from creational.core.service_manager import service_manager
import logging

settings = config_manager.settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize application services on startup and clean them up on shutdown."""
    logger.info(f"Starting {settings.app_name}...")

    service_manager.initialize()
    status = service_manager.get_application_status()

    if status["application_healthy"]:
        logger.info("All services initialized successfully")
    else:
        logger.error("Some services failed to initialize properly")
        logger.error(f"System status: {status}")

    yield

    logger.info(f"Shutting down {settings.app_name}...")
    service_manager.shutdown()
    logger.info("Application shutdown complete")


app = FastAPI(
    title=settings.app_name,
    description="Singleton, Builder, Prototype and Factory: the creational design patterns, documented and demonstrated",
    version="1.0.0",
    debug=settings.debug,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Include routers
app.include_router(patterns.router)      # Documentation catalog
app.include_router(demo.router)          # Pattern demonstrations
app.include_router(system.router)        # System management endpoints


# Health check endpoint
@app.get("/health", tags=["Health"])
def health_check():
    """API health check endpoint"""
    return {
        "success": True,
        "message": f"{settings.app_name} is running successfully",
        "version": "1.0.0",
        "system_status": service_manager.get_application_status()
    }

