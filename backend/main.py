import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from config import CORS_ORIGINS, LOG_LEVEL, SHEETS_API_URL
from api.pages import router as pages_router
from api.site import router as site_router
from api.content import router as content_router
import services

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Sheets CMS Backend",
    description="Headless CMS API backed by a spreadsheet store, with AI drafting",
    version="1.0.0"
)

# Add CORS middleware for frontend connections
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(pages_router)
app.include_router(site_router)
app.include_router(content_router)


# Startup event
@app.on_event("startup")
async def startup_event():
    """Create the shared store client, page manager and content generator"""
    services.initialize_services()
    if not SHEETS_API_URL:
        logger.warning("SHEETS_API_URL is not set, store mirroring will fail")
    logger.info("Services initialized")


# Health check endpoint
@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "sheets-cms-backend", "storage": "sheets"}


@app.get("/")
async def root():
    """API overview"""
    return {
        "message": "Sheets CMS Backend",
        "version": "1.0.0",
        "endpoints": {
            "pages": "/api/pages",
            "site": "/api/site",
            "content": "/api/content",
            "health": "/health"
        },
        "documentation": "/docs"
    }

if __name__ == "__main__":
    # Run the server
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info"
    )
