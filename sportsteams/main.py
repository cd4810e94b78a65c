from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
import logging
from fastapi.middleware.cors import CORSMiddleware
from sportsteams.core.config import settings
from sportsteams.core.database import init_db, SessionLocal
from sportsteams.core.errors import StoreError, http_status_for
from sportsteams.core.seed import seed_database
from sportsteams.api import api_router

# Setup logging
logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(title="Sports Teams Management")


# Allow CORS for all origins (you can restrict it later)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(StoreError)
async def store_error_handler(request: Request, exc: StoreError):
    status_code = http_status_for(exc)
    logger.error(f"❌ {request.method} {request.url.path} rejected ({status_code}): {exc.message}")
    return JSONResponse(status_code=status_code, content=exc.to_dict())


# Ensure database tables are created
@app.on_event("startup")
async def startup():
    try:
        init_db()  # create_all plus the player_summary view
        logger.info("✅ Database connected and tables created.")
    except Exception as e:
        logger.error(f"❌ Database connection error: {e}")
        raise

    if settings.SEED_ON_STARTUP:
        db = SessionLocal()
        try:
            seed_database(db)
        finally:
            db.close()


@app.get("/")
async def home():
    return {"message": "Welcome to Sports Teams Management"}

# Include all API routes
app.include_router(api_router)
