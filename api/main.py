import logging
from contextlib import asynccontextmanager

from fastapi import APIRouter, Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from auth import dependencies as auth_dependencies
from categories import router as categories_router
from core import db
from core.config import get_settings
from core.errors import install_exception_handlers
from nominations import router as nominations_router
from nominees import router as nominees_router
from results import router as results_router
from voters import router as voters_router
from votes import router as votes_router

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    # Initialize the DB pool once per process.
    await db.init_pool(get_settings())
    try:
        yield
    finally:
        await db.close_pool()


app = FastAPI(title="Awards Voting API", lifespan=lifespan)

# Allow the voting/admin frontend to call this API from the browser.
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

install_exception_handlers(app)

public_router = APIRouter(prefix="/api/public")
public_router.include_router(categories_router.public_router)
public_router.include_router(voters_router.public_router)
public_router.include_router(votes_router.router)

admin_router = APIRouter(
    prefix="/api/admin",
    dependencies=[Depends(auth_dependencies.require_admin_key)],
)
admin_router.include_router(categories_router.admin_router)
admin_router.include_router(nominees_router.router)
admin_router.include_router(nominations_router.router)
admin_router.include_router(voters_router.admin_router)
admin_router.include_router(results_router.router)

app.include_router(public_router, tags=["public"])
app.include_router(admin_router, tags=["admin"])


@app.get("/health")
async def health():
    try:
        await db.ping()
    except Exception as exc:
        logger.warning("health_check_failed error=%s", exc)
        return JSONResponse(status_code=503, content={"status": "degraded", "database": str(exc)})
    return {"status": "ok", "database": "ok"}


@app.get("/")
def root() -> dict:
    return {"message": "Award Nomination Backend is Running!"}
