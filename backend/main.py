# backend/main.py

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from config import settings
from routers import seed_router, stats_router, transactions_router, visuals_router
from utils.data_store import init_engine
from utils.logger import get_logger

logger = get_logger("main")

# ---------------------------------------------------------
# APP INIT
# ---------------------------------------------------------


@asynccontextmanager
async def lifespan(app: FastAPI):
    # The seed endpoint is the only user of the database
    app.state.engine = init_engine(settings.database_url)
    logger.info("Database ready at %s", settings.database_url)
    yield
    app.state.engine.dispose()


app = FastAPI(title="Transactions API", version="0.1.0", lifespan=lifespan)

logger.info("Allowed CORS origins: %s", settings.allowed_origins)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ---------------------------------------------------------
# ERROR ENVELOPES
# ---------------------------------------------------------


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    # A known path with the wrong method counts as unmatched
    if exc.status_code in (404, 405):
        return JSONResponse(status_code=404, content={"message": "Endpoint not found"})

    if isinstance(exc.detail, dict):
        content = exc.detail
    else:
        content = {"message": str(exc.detail)}
    return JSONResponse(status_code=exc.status_code, content=content)


@app.exception_handler(Exception)
async def server_error_handler(request: Request, exc: Exception):
    logger.error("Server Error: %s", exc)
    return JSONResponse(
        status_code=500,
        content={"message": "Internal Server Error", "error": str(exc)},
    )

# ---------------------------------------------------------
# ROUTERS
# ---------------------------------------------------------

app.include_router(transactions_router, prefix=settings.api_prefix)
app.include_router(stats_router, prefix=settings.api_prefix)
app.include_router(visuals_router, prefix=settings.api_prefix)
app.include_router(seed_router, prefix=settings.api_prefix)


@app.get("/")
def root():
    return {"message": "Server is running successfully!"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=settings.port)
