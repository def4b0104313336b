from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from core.logging import setup_logging
from core.logger import log
from core.config import settings
from core.errors import AppError
from core.versioning import route_table
from db.migrate import run_migrations
from schemas.responses import ApiResponse, FieldError

# Import all models to register them with SQLAlchemy BEFORE any queries
from models.invoice import Invoice, Product

from controllers.health import router as health_router
from controllers.invoices import router as invoices_router
from controllers.products import router as products_router


GENERIC_ERROR_MESSAGE = "An unexpected error occurred."

setup_logging()

app = FastAPI(title="Invoice Backend", version="1.0.0")

# --- CORS middleware ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- Routers ---
app.include_router(health_router)
app.include_router(invoices_router)
app.include_router(products_router)

# --- Versioned handlers are fixed from here on ---
route_table.freeze()


def _error_response(status_code: int, message: str, errors: list[FieldError] | None = None) -> JSONResponse:
    body = ApiResponse(data=None, error=message, errors=errors or [])
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    return _error_response(exc.status_code, exc.message, exc.errors)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = [
        FieldError(
            field=".".join(str(part) for part in err.get("loc", ()) if part != "body"),
            message=err.get("msg", "invalid value"),
        )
        for err in exc.errors()
    ]
    return _error_response(400, "Request is malformed", errors)


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    # Never leak internals to the client; the traceback goes to the log
    log.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _error_response(500, GENERIC_ERROR_MESSAGE)


@app.on_event("startup")
def on_startup():
    # Schema + seed must be in place before the API serves requests
    if settings.RUN_MIGRATIONS_ON_STARTUP:
        run_migrations(settings.DATABASE_URL)
    log.info("Versioned routes: %s", ", ".join(f"{m} {p} v{v}" for m, p, v in route_table.routes()))
