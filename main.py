import logging
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException
from app.database.connections import lifespan
from app.includes import get_all_routers
from app.services.json import return_error_json, return_json
from app.utilities.errors import AppError, ServerError, format_validation_errors
from tools.routers import gather_routers
from config import LOG_LEVEL, HOST, PORT


logging.basicConfig(
    level=getattr(logging, LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Auto Dealership API",
    description="Car listings and reviews with admin-gated writes",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    swagger_ui_parameters={"defaultModelsExpandDepth": -1},
)
routers = get_all_routers()
app = gather_routers(app, routers)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    return return_error_json(exc.message, exc.details, code=exc.status_code, headers=exc.headers)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return return_error_json("Bad Request", format_validation_errors(exc.errors()))


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == status.HTTP_404_NOT_FOUND and request.url.path.startswith("/api"):
        return return_error_json("API route not found", code=exc.status_code)
    return return_error_json(str(exc.detail), code=exc.status_code, headers=getattr(exc, "headers", None))


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    error = ServerError()
    return return_error_json(error.message, code=error.status_code)


@app.get("/api")
async def index():
    return return_json({"message": "Auto Dealership API is running"})


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=HOST, port=PORT)
