from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
from scalar_fastapi import get_scalar_api_reference
import uvicorn
from flatauth.routes.user_auth import auth_user_router
from flatauth.src.auth_manager import MISSING_FIELDS
from flatauth.config.settings import HOST, PORT, PUBLIC_DIR, CORS_ORIGINS
from flatauth.helper.utils import setup_logging

logger = setup_logging() # initialize logger


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Server listening on http://{HOST}:{PORT}")
    yield


app = FastAPI(lifespan=lifespan)
app.include_router(auth_user_router)
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"message": str(exc.detail)}, headers=exc.headers)

@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    # malformed body counts as missing fields
    logger.warning(f"rejected request body on {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"message": MISSING_FIELDS})


@app.get("/health", include_in_schema=False)
def health_check():
    return {"status": "healthy"}

@app.get("/scalar", include_in_schema=False)
def get_scalar_docs():
    return get_scalar_api_reference(
        openapi_url=app.openapi_url,
        title="Scalar API"
    )

# registered last so the API routes above take precedence
app.mount("/", StaticFiles(directory=PUBLIC_DIR, html=True, check_dir=False), name="public")


if __name__ == "__main__":
    uvicorn.run(app, host=HOST, port=PORT)
