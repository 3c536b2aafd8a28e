from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from api.routers import webhook_ppm
from config import get_settings
from core.middleware import RequestIdMiddleware
import logging

logging.basicConfig(
    level=get_settings().log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

log = logging.getLogger("uvicorn.error")

app = FastAPI(title="PPM to Nookal Sync")
app.add_middleware(RequestIdMiddleware)

app.include_router(webhook_ppm.router)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        log.warning(f"Rejected {request.method} {request.url.path}")
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": "Method not allowed"},
            headers=exc.headers,
        )
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail}, headers=exc.headers)


@app.get('/')
async def root():
    return {"status": "running", "message": "Welcome to the PPM to Nookal sync API"}
