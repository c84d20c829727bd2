# main.py
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from config import CORS_ORIGINS, LOG_LEVEL, PORT
from database import check_connection
from errors import InvalidStateError, NotFoundError
from routers import all_routers

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

# App instance
app = FastAPI(title="Rental Portfolio API")

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def setup_exception_handlers(app: FastAPI):

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError):
        return JSONResponse(status_code=404, content={"detail": exc.message})

    @app.exception_handler(InvalidStateError)
    async def invalid_state_handler(request: Request, exc: InvalidStateError):
        logger.info("Refused %s %s: %s", request.method, request.url.path, exc.message)
        return JSONResponse(status_code=409, content={"detail": exc.message})


setup_exception_handlers(app)

for router in all_routers:
    app.include_router(router)


@app.get("/health")
def health():
    database_ok = check_connection()
    return {"status": "ok" if database_ok else "degraded", "database": database_ok}


if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=PORT, reload=True)
