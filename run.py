import uvicorn
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from view.api_view import router as api_router
from common.db import MongoDB
from common.exceptions import InvalidRequest
from common.gemini_api import GeminiAPI
from common.logging import logger
from common.config import Config


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    app.state.store = MongoDB().connect()
    app.state.gemini = GeminiAPI()
    yield
    # Shutdown
    app.state.store.close()


app = FastAPI(
    title="Legal Assist Gateway",
    version="1.0.0",
    description="Case status, lawyer search, PDF legal document analysis and chat backed by Gemini",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=Config.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"Invalid request to {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=400, content={"error": InvalidRequest.message})


@app.get("/health")
def health_check(request: Request):
    """Health check endpoint."""
    store = getattr(request.app.state, "store", None)
    return {
        "status": "healthy",
        "service": "Legal Assist Gateway",
        "database": "connected" if store is not None and store.ping() else "unavailable"
    }


def main():
    logger.info(f"Server running on port {Config.PORT}")
    uvicorn.run("run:app", host=Config.HOST, port=Config.PORT, log_level="info")


if __name__ == "__main__":
    main()
