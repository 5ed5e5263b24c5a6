import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from src.app.config.settings import settings
from src.app.middlewares.request_logging_middleware import RequestLoggingMiddleware
from src.app.routes import stage_route
from src.app.routes import workflow_route
from src.app.utils.error_handler import error_response

app = FastAPI(title="Feature Workflow API")

# Add CORS middleware to handle browser preflight requests
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)

# Add other middlewares
app.add_middleware(RequestLoggingMiddleware)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    details = [
        {"loc": list(error["loc"]), "msg": error["msg"]} for error in exc.errors()
    ]
    return error_response(
        "Invalid request body",
        details,
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
    )


# Include routers
app.include_router(stage_route.router, prefix="/api/v1", tags=["Workflow Stages"])
app.include_router(workflow_route.router, prefix="/api/v1", tags=["Workflow Chaining"])


@app.get("/")
async def root():
    return {"message": "Welcome to the Feature Workflow API!"}


@app.get("/health")
async def health_check():
    return {"status": "healthy"}


if __name__ == "__main__":
    uvicorn.run("src.main:app", host="0.0.0.0", port=8000, reload=True)
