from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from core.config import get_settings
from core.logger import logger
from api.v1 import router as v1_router
from api.v1.routes import health
from utils.api_status import is_not_found
from utils.exceptions import KubernetesError, ManifestRenderError, ResourceNotFoundError
import uvicorn

settings = get_settings()

def create_app() -> FastAPI:
  app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Multus admission controller manifests and cluster capabilities"
  )

  # CORS middleware
  app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
  )

  # Exception handlers
  @app.exception_handler(KubernetesError)
  async def kubernetes_error_handler(request: Request, exc: KubernetesError):
    status_code = 404 if is_not_found(exc) else exc.status_code
    logger.warning(f"[ ERROR ] > {request.url.path}: {exc.detail}")
    return JSONResponse(
      status_code=status_code,
      content={"detail": exc.detail}
    )

  @app.exception_handler(ResourceNotFoundError)
  async def not_found_error_handler(request: Request, exc: ResourceNotFoundError):
    return JSONResponse(
      status_code=exc.status_code,
      content={"detail": exc.detail}
    )

  @app.exception_handler(ManifestRenderError)
  async def render_error_handler(request: Request, exc: ManifestRenderError):
    logger.error(f"[ ERROR ] > {exc.detail}")
    return JSONResponse(
      status_code=exc.status_code,
      content={"detail": exc.detail, "path": exc.path}
    )

  # Include routers
  app.include_router(health.router)
  app.include_router(v1_router)

  return app

app = create_app()

if __name__ == "__main__":
  uvicorn.run(
    "main:app",
    host="0.0.0.0",
    port=settings.APP_PORT,
    reload=True
  )
