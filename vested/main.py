from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from vested.api.routes.vesting import router as vesting_router
from vested.core.config import get_settings
from vested.core.logging import configure_logging

settings = get_settings()
configure_logging(settings.debug_logging)

app = FastAPI(title=settings.app_name, version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(vesting_router)


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
