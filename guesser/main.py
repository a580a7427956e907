from fastapi import FastAPI

from guesser.core.config import settings
from guesser.core.logging import get_security_logger
from guesser.routers.guard import router as guard_router

sec_logger = get_security_logger()

app = FastAPI(title="Guesser API")


@app.on_event("startup")
def on_startup():
    sec_logger.info(f"{settings.APP_NAME} started, guard ready")


app.include_router(guard_router)


@app.get("/")
def root():
    return {"status": "ok", "message": "Guesser API is running"}
