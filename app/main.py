import logging
from fastapi import FastAPI
from app.core.config import settings

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

from app.api import health
from app.db.session import db

app = FastAPI(title=settings.PROJECT_NAME)

# Include routers
app.include_router(health.router)

@app.on_event("startup")
async def startup_event():
    info = db.describe()
    logger.info(
        f"{settings.PROJECT_NAME} starting. database={info.host}:{info.port}/{info.database} "
        f"synchronize={info.synchronize} ssl={info.ssl_enabled}"
    )

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
