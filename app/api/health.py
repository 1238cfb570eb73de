from fastapi import APIRouter
from app.db.session import db
from app.schemas.database import DatabaseInfo

router = APIRouter()

@router.get("/health")
async def health():
    return {"status": "ok"}

@router.get("/health/database", response_model=DatabaseInfo)
async def database_health():
    """
    Resolved connection options for this process.
    Credentials are never included.
    """
    return db.describe()
