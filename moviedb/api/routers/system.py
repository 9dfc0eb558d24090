"""
System API endpoints (health).
"""

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from moviedb.api.dependencies import get_db
from moviedb.database import crud

router = APIRouter(prefix="/api/v1", tags=["system"])


@router.get("/health")
def health_check(db: Session = Depends(get_db)):
    """Health check: database reachable and movie count."""
    try:
        movie_count = crud.get_movie_count(db)
    except SQLAlchemyError as e:
        db.rollback()
        return {"status": "unhealthy", "database": str(e)}
    return {
        "status": "healthy",
        "database": "connected",
        "movies": movie_count,
    }
