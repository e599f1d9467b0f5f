from fastapi import APIRouter

router = APIRouter()

@router.get("/")
def root():
    return {
        "name": "Blind Audit Backend",
        "status": "ok",
        "docs": "/docs",
        "health": "/health",
    }
