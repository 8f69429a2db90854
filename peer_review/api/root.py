from fastapi import APIRouter

router = APIRouter()

@router.get("/")
def root():
    return {
        "name": "Peer Review Portal",
        "status": "ok",
        "docs": "/docs",
        "health": "/health",
    }
