from fastapi import APIRouter
from kasir_api.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
def health_check():
    return {"status": "OK", "message": "API Running"}
