from fastapi import APIRouter
from app.api.v1.endpoints import matching, rfqs, suppliers, trust

api_router = APIRouter()
api_router.include_router(matching.router, prefix="/matching", tags=["matching"])
api_router.include_router(suppliers.router, prefix="/suppliers", tags=["suppliers"])
api_router.include_router(trust.router, prefix="/trust", tags=["trust"])
api_router.include_router(rfqs.router, prefix="/rfqs", tags=["rfqs"])
