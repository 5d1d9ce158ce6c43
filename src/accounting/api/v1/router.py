from fastapi import APIRouter

from src.accounting.api.v1 import auth, investments, products

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(auth.router)
api_router.include_router(investments.router)
api_router.include_router(products.router)
