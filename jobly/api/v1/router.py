from fastapi import APIRouter

from jobly.api.routers import auth, companies

api_router = APIRouter()

api_router.include_router(auth.router)
api_router.include_router(companies.router)
