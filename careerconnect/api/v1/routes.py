# careerconnect/api/v1/routes.py
from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from careerconnect.api.v1.applied_jobs import router as applied_jobs_router
from careerconnect.api.v1.jobs import router as jobs_router
from careerconnect.api.v1.resumes import router as resumes_router
from careerconnect.api.v1.users import router as users_router

root_router = APIRouter()


@root_router.get("/", response_class=PlainTextResponse)
async def root():
    return "Career Connect Server is Running..."


api_router = APIRouter()
api_router.include_router(users_router)
api_router.include_router(applied_jobs_router)
api_router.include_router(resumes_router)
api_router.include_router(jobs_router)
