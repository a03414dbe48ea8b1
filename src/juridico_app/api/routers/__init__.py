from fastapi import APIRouter

from juridico_app.api.routers.activity_router import activity_router
from juridico_app.api.routers.auth_router import auth_router
from juridico_app.api.routers.cases_router import cases_router
from juridico_app.api.routers.dashboard_router import dashboard_router
from juridico_app.api.routers.employees_router import employees_router
from juridico_app.api.routers.users_router import users_router

api_router = APIRouter()
api_router.include_router(auth_router)
api_router.include_router(cases_router, prefix="/cases", tags=["cases"])
api_router.include_router(employees_router, prefix="/employees", tags=["employees"])
api_router.include_router(users_router, prefix="/users", tags=["users"])
api_router.include_router(activity_router, prefix="/activity-logs", tags=["activity"])
api_router.include_router(dashboard_router, prefix="/dashboard", tags=["dashboard"])
