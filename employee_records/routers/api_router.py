from fastapi import APIRouter
from employee_records.routers import auth, documents, employees, events, leave

# Centralized API router hub; main.py only imports this single hub.
api_router = APIRouter()

api_router.include_router(employees.router, tags=["Employees"])
api_router.include_router(auth.router, tags=["Authentication"])
api_router.include_router(leave.router, tags=["Leave"])
api_router.include_router(events.router, tags=["Events"])
api_router.include_router(documents.router, tags=["Documents"])
