import uvicorn

from employee_records.core.config import settings


def main():
    uvicorn.run(
        "employee_records.main:app",
        host="0.0.0.0",
        port=settings.port,
        reload=settings.environment == "development",
    )


if __name__ == "__main__":
    main()
