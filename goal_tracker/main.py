# goal_tracker/main.py
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from goal_tracker.config import settings
from goal_tracker.routers import auth, goal, logs, stats, reminders, admin
from goal_tracker.routers.admin import create_tables
from goal_tracker.services.notifier import ReminderNotifier

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Create DB Tables (Alembic migrations ship alongside for managed deployments)
    await create_tables()

    # One notifier for the whole process
    app.state.notifier = ReminderNotifier(
        api_key=settings.RESEND_API_KEY,
        sender=settings.REMINDER_FROM,
        timeout=settings.RESEND_TIMEOUT,
    )
    if not app.state.notifier.configured:
        logger.warning("RESEND_API_KEY not set; reminder e-mails will fail")
    try:
        yield
    finally:
        app.state.notifier.close()


app = FastAPI(title="Goal Tracker", version="1.0", lifespan=lifespan)

# Include Routers
app.include_router(auth.router)
app.include_router(goal.router)
app.include_router(logs.router)
app.include_router(stats.router)
app.include_router(reminders.router)
app.include_router(reminders.cron_router)
app.include_router(admin.router)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


@app.get("/")
def read_root():
    return {"message": "Welcome to Goal Tracker"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("goal_tracker.main:app", host="0.0.0.0", port=8000, reload=True)
