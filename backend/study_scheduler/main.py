"""
Study Session Scheduler - Main FastAPI Application
Exposes the session scheduler to the calendar UI and the chat assistant.
"""

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from datetime import timedelta

from . import __version__
from .schemas import ScheduleRequest, RescheduleRequest, ScheduleResponse
from .tools.scheduler import schedule_task, reschedule_task, blocking_intervals
from .tools.timezone import TimezoneManager
from .tools.validation import SchedulingValidationError
from .utils.config import settings
from .utils.logger import logger
from .utils.debug_events import debug_emitter, emit_error

# Initialize FastAPI app
app = FastAPI(
    title="Study Session Scheduler",
    description="Places study sessions into free calendar time before a deadline",
    version=__version__
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        settings.frontend_url,
        "http://localhost:3000",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.get("/")
async def root():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "service": "Study Session Scheduler",
        "version": __version__
    }

@app.get("/health")
async def health_check():
    """Detailed health check."""
    return {
        "status": "healthy",
        "components": {
            "api": "operational",
            "scheduler": "ready"
        },
        "timezone": settings.default_timezone
    }

# Scheduling Endpoints
# Plain def handlers: the scheduler is CPU-bound and runs in the threadpool

@app.post("/schedule", response_model=ScheduleResponse)
def create_schedule(request: ScheduleRequest):
    """
    Split a task into sessions and place them before the deadline.
    Deadline markers among the existing events never block a session.
    """
    deadline = request.deadline
    if deadline is None:
        tz = TimezoneManager.get_zone(request.timezone)
        deadline = TimezoneManager.now(tz) + timedelta(days=settings.default_deadline_days)
        logger.info(f"No deadline given, using {deadline.isoformat()}")
    
    try:
        result = schedule_task(
            title=request.title,
            total_minutes=request.total_duration_minutes,
            deadline=deadline,
            sessions_count=request.sessions_count,
            location=request.location,
            busy_intervals=blocking_intervals(request.existing_events),
            preferences=request.preferences,
            max_sessions_per_day=request.max_sessions_per_day,
            min_start=request.min_start_date,
            timezone=request.timezone,
        )
    except SchedulingValidationError as e:
        emit_error("schedule", e, {"error_type": e.error_type})
        raise HTTPException(status_code=422, detail={"error_type": e.error_type, "message": e.message})
    except Exception as e:
        logger.error(f"Error scheduling '{request.title}': {e}")
        emit_error("schedule", e)
        raise HTTPException(status_code=500, detail=str(e))
    
    return ScheduleResponse.from_result(result)

@app.post("/reschedule", response_model=ScheduleResponse)
def reschedule(request: RescheduleRequest):
    """
    Re-plan an existing task. Its old sessions are released before searching,
    so the response replaces the old task and all of its events.
    """
    try:
        result = reschedule_task(
            task=request.task,
            busy_intervals=blocking_intervals(request.existing_events),
            preferences=request.preferences,
            deadline=request.deadline,
            min_start=request.min_start_date,
            location=request.location,
            timezone=request.timezone,
        )
    except SchedulingValidationError as e:
        emit_error("reschedule", e, {"error_type": e.error_type})
        raise HTTPException(status_code=422, detail={"error_type": e.error_type, "message": e.message})
    except Exception as e:
        logger.error(f"Error rescheduling task {request.task.id}: {e}")
        emit_error("reschedule", e)
        raise HTTPException(status_code=500, detail=str(e))
    
    return ScheduleResponse.from_result(result)

# Debug

@app.get("/debug/events")
async def debug_events(limit: int = Query(50, ge=1, le=settings.debug_history_size)):
    """Recent scheduling debug events, newest last."""
    history = debug_emitter.get_history()
    return {
        "count": len(history[-limit:]),
        "events": history[-limit:]
    }

# Application Startup

@app.on_event("startup")
async def startup_event():
    """Log configuration on startup."""
    logger.info("Starting Study Session Scheduler")
    logger.info(f"Frontend URL: {settings.frontend_url}")
    logger.info(f"Environment: {settings.environment}")
    logger.info(f"Default timezone: {settings.default_timezone}")

@app.on_event("shutdown")
async def shutdown_event():
    logger.info("Shutting down Study Session Scheduler")

if __name__ == "__main__":
    import uvicorn
    
    uvicorn.run(
        "study_scheduler.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.environment == "development",
        log_level="info"
    )
