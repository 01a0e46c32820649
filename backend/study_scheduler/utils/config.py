from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    port: int = 8000
    host: str = "0.0.0.0"
    environment: str = "development"
    frontend_url: str = "http://localhost:3000"
    log_level: str = "INFO"
    log_format: str = "text"  # "text" or "json"
    default_timezone: str = "America/Indiana/Indianapolis"

    # Scheduling defaults
    default_work_start_hour: int = 9
    default_work_end_hour: int = 22
    default_preferred_location: str = "Hesburgh Library"
    default_max_sessions_per_day: int = 4
    default_deadline_days: int = 3
    deadline_marker_minutes: int = 30

    # Slot search
    slot_step_minutes: int = 15
    min_session_minutes: int = 15
    search_horizon_months: int = 6

    # Scoring weights
    earliness_base_score: float = 10000.0
    location_bonus_score: float = 50000.0
    location_gap_minutes: int = 45

    debug_history_size: int = 100
    
    class Config:
        env_file = ".env"
        case_sensitive = False

settings = Settings()
