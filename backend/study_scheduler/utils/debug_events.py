from typing import Dict, Any, List, Optional
from datetime import datetime, timezone

from .config import settings


class DebugEventEmitter:
    def __init__(self, max_history: Optional[int] = None):
        self.event_history: List[Dict[str, Any]] = []
        self.max_history = max_history or settings.debug_history_size
    
    def emit(self, event_type: str, data: Dict[str, Any]) -> Dict[str, Any]:
        event = {
            "type": event_type,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "data": data
        }
        
        self.event_history.append(event)
        if len(self.event_history) > self.max_history:
            self.event_history.pop(0)
        
        return event
    
    def get_history(self) -> List[Dict[str, Any]]:
        return self.event_history.copy()
    
    def clear(self):
        self.event_history.clear()


debug_emitter = DebugEventEmitter()


def emit_schedule_request(request_details: dict):
    debug_emitter.emit("schedule_request", request_details)


def emit_candidate_search(search_details: dict):
    debug_emitter.emit("candidate_search", search_details)


def emit_selection(task_id: str, sessions: list, requested: int):
    debug_emitter.emit("selection", {
        "task_id": task_id,
        "requested": requested,
        "scheduled": len(sessions),
        "partial": len(sessions) < requested,
        "sessions": sessions
    })


def emit_error(source: str, error: Exception, details: Optional[Dict[str, Any]] = None):
    debug_emitter.emit("error", {
        "source": source,
        "error_type": type(error).__name__,
        "error_message": str(error),
        "details": details or {}
    })
