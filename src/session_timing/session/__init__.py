"""Session – single-use timing session over an injected clock."""
from session_timing.session.session import Session, SessionState

__all__ = ["Session", "SessionState"]
