"""
session_timing – clock-injected timing sessions.

Import path convention::

    from session_timing.session import Session
    from session_timing.kernel.time import Clock, RealClock
    from session_timing.testing import MockClock, TenMinuteClock
    from session_timing.report import display_time
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
