"""Demo – sessions against each clock variant."""
from session_timing.demo.scenarios import SCENARIOS, Scenario, main, run_scenarios

__all__ = ["SCENARIOS", "Scenario", "main", "run_scenarios"]
