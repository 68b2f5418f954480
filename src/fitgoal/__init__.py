"""fitgoal: AI workout plans from a current-body and a goal-body photo."""

__version__ = "0.1.0"
