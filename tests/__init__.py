"""SteadyDay Test Suite

Test organization:
- unit/: Unit tests for individual modules
  - consistency/: Event log and streak calculation
  - focus/: Adaptive duration and pomodoro sessions
  - mood/: Daily check-ins
  - personality/: Enneagram classifier and stored results
  - routines/, plans/, tasks/: Feature managers
  - chat/: Assistant context, LLM call and template fallback
  - insights/: Suggestions and productivity summary
- integration/: HTTP API tests through FastAPI's TestClient

Running tests:
    # All tests
    pytest

    # Specific module
    pytest tests/unit/consistency/

    # Excluding slow tests
    pytest -m "not slow"
"""
