from fastapi import Request
from scoring.config import ScoringSettings


def get_settings(request: Request) -> ScoringSettings:
    """FastAPI dependency that provides the app's ScoringSettings."""
    return request.app.state.settings
