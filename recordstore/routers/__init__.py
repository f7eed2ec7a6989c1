"""
FastAPI routers grouped by concern.

Each module exposes an APIRouter that app.create_app includes; handlers reach
their service through request.app.state, never through module globals.
"""
