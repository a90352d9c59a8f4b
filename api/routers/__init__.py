"""
FastAPI routers grouped by collection (projects, carousel images, videos).

Each file inside this package exposes an APIRouter that is included in the
main application (app.py). Services are looked up on ``request.app.state``.
"""
