"""
High-level use cases for the portfolio API.

Each service module orchestrates the collection store and the upload
directory to implement the rules of one collection (projects, carousel
images, videos).

Routers (FastAPI endpoints) call these services instead of touching the
JSON files or the upload directory directly.
"""
