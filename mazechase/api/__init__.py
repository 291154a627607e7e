"""HTTP host: FastAPI application, engine manager, routes and schemas."""
