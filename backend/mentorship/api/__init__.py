"""HTTP layer — FastAPI routers and global error handlers."""
