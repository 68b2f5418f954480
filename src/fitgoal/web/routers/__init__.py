"""Web routers."""
