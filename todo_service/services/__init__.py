"""Business operations behind the routers."""
