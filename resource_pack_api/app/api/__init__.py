"""HTTP routers of the Resource Pack API."""
