"""HTTP API: versioned routers and probes."""
