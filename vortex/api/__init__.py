"""HTTP API for Vortex."""
