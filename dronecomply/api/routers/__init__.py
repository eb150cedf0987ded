"""API routers for DroneComply."""
