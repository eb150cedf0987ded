"""DroneComply: role-based access control for drone operations compliance."""

__version__ = "0.1.0"
