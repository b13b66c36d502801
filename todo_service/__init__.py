"""Todo Service - task management backend with weather annotations."""

__version__ = "1.0.0"
