"""
HTTP routers, one per resource.
"""

from . import auth, projects, tasks, teams

__all__ = ["auth", "projects", "tasks", "teams"]
