"""Scheduling core: calendar arithmetic, hierarchy guard, task store and projection.

Modules are imported directly (``gantt_mcp.core.store`` etc.); the models
depend on the calendar, so this package does not re-export anything.
"""
