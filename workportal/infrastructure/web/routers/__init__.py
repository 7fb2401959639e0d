from . import auth, profiles, projects, deliverables, messages, invoices, notifications, dashboard

__all__ = ["auth", "profiles", "projects", "deliverables", "messages", "invoices", "notifications", "dashboard"]
