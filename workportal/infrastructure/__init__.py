"""
Infrastructure layer: persistence, auth provider, events wiring and the web surface.
"""
