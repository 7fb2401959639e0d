"""
Domain layer: entities, lifecycle rules, authorization and repository ports.
"""
