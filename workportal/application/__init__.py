"""
Application layer: request/response DTOs and the use cases that orchestrate the domain.
"""
