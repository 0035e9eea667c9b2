"""Domain layer (entities, UI state variants and the error taxonomy).

Domain modules should not depend on UI or on the HTTP transport.
"""
