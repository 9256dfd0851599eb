"""
users_api — HTTP service for CRUD over users.

Layers, leaf first: repositories/ (SQL), services/ (business rules),
routers/ (HTTP), with middleware.py wrapping every request.
"""
