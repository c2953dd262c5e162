"""
Event Desk: an in-memory event booking system with role-gated catalog management.
"""
