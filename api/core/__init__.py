"""
Process-wide wiring shared by the API: the PostgreSQL pool and its settings.
"""
