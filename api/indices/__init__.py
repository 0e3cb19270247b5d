"""
Geography tips ("indices"): schema, persistence, seeding and HTTP routes.
"""
