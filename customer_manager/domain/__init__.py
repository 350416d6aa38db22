"""
Domain layer: entities, value objects and repository contracts
"""
