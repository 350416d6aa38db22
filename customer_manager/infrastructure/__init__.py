"""
Infrastructure layer: configuration, logging, persistence, caching and events
"""
