"""Domain layer: models, configuration and pure policies"""
