"""Domain layer: entities, value objects, ports and validation rules.

Nothing here imports from infrastructure, application or presentation.
"""
