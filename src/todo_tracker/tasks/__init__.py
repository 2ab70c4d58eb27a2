"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskOutcome) + JSON record codec
- task_store.py: ordered in-memory store with id renumbering
- task_persistence.py: load/save of the whole store as one JSON file
"""
