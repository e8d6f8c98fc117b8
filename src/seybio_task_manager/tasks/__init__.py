"""
Task subsystem.

Components:
- task_models.py: the Task data structure
- task_collection.py: list-backed TaskCollection
- task_codec.py: JSON encode/decode for tasks and collections
"""
