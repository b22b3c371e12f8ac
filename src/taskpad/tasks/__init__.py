"""
Task subsystem.

Components:
- task_models.py: data structures (Task, SortOrder, TaskSequence)
- task_store.py: in-memory owner of the current sequence + observer publish
- task_diff.py: row-level edit script between two sequences
- task_storage.py: JSON persistence in key-value storage
- task_actions.py: action requests (add/edit/delete/mark done/open) and their handler
"""
