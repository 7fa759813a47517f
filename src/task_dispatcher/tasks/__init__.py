"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskStatus) and civil-time helpers
- task_store.py: in-memory ordered list mirrored to a JSON snapshot
- dispatcher.py: lifecycle engine (claim / complete / withdraw / reclaim)
- reclaimer.py: background loop that hands stale claims back to the queue
"""
