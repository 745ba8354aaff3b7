"""
Task state engine.

Components:
- task_models.py: data structures (Task, Priority, filters, results)
- task_store.py: in-memory ordered store with create/update/delete/toggle
- task_classify.py: due-date status, category set and statistics
- task_query.py: search / completion / category filtering
- task_ordering.py: priority, date and category sorts applied to the store
"""
