"""
Task subsystem.

Components:
- task_models.py: task variants (Todo, Deadline, Event), time parsing, line encoding
- task_list.py: ordered in-memory collection with index-checked mutations
- task_store.py: plain-text file storage (load_all / save_all)
"""
