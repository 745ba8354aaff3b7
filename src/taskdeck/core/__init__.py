"""
Core wiring shared by the presentation layer.

- ports.py: Protocols (TaskRepo) and the Clock alias
- state.py: AppState (settings, clock, store, caller-held view query)
"""
