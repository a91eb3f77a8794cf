"""
Application Layer for the workout log.

This package contains:
- ports/: Abstract interfaces (data store, session marker, import source)
- services/: Session manager, access guard and snapshot interchange
- use_cases/: Export and import workflows
- exceptions: Error taxonomy shared with the infrastructure layer
"""
