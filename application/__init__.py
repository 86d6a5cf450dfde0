"""
Application Layer for the workout catalog admin.

This package contains:
- ports/: Abstract store interfaces (what the components need)
- use_cases/: The admin components (editor, list controller, session)
- errors: Error taxonomy surfaced to the admin as notifications
- notifications: Shared transient notification queue
"""
