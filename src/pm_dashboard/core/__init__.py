"""
Core plumbing shared by the entity subsystems.

Components:
- errors.py: ValidationError and the package base error
- fields.py: input coercion helpers (required text, ISO dates)
- ids.py: identifier factories
- ports.py: Protocols the controllers depend on
- controllers.py: per-entity collection owners (replace-on-write)
- state.py: AppState, the composition of all controllers
"""
