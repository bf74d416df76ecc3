"""
Higher-level methods to install packages and manage services.

Each public function in this module should:

- perform a complete task, as needed by a script or user action
- avoid non-idempotent calls unless required by a prior state change
- report what happened with a `Result`, rather than printing
"""
