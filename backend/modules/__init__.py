"""
Feature modules for the admin console backend.

Each module is self-contained with its own:
- interfaces.py: Protocol definitions for the module's public API
- models.py: Pydantic models for data transfer
- service.py: Business logic implementation
- repository.py: Supabase table access, where the module owns a table
- exceptions.py: Module-specific exceptions

Modules communicate through interfaces, not concrete implementations.
The console module composes the others; routes live in the api package.
"""
