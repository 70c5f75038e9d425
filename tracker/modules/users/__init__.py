"""
User Management Module

User management with clear separation of concerns:
- domain: Domain models, age arithmetic and exceptions
- repositories: Data access
- services: Business logic
- api: REST API endpoints, DTOs and mapping
"""
