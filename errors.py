"""
Exceptions raised by the maintenance services
"""


class MaintenanceError(Exception):
    """Base class for maintenance failures the scripts report and exit on"""


class AdminNotFoundError(MaintenanceError):
    def __init__(self, email: str):
        super().__init__(f"Admin user not found: {email}")
        self.email = email


class AdminConflictError(MaintenanceError):
    """Raised when a second admin account would be created"""

    def __init__(self, existing_email: str):
        super().__init__(f"Only one admin user can exist (current admin: {existing_email})")
        self.existing_email = existing_email
