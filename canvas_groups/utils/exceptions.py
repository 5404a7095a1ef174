"""Custom exceptions for the group creation tool"""
from typing import List, Optional


class CanvasGroupsException(Exception):
    """Base exception for group creation errors"""
    pass


class ConfigurationError(CanvasGroupsException):
    """Raised when required settings are missing or left at their placeholders"""
    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__("Configuration errors: " + "; ".join(self.errors))


class RosterNotFoundError(CanvasGroupsException):
    """Raised when the roster file does not exist"""
    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Cannot find {path}")


class WorkflowAborted(CanvasGroupsException):
    """Raised when a precondition of the whole run fails"""
    pass


class ConnectionFailedError(WorkflowAborted):
    """Raised when the Canvas connectivity probe fails"""
    pass


class EmptyRosterError(WorkflowAborted):
    """Raised when no projects are found in the roster"""
    pass


class NoStudentsError(WorkflowAborted):
    """Raised when the course has no enrolled students"""
    pass


class CategoryUnavailableError(WorkflowAborted):
    """Raised when the group category can be neither found nor created"""
    pass


class APIException(CanvasGroupsException):
    """Raised when external API call fails"""
    def __init__(self, service: str, message: str, status_code: Optional[int] = None):
        self.service = service
        self.status_code = status_code
        super().__init__(f"{service} API error: {message}")
