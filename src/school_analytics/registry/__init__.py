"""User permissions and student registry."""

from .users import User, Role, Permission
from .students import Student, StudentRegistry

__all__ = ["User", "Role", "Permission", "Student", "StudentRegistry"]
