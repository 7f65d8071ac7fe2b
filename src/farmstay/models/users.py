from enum import Enum


class UserRole(Enum):
    ADMIN = "ADMIN"
    GUEST = "GUEST"
