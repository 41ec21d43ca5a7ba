from .user import User
from .hospital import Hospital

__all__ = ["User", "Hospital"]
