from jobly.db.models.role import Role
from jobly.db.models.user import User
from jobly.db.models.company import Company

__all__ = ["Role", "User", "Company"]
