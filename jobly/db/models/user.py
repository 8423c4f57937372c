from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship

from jobly.db.base import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(64), unique=True, nullable=False, index=True)
    password_hash = Column(String, nullable=False)
    role_id = Column(Integer, ForeignKey("roles.id"), nullable=False)

    # Relationship
    role = relationship("Role", backref="users")
