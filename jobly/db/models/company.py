from sqlalchemy import Column, Integer, String, Text

from jobly.db.base import Base


class Company(Base):
    __tablename__ = "companies"

    handle = Column(String(25), primary_key=True)
    name = Column(String, unique=True, nullable=False, index=True)
    num_employees = Column(Integer, nullable=True)
    description = Column(Text, nullable=True)
    logo_url = Column(Text, nullable=True)
