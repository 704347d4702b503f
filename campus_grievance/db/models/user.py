from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.sql import func

from campus_grievance.db.session import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    # Identity issued by the upstream authenticator; grievances reference this value
    user_id = Column(String, unique=True, nullable=False, index=True)
    # student | faculty | authority | admin
    role = Column(String(20), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
