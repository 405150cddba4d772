# vendor_api/models/user.py
from sqlalchemy import Column, Integer, String
from vendor_api.db.base_class import Base


class User(Base):
    """Marketplace user. Rows are created by the account service."""

    __tablename__ = "tbl_users"

    id = Column("user_id", Integer, primary_key=True, autoincrement=True)
    first_name = Column("user_firstName", String(100), nullable=True)
    last_name = Column("user_lastName", String(100), nullable=True)
    email = Column("user_email", String(255), nullable=True)
    role = Column("user_role", String(50), nullable=True)
    # Null means "use the configured default avatar".
    profile_picture = Column("user_pfp", String(512), nullable=True)
