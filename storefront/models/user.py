from sqlalchemy import Column, Integer, String, Float
from storefront.core.database import Base


class User(Base):
    __tablename__ = "users"

    SEQUENCE = "users_userid_seq"

    user_id = Column("userid", Integer, primary_key=True)
    name = Column(String(50), nullable=False)
    password = Column(String(50), nullable=False)
    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)
    role = Column("type", String(8), nullable=False)
