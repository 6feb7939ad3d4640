from sqlalchemy import Column, Integer, String, Float, Date, ForeignKey
from storefront.core.database import Base


class Store(Base):
    __tablename__ = "store"

    store_id = Column("storeid", Integer, primary_key=True)
    name = Column(String(30))
    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)
    manager_id = Column("managerid", Integer, ForeignKey("users.userid"))
    date_established = Column("dateestablished", Date)
