from sqlalchemy import Column, Integer, Float
from storefront.core.database import Base


class Warehouse(Base):
    __tablename__ = "warehouse"

    warehouse_id = Column("warehouseid", Integer, primary_key=True)
    area = Column(Float)
    latitude = Column(Float)
    longitude = Column(Float)
