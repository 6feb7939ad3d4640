from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from storefront.core.database import Base


class ProductUpdate(Base):
    __tablename__ = "productupdates"

    SEQUENCE = "productupdates_updatenumber_seq"

    update_number = Column("updatenumber", Integer, primary_key=True)
    manager_id = Column("managerid", Integer, ForeignKey("users.userid"), nullable=False)
    store_id = Column("storeid", Integer, ForeignKey("store.storeid"), nullable=False)
    product_name = Column("productname", String(30), nullable=False)
    updated_on = Column("updatedon", DateTime)
