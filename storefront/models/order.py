from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from storefront.core.database import Base


class Order(Base):
    __tablename__ = "orders"

    SEQUENCE = "orders_ordernumber_seq"

    order_number = Column("ordernumber", Integer, primary_key=True)
    customer_id = Column(
        "customerid", Integer, ForeignKey("users.userid"), nullable=False
    )
    store_id = Column("storeid", Integer, ForeignKey("store.storeid"), nullable=False)
    product_name = Column("productname", String(30), nullable=False)
    units_ordered = Column("unitsordered", Integer, nullable=False)
    order_time = Column("ordertime", DateTime)
