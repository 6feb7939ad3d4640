from sqlalchemy import Column, Integer, String, Float, ForeignKey
from storefront.core.database import Base


class Product(Base):
    __tablename__ = "product"

    store_id = Column(
        "storeid", Integer, ForeignKey("store.storeid"), primary_key=True
    )
    product_name = Column("productname", String(30), primary_key=True)
    number_of_units = Column("numberofunits", Integer, nullable=False)
    price_per_unit = Column("priceperunit", Float, nullable=False)
