from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import StoreServiceBaseModel


class Order(StoreServiceBaseModel):
    __tablename__ = "orders"

    username: Mapped[str] = mapped_column(String(255), nullable=False, index=True)

    def __repr__(self) -> str:
        return f"<Order id={self.id} username={self.username!r}>"


class OrderItem(StoreServiceBaseModel):
    __tablename__ = "order_items"

    # References to orders.id / products.id are not enforced by the store
    order_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    product_id: Mapped[int] = mapped_column(Integer, nullable=False)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)

    def __repr__(self) -> str:
        return (
            f"<OrderItem id={self.id} order_id={self.order_id} "
            f"product_id={self.product_id} quantity={self.quantity}>"
        )
