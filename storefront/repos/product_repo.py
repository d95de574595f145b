# storefront/repos/product_repo.py
from typing import List

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from storefront.data.models.product import ProductModel


class ProductRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_product(self, product_id: str) -> ProductModel | None:
        return self.db.get(ProductModel, product_id)

    def list_products(self, category: str | None = None, brand: str | None = None) -> List[ProductModel]:
        stmt = select(ProductModel)
        if category:
            stmt = stmt.where(ProductModel.category == category)
        if brand:
            stmt = stmt.where(ProductModel.brand == brand)
        stmt = stmt.order_by(ProductModel.created_at.desc())
        return list(self.db.execute(stmt).scalars().all())

    def create_product(self, product: ProductModel) -> ProductModel:
        self.db.add(product)
        self.db.flush()
        return product

    def delete_product(self, product: ProductModel) -> None:
        self.db.delete(product)
        self.db.flush()

    def distinct_values(self, column) -> List[str]:
        return list(self.db.execute(select(column).distinct()).scalars().all())

    def distinct_brands(self) -> List[str]:
        return self.distinct_values(ProductModel.brand)

    def distinct_categories(self) -> List[str]:
        return self.distinct_values(ProductModel.category)

    def reassign(self, column, old: str, new: str) -> int:
        res = self.db.execute(
            update(ProductModel)
            .where(column == old)
            .values({column.key: new})
            .execution_options(synchronize_session=False)
        )
        return res.rowcount

    def decrement_stock(self, product_id: str, quantity: int) -> int:
        """
        Warunkowy update (compare-and-swap na stanie magazynu):
        UPDATE products SET stock = stock - q WHERE id = :id AND stock >= q
        Zwraca rowcount - 0 oznacza ze ktos inny zdazyl wykupic towar.
        """
        res = self.db.execute(
            update(ProductModel)
            .where(
                ProductModel.id == product_id,
                ProductModel.stock >= quantity,
            )
            .values(stock=ProductModel.stock - quantity)
            .execution_options(synchronize_session=False)
        )
        return res.rowcount
