"""
Category — Именованная группа товаров

Хранит упорядоченный список товаров в порядке добавления.
Дедупликация не выполняется: повторное добавление товара даёт повторную запись.
"""

from pydantic import BaseModel, Field

from .product import Product


class Category(BaseModel):
    """
    Категория каталога.

    В отличие от Product, категория изменяема: товары добавляются через add_product.
    Категорией владеет Catalog, товарами категория не владеет.
    """

    category_id: int = Field(..., ge=1, description="Стабильный идентификатор категории")
    name: str = Field(..., min_length=1, description="Название категории (например, 'Electronics')")
    products: list[Product] = Field(default_factory=list, description="Товары в порядке добавления")

    def add_product(self, product: Product) -> None:
        """Добавление товара в конец списка (без проверки дубликатов)."""
        self.products.append(product)

    def get_name(self) -> str:
        return self.name

    def get_products(self) -> list[Product]:
        """
        Товары категории в порядке добавления.

        Returns:
            Копия списка: изменение результата не меняет категорию
        """
        return list(self.products)

    def __len__(self) -> int:
        return len(self.products)

    def __bool__(self) -> bool:
        return True

    def __contains__(self, product: object) -> bool:
        return product in self.products
