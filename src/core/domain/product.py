"""
Product — Модель товара каталога

Immutable Pydantic модель: имя, цена за единицу и handle категории-владельца.
Ссылка на категорию хранится как category_id и разрешается через Catalog,
поэтому между Product и Category нет циклических ссылок.
"""

from pydantic import BaseModel, Field

from src.core.math.pricing import line_total


# =============================================================================
# PRODUCT MODEL
# =============================================================================


class Product(BaseModel):
    """
    Модель товара.

    Immutable модель (frozen=True): после создания товар не меняется.
    Хешируется по значению, поэтому может быть ключом словаря.
    """

    # Идентификация
    product_id: int = Field(..., ge=1, description="Стабильный идентификатор товара")
    name: str = Field(..., min_length=1, description="Название товара (например, 'Laptop')")

    # Цена
    price: float = Field(..., ge=0, allow_inf_nan=False, description="Цена за единицу")

    # Категория-владелец (non-owning handle)
    category_id: int = Field(..., ge=1, description="Идентификатор категории-владельца")

    model_config = {"frozen": True}

    def get_name(self) -> str:
        return self.name

    def get_price(self) -> float:
        return self.price

    def get_category_id(self) -> int:
        return self.category_id

    def total_for(self, quantity: int) -> float:
        """
        Стоимость quantity единиц товара.

        Args:
            quantity: Количество единиц (>= 0)

        Returns:
            price * quantity
        """
        return line_total(self.price, quantity)
