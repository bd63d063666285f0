"""Исключения каталога."""


class CatalogError(Exception):
    """Базовая ошибка каталога."""
    pass


class UnknownCategoryError(CatalogError, KeyError):
    """
    Категория с заданным идентификатором не зарегистрирована в каталоге.

    Возникает при разрешении handle товара (product.category_id),
    если категория не была добавлена в этот каталог.
    """

    def __init__(self, category_id: int):
        self.category_id = category_id
        super().__init__(f"Unknown category_id: {category_id}")

    def __str__(self) -> str:
        return f"Unknown category_id: {self.category_id}"
