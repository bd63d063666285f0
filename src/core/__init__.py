"""
Core domain models, money primitives and logging.

Модули этого пакета не зависят от каталога и корзин.
"""
