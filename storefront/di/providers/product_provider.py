from typing import TYPE_CHECKING
from ...application.services.product_service import ProductService
from ...core.config import Settings
from ...domain.repositories.product_repository import ProductRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class ProductProvider:
    """Product service provider - registers product-related services"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_singleton(
            ProductService,
            ProductService(
                repository=container.get(ProductRepository),
                page_size=container.get(Settings).page_size,
            )
        )
