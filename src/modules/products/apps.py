from django.apps import AppConfig


class ProductsConfig(AppConfig):
    default_auto_field = "django.db.models.AutoField"
    name = "modules.products"
    label = "products"

    def ready(self) -> None:
        import structlog

        from modules.products.handlers import register_handlers
        from modules.products.repositories.django_repository import (
            ProductDjangoRepository,
        )
        from shared.infrastructure.bus import dispatcher

        register_handlers(dispatcher, ProductDjangoRepository)
        structlog.get_logger(__name__).info("product_service.starting")
