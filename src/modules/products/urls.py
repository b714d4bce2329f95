"""Product URL configuration."""

from __future__ import annotations

from rest_framework.routers import SimpleRouter

from modules.products.views import ProductViewSet

router = SimpleRouter()
# Accept both /api/products and /api/products/
router.trailing_slash = "/?"
router.register("products", ProductViewSet, basename="product")

urlpatterns = router.urls
