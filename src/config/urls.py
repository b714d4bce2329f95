from django.conf import settings
from django.urls import include, path

urlpatterns = [
    path("api/", include("modules.products.urls")),
]

# OpenAPI schema & docs (development only)
if settings.APP_ENV == "development":
    from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

    urlpatterns += [
        path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
        path(
            "api/docs/",
            SpectacularSwaggerView.as_view(url_name="schema"),
            name="swagger-ui",
        ),
    ]
