from .base import *

DEBUG = True

INSTALLED_APPS += [
    "drf_spectacular_sidecar",
]

SPECTACULAR_SETTINGS.update(
    {
        "SERVE_INCLUDE_SCHEMA": True,
        "SWAGGER_UI_DIST": "SIDECAR",
        "SWAGGER_UI_FAVICON_HREF": "SIDECAR",
        "REDOC_DIST": "SIDECAR",
    }
)

LOGGING["loggers"]["apps"]["level"] = "DEBUG"
