from django.urls import path
from .views import compile_css
from .views import health_check

urlpatterns = [
    path('', compile_css),
    path('healthcheck/', health_check),
]
