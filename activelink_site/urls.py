# path: activelink_site/urls.py
from django.urls import include, path

from .views import NavDemoView

users_patterns = (
    [
        path("", NavDemoView.as_view(), name="list"),
        path("<int:pk>/", NavDemoView.as_view(), name="detail"),
        path("<int:pk>/edit/", NavDemoView.as_view(), name="edit"),
    ],
    "users",
)

admin_patterns = (
    [
        path("", NavDemoView.as_view(), name="index"),
        path("reports/", NavDemoView.as_view(), name="reports"),
    ],
    "backoffice",
)

urlpatterns = [
    path("", NavDemoView.as_view(), name="home"),
    path("users/", include(users_patterns)),
    path("admin/", include(admin_patterns)),
    path("search/", NavDemoView.as_view(), name="search"),
    path("<str:locale>/about/", NavDemoView.as_view(), name="about"),
]
