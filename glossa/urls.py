from django.urls import include, path

urlpatterns = [
    path("", include("language.urls")),
]
