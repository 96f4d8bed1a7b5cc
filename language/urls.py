from django.urls import path
from language import views

app_name = "language"

urlpatterns = [
    path("tags/<str:tag>/", views.parse_tag, name="parse_tag"),
]
