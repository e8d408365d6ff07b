"""Contact app URL configuration."""

from django.urls import path

from . import views

app_name = "contact"

urlpatterns = [
    path("health", views.HealthView.as_view(), name="health"),
    path("api/contact", views.ContactSubmitView.as_view(), name="submit"),
]
