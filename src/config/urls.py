"""
URL configuration for the contact relay.
"""

from django.urls import include, path

urlpatterns = [
    path("", include("apps.contact.urls")),
]
