"""personhood URL Configuration

The `urlpatterns` list routes URLs to views. For more information please see:
    https://docs.djangoproject.com/en/4.2/topics/http/urls/
"""

from django.contrib import admin
from django.urls import path

from personhood.api import apis as api_list
from personhood.api import health

urlpatterns = [
    path("health/", health, {}, "health-check"),
    path("admin/", admin.site.urls),
]

urlpatterns += [path("", api.urls) for api in api_list]
