from django.contrib import admin
from django.urls import path


urlpatterns = [
    # DJANGO ADMIN (CAMPAIGNS / RECORDS / INVITES)
    path("admin/", admin.site.urls),
]
