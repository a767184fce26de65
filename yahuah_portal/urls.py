from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path("admin/", admin.site.urls),
    path("calendar/", include("sacred_calendar.urls")),
    path("api/calendar/", include("sacred_calendar.api.urls")),
]
