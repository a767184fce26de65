from django.urls import path

from . import views

app_name = "sacred_calendar"

urlpatterns = [
    path("anchor/set/", views.set_anchor, name="set_anchor"),
    path("year/meta/", views.year_meta, name="year_meta"),
    path("to-gregorian/", views.to_gregorian, name="to_gregorian"),
    path("to-sacred/", views.to_sacred, name="to_sacred"),
    path("month/<int:month>/", views.month_grid, name="month_grid"),
    path("export.ics", views.export_ics, name="export_ics"),
    path("search/", views.search_view, name="search"),
]
