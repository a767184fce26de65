from django.urls import path

from . import views

urlpatterns = [
    path("presets/", views.PresetList.as_view(), name="preset-list"),
    path("presets/<int:pk>/", views.PresetDetail.as_view(), name="preset-detail"),
    path("presets/<int:pk>/select/", views.select_preset, name="preset-select"),
]
