from __future__ import annotations

from django.db.models import Q
from django.shortcuts import get_object_or_404
from rest_framework import generics, permissions
from rest_framework.decorators import api_view
from rest_framework.response import Response

from sacred_calendar import anchors
from sacred_calendar.models import AnchorPreset

from .serializers import AnchorPresetSerializer


def _visible_presets(request):
    """Shared presets plus the ones owned by the current user."""

    qs = AnchorPreset.objects.all()
    user = getattr(request, "user", None)
    if user is not None and user.is_authenticated:
        return qs.filter(Q(owner__isnull=True) | Q(owner=user))
    return qs.filter(owner__isnull=True)


class OwnerWritePermission(permissions.BasePermission):
    """Only the owner may change a preset; shared ones are edited in the admin."""

    def has_object_permission(self, request, view, obj):
        if request.method in permissions.SAFE_METHODS:
            return True
        return obj.owner_id is not None and obj.owner_id == request.user.pk


class PresetList(generics.ListCreateAPIView):
    serializer_class = AnchorPresetSerializer
    permission_classes = [permissions.IsAuthenticatedOrReadOnly]

    def get_queryset(self):
        return _visible_presets(self.request)

    def perform_create(self, serializer):
        preset = serializer.save(owner=self.request.user)
        anchors.select_preset(self.request, preset)


class PresetDetail(generics.RetrieveUpdateDestroyAPIView):
    serializer_class = AnchorPresetSerializer
    permission_classes = [permissions.IsAuthenticatedOrReadOnly, OwnerWritePermission]

    def get_queryset(self):
        return _visible_presets(self.request)

    def perform_destroy(self, instance):
        was_active = anchors.is_active_preset(self.request, instance)
        instance.delete()
        if not was_active:
            return
        successor = _visible_presets(self.request).order_by("created_at", "pk").first()
        if successor is None:
            anchors.clear_preset(self.request)
        else:
            anchors.select_preset(self.request, successor)


@api_view(["POST"])
def select_preset(request, pk: int):
    preset = get_object_or_404(_visible_presets(request), pk=pk)
    anchors.select_preset(request, preset)
    return Response({"ok": True, "preset": preset.pk, "anchor": preset.start_date.isoformat()})
