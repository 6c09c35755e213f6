from __future__ import annotations

from dataclasses import dataclass

from ..core.constants import DEFAULT_OVERLAY_POLICY
from ..core.exceptions import ValidationError
from .policies.base import OverlayPolicy
from .policies.last_in_list import LastInListPolicy
from .policies.latest_marked import LatestMarkedPolicy


@dataclass
class OverlayPolicyFactory:
    """Factory Pattern: pick the overlay policy configured by name."""

    def names(self) -> list[str]:
        return [LastInListPolicy.name, LatestMarkedPolicy.name]

    def for_name(self, name: str | None = None) -> OverlayPolicy:
        key = (name or DEFAULT_OVERLAY_POLICY).strip().lower()
        if key == LastInListPolicy.name:
            return LastInListPolicy()
        if key == LatestMarkedPolicy.name:
            return LatestMarkedPolicy()
        raise ValidationError(f"Unknown overlay policy {name!r}; expected one of: {', '.join(self.names())}")
