"""Rule listing output."""

from __future__ import annotations

from .listing import listing_payload, render_json, render_text, rule_to_dict

__all__ = ["listing_payload", "render_json", "render_text", "rule_to_dict"]
