"""Rendering of inventories and diffs for humans and CI systems."""

from __future__ import annotations

import json
from typing import Any, Sequence

from monometa.services.types import Service, ServiceDiff


def to_json(payload: Any, pretty: bool = True) -> str:
    if pretty:
        return json.dumps(payload, indent=2)
    return json.dumps(payload, separators=(",", ":"))


def services_payload(services: Sequence[Service]) -> list[dict[str, Any]]:
    return [service.to_payload() for service in services]


def diffs_payload(diffs: Sequence[ServiceDiff]) -> list[dict[str, Any]]:
    return [diff.to_payload() for diff in diffs]


def changed_names(diffs: Sequence[ServiceDiff]) -> list[str]:
    return [diff.name for diff in diffs if diff.changed]


def _short(service: Service | None) -> str:
    if service is None:
        return "-"
    return f"`{service.checksum[:12]}`"


def render_diff_summary(diffs: Sequence[ServiceDiff], base: str, compare: str) -> str:
    """Markdown table of a diff, suitable for GITHUB_STEP_SUMMARY."""
    lines = [
        f"## Services: {compare} vs {base}",
        "",
        f"{len(changed_names(diffs))} of {len(diffs)} service(s) changed.",
        "",
        "| Service | Status | Base | Compare |",
        "|---------|--------|------|---------|",
    ]
    for diff in diffs:
        lines.append(f"| {diff.name} | {diff.comment.value} | {_short(diff.base)} | {_short(diff.compare)} |")
    return "\n".join(lines) + "\n"
