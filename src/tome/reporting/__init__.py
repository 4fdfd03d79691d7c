"""Reporting package for tome outputs."""

from __future__ import annotations

from tome.reporting.stdout import render_doctor, render_skill_list, render_status, render_sync

__all__ = ["render_doctor", "render_skill_list", "render_status", "render_sync"]
