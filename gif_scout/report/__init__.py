"""gif_scout.report: Сохранение отчётов об обходе (JSON) для CLI."""

from gif_scout.report.json_report import render_json

__all__ = ["render_json"]
