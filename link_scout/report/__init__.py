"""link_scout.report: Отчёты по результатам обхода (текст, JSON и HTML)."""

from link_scout.report.html_report import render_html
from link_scout.report.json_report import render_json, site_to_dict
from link_scout.report.text_report import format_registry, format_site

__all__ = ["site_to_dict", "render_json", "render_html", "format_site", "format_registry"]
