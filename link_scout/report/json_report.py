# link_scout/report/json_report.py

"""
Генерация JSON-отчёта для проекта LinkScout.

Сериализация объекта Site в файл.
"""
import json
from pathlib import Path
from typing import Any, Dict

from link_scout.crawler.site import Site


def site_to_dict(site: Site) -> Dict[str, Any]:
    """Сериализует Site в словарь: домен, страницы и итоговое состояние реестра."""
    return {
        'domain': site.domain,
        'pages': {
            url: {
                'title': page.title,
                'in_domain_links': list(page.in_domain_links),
                'out_domain_links': list(page.out_domain_links),
            }
            for url, page in sorted(site.pages.items())
        },
        'visited': dict(sorted(site.visited.snapshot().items())),
    }


def render_json(site: Site, output_path: Path | str) -> Path:
    """
    Сохраняет результат обхода site в формате JSON по указанному пути.

    :param site: заполненный Site после обхода
    :param output_path: путь к JSON-файлу
    :return: Path сохранённого файла

    Пример:
    ```python
    from link_scout.report.json_report import render_json
    report_path = render_json(site, 'reports/report.json')
    print(f"JSON report saved to: {report_path}")
    ```
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    with output.open('w', encoding='utf-8') as f:
        json.dump(site_to_dict(site), f, ensure_ascii=False, indent=2)

    return output
