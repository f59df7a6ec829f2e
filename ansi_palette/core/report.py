"""Report builder — text and JSON output for ansi-palette views."""

import json
from typing import Any

from ansi_palette.core.types import Report


def format_text(report: Report) -> str:
    """Format report as human-readable text."""
    lines = [f'ansi-palette: {report.size} colours', '']

    for section_name, section_data in report.sections.items():
        span = section_data.get('span')
        s = f'[{span[0]}→{span[1]}]' if span else ''
        lines.append(f'── {section_name} {s}')

        views = section_data.get('views', {})
        for view_name, view_data in views.items():
            if view_name == 'table' and 'entries' in view_data:
                for e in view_data['entries']:
                    r, g, b = e['rgb']
                    lines.append(f'  {e["index"]:>3}  {e["hex"]}  rgb({r}, {g}, {b})')
            elif view_name == 'nearest' and 'index' in view_data:
                line = (
                    f'  nearest: {view_data["query"]} → {view_data["index"]} {view_data["hex"]}'
                    f'  Δ={view_data["distance"]}'
                )
                if 'pass' in view_data:
                    line += '  ✓' if view_data['pass'] else '  ✗'
                lines.append(line)
            elif view_name == 'swatch' and 'file' in view_data:
                lines.append(f'  swatch: {view_data["file"]} ({view_data["width"]}×{view_data["height"]})')
            else:
                for k, v in view_data.items():
                    lines.append(f'  {view_name}.{k}: {v}')

        lines.append('')

    total = report.pass_count + report.fail_count
    if total > 0:
        lines.append(f'PASS {report.pass_count}/{total}  FAIL {report.fail_count}/{total}')
    return '\n'.join(lines)


def format_json(report: Report) -> str:
    """Format report as JSON."""
    obj: dict[str, Any] = {'size': report.size, 'sections': []}
    for section_name, section_data in report.sections.items():
        obj['sections'].append(
            {
                'name': section_name,
                'span': section_data.get('span'),
                'views': section_data.get('views', {}),
            }
        )

    obj['summary'] = {
        'total': report.pass_count + report.fail_count,
        'pass': report.pass_count,
        'fail': report.fail_count,
    }
    return json.dumps(obj, indent=2)
