import html

import streamlit.components.v1 as components

from .config import PlotterConfig
from .interaction import Tooltip


def tooltip_html(tooltip: Tooltip, config: PlotterConfig = PlotterConfig()) -> str:
    if not tooltip.visible:
        return ""
    off_x, off_y = config.tooltip_offset
    rows = "".join(f"<div>{html.escape(line)}</div>" for line in tooltip.lines)
    return (f'<div class="tooltip" style="left:{tooltip.screen_x + off_x:.0f}px; '
            f'top:{tooltip.screen_y + off_y:.0f}px;">{rows}</div>')


def render_interactive_graph(svg_string: str, tooltip: Tooltip, config: PlotterConfig = PlotterConfig()):
    """
    Shows the rendered frame at its native pixel size with the hover tooltip
    overlaid, plus PNG / SVG download buttons.
    """

    svg_safe = svg_string.replace("`", "\\`")
    width, height = config.width, config.height

    html_code = f"""
    <!DOCTYPE html>
    <html lang="en">
    <head>
        <meta charset="UTF-8">
        <style>
            body {{
                margin: 0;
                padding: 0;
                font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, Helvetica, Arial, sans-serif;
            }}

            .controls {{
                padding: 8px 0;
                display: flex;
                gap: 12px;
                align-items: center;
            }}

            .btn {{
                background-color: #0F5FA6;
                border: none;
                color: white;
                padding: 6px 12px;
                font-size: 14px;
                cursor: pointer;
                border-radius: 4px;
            }}
            .btn:hover {{ background-color: #0A8CBF; }}

            .graph-container {{
                position: relative;
                width: {width}px;
                height: {height}px;
                border: 1px solid #dee2e6;
                cursor: crosshair;
            }}

            .tooltip {{
                position: absolute;
                pointer-events: none;
                padding: 8px;
                border-radius: 4px;
                font-size: 12px;
                background-color: rgba(26, 26, 26, 0.95);
                color: #FFFFFF;
                border: 1px solid #dee2e6;
                white-space: nowrap;
                z-index: 1000;
            }}
        </style>
    </head>
    <body>
        <div class="controls">
            <button class="btn" onclick="downloadPNG()" title="Download PNG Image">PNG</button>
            <button class="btn" onclick="downloadSVG()" title="Download Scalable Vector">SVG</button>
        </div>
        <div class="graph-container" id="graph">
            {tooltip_html(tooltip, config)}
        </div>

        <script>
            const rawSvg = `{svg_safe}`;
            const graph = document.getElementById('graph');
            graph.insertAdjacentHTML('afterbegin', rawSvg);

            function triggerDownload(url, name) {{
                const a = document.createElement('a');
                a.href = url;
                a.download = name;
                document.body.appendChild(a);
                a.click();
                document.body.removeChild(a);
            }}

            function downloadSVG() {{
                const blob = new Blob([rawSvg], {{type: 'image/svg+xml;charset=utf-8'}});
                triggerDownload(URL.createObjectURL(blob), 'graph.svg');
            }}

            function downloadPNG() {{
                const img = new Image();
                const blob = new Blob([rawSvg], {{type: 'image/svg+xml;charset=utf-8'}});
                const url = URL.createObjectURL(blob);
                img.onload = function() {{
                    const canvas = document.createElement('canvas');
                    canvas.width = {width};
                    canvas.height = {height};
                    canvas.getContext('2d').drawImage(img, 0, 0);
                    URL.revokeObjectURL(url);
                    triggerDownload(canvas.toDataURL('image/png'), 'graph.png');
                }};
                img.src = url;
            }}
        </script>
    </body>
    </html>
    """

    components.html(html_code, width=width + 20, height=height + 70)
