from __future__ import annotations

from .renderer import pygments_css


def build_css(dark: bool, accent: str) -> str:
    if not dark:
        base = f"""
        body {{ margin: 0; font: 15px/1.6 system-ui, -apple-system, "Segoe UI", Roboto, sans-serif; color: #222; background: #fff; }}
        a {{ color: {accent}; text-decoration: none; }}
        .topbar {{ display: flex; justify-content: space-between; align-items: center; padding: 10px 20px; background: #fafafa; border-bottom: 1px solid #e5e5e5; }}
        .brand a {{ font-weight: 600; color: #111; }}
        .versions ul {{ display: inline-flex; gap: 10px; margin: 0 0 0 12px; padding: 0; list-style: none; }}
        .versions a.active {{ font-weight: 600; }}
        .layout {{ display: flex; }}
        .sidebar {{ width: 260px; padding: 16px 20px; border-right: 1px solid #e5e5e5; }}
        .nav-title {{ margin-top: 12px; font-size: 12px; text-transform: uppercase; color: #777; }}
        .nav-list {{ margin: 4px 0; padding: 0; list-style: none; }}
        .nav-item a.active {{ font-weight: 600; }}
        .content {{ flex: 1; min-width: 0; padding: 16px 32px; }}
        pre {{ overflow: auto; padding: 10px; border: 1px solid #eee; border-radius: 6px; background: #f7f7f7; }}
        table {{ border-collapse: collapse; }}
        th, td {{ padding: 4px 10px; border: 1px solid #ddd; }}
        """
    else:
        base = f"""
        body {{ margin: 0; font: 15px/1.6 system-ui, -apple-system, "Segoe UI", Roboto, sans-serif; color: #e6e6e6; background: #1f1f1f; }}
        a {{ color: {accent}; text-decoration: none; }}
        .topbar {{ display: flex; justify-content: space-between; align-items: center; padding: 10px 20px; background: #2a2a2a; border-bottom: 1px solid #333; }}
        .brand a {{ font-weight: 600; color: #ffffff; }}
        .versions ul {{ display: inline-flex; gap: 10px; margin: 0 0 0 12px; padding: 0; list-style: none; }}
        .versions a.active {{ font-weight: 600; }}
        .layout {{ display: flex; }}
        .sidebar {{ width: 260px; padding: 16px 20px; border-right: 1px solid #333; }}
        .nav-title {{ margin-top: 12px; font-size: 12px; text-transform: uppercase; color: #999; }}
        .nav-list {{ margin: 4px 0; padding: 0; list-style: none; }}
        .nav-item a.active {{ font-weight: 600; }}
        .content {{ flex: 1; min-width: 0; padding: 16px 32px; }}
        pre {{ overflow: auto; padding: 10px; border: 1px solid #444; border-radius: 6px; background: #202020; }}
        table {{ border-collapse: collapse; }}
        th, td {{ padding: 4px 10px; border: 1px solid #444; }}
        """
    return base + pygments_css(dark)
