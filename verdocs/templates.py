"""
Built-in assets: the page template and the placeholder document.

PAGE_TEMPLATE is a Jinja2 template. ``css``, ``sidebar`` and ``content`` arrive
as ``markupsafe.Markup`` and are emitted unescaped; all other values are
autoescaped.
"""

DEFAULT_VERSION_TITLE = "Default version"

DEFAULT_CONTENT = """# Page not found

There is no document at this address yet.

Pick another page from the navigation, or switch to a different version
using the selector at the top of the page.
"""

PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8" />
  <meta name="viewport" content="width=device-width, initial-scale=1" />
  <title>{{ current_version_title or "Documentation" }}</title>
  <style>{{ css }}</style>
</head>
<body>
  <header class="topbar">
    <div class="brand"><a href="{{ basePath }}">Documentation</a></div>
    {%- if versions %}
    <nav class="versions">
      <span class="current-version">{{ current_version_title }}</span>
      <ul class="version-list">
        {%- for name, label in versions|dictsort %}
        {%- set target = "" if name == default_version_name else name ~ "/" %}
        <li><a class="{{ 'active' if target == (current_version ~ '/' if current_version else '') else '' }}" href="{{ prefix_uri }}{{ target }}{{ contentFileName }}">{{ label }}</a></li>
        {%- endfor %}
      </ul>
    </nav>
    {%- endif %}
  </header>
  <div class="layout">
    <aside class="sidebar">
      {%- for section_title, items in nav %}
      <div class="nav-section">
        <div class="nav-title">{{ section_title }}</div>
        <ul class="nav-list">
          {%- for item in items %}
          <li class="nav-item"><a class="{{ 'active' if item.active else '' }}" href="{{ item.href }}">{{ item.label }}</a></li>
          {%- endfor %}
        </ul>
      </div>
      {%- endfor %}
    </aside>
    <main class="content">
      <article class="doc">{{ content }}</article>
    </main>
  </div>
  <script type="text/x-yaml" id="sidebar-data">{{ sidebar }}</script>
</body>
</html>
"""
