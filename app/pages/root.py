"""Root landing page with links to the task API and its documentation."""


def render_root_page(app_name: str, app_version: str, api_prefix: str = "") -> str:
    """Return HTML for the root landing page."""
    return f"""
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{app_name}</title>
    <style>
        body {{
            font-family: system-ui, sans-serif;
            margin: 0;
            padding: 2rem 1rem;
            background: #fafafa;
            color: #222;
        }}
        .wrap {{ max-width: 560px; margin: 0 auto; }}
        h1 {{ font-weight: 600; margin: 0 0 0.25rem 0; }}
        .version {{ color: #888; margin: 0 0 2rem 0; }}
        code {{ font-family: ui-monospace, monospace; font-size: 0.9em; }}
        ul {{ padding-left: 1.2rem; line-height: 1.8; }}
        a {{ color: #0b5cad; }}
    </style>
</head>
<body>
    <div class="wrap">
        <h1>{app_name}</h1>
        <p class="version">v{app_version}</p>
        <ul>
            <li><code>POST {api_prefix}/task/create-post</code> create a task</li>
            <li><code>GET {api_prefix}/task/all?search=</code> five most recent open tasks</li>
            <li><code>PATCH {api_prefix}/task/{{id}}</code> mark a task completed</li>
        </ul>
        <p><a href="/docs">API docs (Swagger UI)</a> &middot; <a href="/redoc">ReDoc</a></p>
    </div>
</body>
</html>
"""
