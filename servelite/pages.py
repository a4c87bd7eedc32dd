from __future__ import annotations

WELCOME_PAGE = """<!DOCTYPE html>
<html>
<head>
    <title>servelite</title>
    <style>
        body { font-family: Arial, sans-serif; margin: 40px; }
        h1 { color: #333; }
    </style>
</head>
<body>
    <h1>Welcome to servelite</h1>
    <p>Available routes:</p>
    <ul>
        <li><a href="/">Home</a></li>
        <li><a href="/about">About</a></li>
        <li><a href="/api/status">API Status</a></li>
    </ul>
</body>
</html>
"""

ABOUT_PAGE = (
    "<html><body><h1>About</h1>"
    "<p>This is a simple HTTP server written in Python.</p>"
    "</body></html>\n"
)
