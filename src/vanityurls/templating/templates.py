"""Built-in page templates, registered with kida through a DictLoader."""

INDEX_TEMPLATE = """<!DOCTYPE html>
<html>
<h1>{{ host }}</h1>
<ul>
{% for handler in handlers %}<li><a href="https://godoc.org/{{ handler }}">{{ handler }}</a></li>{% end %}
</ul>
</html>
"""

VANITY_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
<meta http-equiv="Content-Type" content="text/html; charset=utf-8"/>
<meta name="go-import" content="{{ import_path }} {{ vcs }} {{ repo }}">
<meta name="go-source" content="{{ import_path }} {{ display }}">
<meta http-equiv="refresh" content="0; url=https://godoc.org/{{ import_path }}/{{ subpath }}">
</head>
<body>
Nothing to see here; <a href="https://godoc.org/{{ import_path }}/{{ subpath }}">see the package on godoc</a>.
</body>
</html>
"""

TEMPLATES: dict[str, str] = {
    "index.html": INDEX_TEMPLATE,
    "vanity.html": VANITY_TEMPLATE,
}
