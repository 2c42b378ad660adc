from __future__ import annotations

import pytest

README = """# mypkg

A tiny **HTTP** client for [Python](https://python.org).

## Installation

```bash
pip install mypkg
```

## Usage

Call `get` to fetch a page:

```python
def get(url: str, timeout: float = 5.0) -> Response:
    ...
```

### Advanced options

Pass `retries` to retry.

### Internals

Nothing to see.

## API Reference

```javascript
export async function fetchPage(url, options) {
  return request(url)
}
```

## License

MIT
"""

HTML_PAGE = """<html>
<head>
<title> Docs </title>
<meta name="description" content=" A library. ">
</head>
<body>
<nav>Menu</nav>
<main>
<h1>Intro</h1>
<p>Hello <b>world</b>.</p>
<pre><code>x = 1</code></pre>
<p>Use <code>foo()</code> and <code></code>.</p>
<h2>API</h2>
<p>Calls.</p>
<a href="#top">Top</a>
<a href="https://example.com">Example</a>
<a href="/docs"></a>
</main>
<footer>Footer</footer>
</body>
</html>
"""


@pytest.fixture
def readme_markdown():
    return README


@pytest.fixture
def readme_path(tmp_path):
    path = tmp_path / "README.md"
    path.write_text(README, encoding="utf-8")
    return path


@pytest.fixture
def html_page():
    return HTML_PAGE
