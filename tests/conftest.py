"""Shared fixtures: page contexts for each source type and sample HTML pages."""

import pytest

from sparkle.context.models import PageContext


@pytest.fixture
def github_context() -> PageContext:
    return PageContext(
        title="Sample GitHub Repository",
        url="https://github.com/user/repo",
        domain="github.com",
        source_type="github",
        text_content="This is sample code content from a GitHub repository.",
        metadata={
            "description": "A sample repository for testing",
            "og:description": "A sample GitHub repo",
            "keywords": "testing, javascript, typescript",
        },
        token_count=250,
    )


@pytest.fixture
def generic_context() -> PageContext:
    return PageContext(
        title="Generic Web Page",
        url="https://example.com/page",
        domain="example.com",
        source_type="generic",
        text_content="Some generic content here.",
        metadata={},
        token_count=50,
    )


@pytest.fixture
def arxiv_context() -> PageContext:
    return PageContext(
        title="Research Paper on Machine Learning",
        url="https://arxiv.org/abs/1234.5678",
        domain="arxiv.org",
        source_type="arxiv",
        text_content="Abstract: This paper presents novel research on ML...",
        metadata={"description": "Research paper abstract"},
        token_count=500,
    )


@pytest.fixture
def github_html() -> str:
    return """
<html>
<head>
  <title>user/repo: a sample project</title>
  <meta name="description" content="A sample repository for testing">
  <meta name="keywords" content="testing, python">
  <meta property="og:title" content="OG Title">
  <meta property="og:description" content="OG Description text">
  <meta charset="utf-8">
</head>
<body>
  <h1>Main Heading</h1>
  <h2>Section One</h2>
  <h3>Section Two</h3>
  <h4>Too deep to count</h4>
  <pre><code>def add(a, b):
    return a + b</code></pre>
  <main>
    <p>This is a paragraph with enough content to be extracted for context.</p>
    <p>Too short to keep.</p>
    <p>Another paragraph that should also be included in the scraped content.</p>
  </main>
  <p>This paragraph sits outside the main region and must never be harvested.</p>
</body>
</html>
"""


@pytest.fixture
def empty_html() -> str:
    return "<html><head></head><body></body></html>"
