"""
Shared pytest fixtures for Rules MCP tests

Builds throwaway content trees so every test gets an isolated catalog.
"""

import sys
from pathlib import Path
from textwrap import dedent
from unittest.mock import Mock

import pytest

# Add project root to Python path
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


# ============================================================================
# Content helpers
# ============================================================================

def write_document(path: Path, frontmatter: str, body: str = "") -> Path:
    """Write a markdown document with a frontmatter block."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(f"---\n{dedent(frontmatter).strip()}\n---\n\n{dedent(body).strip()}\n")
    return path


def write_rule(root: Path, directory: str, filename: str, rule_id: str, category: str, body: str = "", **extra) -> Path:
    """Write a rule document under rules/<directory>/; system defaults to the directory name."""
    lines = [
        f"id: {rule_id}",
        f"title: {extra.pop('title', rule_id.upper())}",
        f"description: {extra.pop('description', 'Rule ' + rule_id)}",
        f"category: {category}",
        f"system: {extra.pop('system', directory)}",
    ]
    for key, value in extra.items():
        if isinstance(value, list):
            lines.append(f"{key}:")
            lines.extend(f"  - {item}" for item in value)
        else:
            lines.append(f"{key}: {value}")
    return write_document(
        root / "rules" / directory / filename,
        "\n".join(lines),
        body or f"# {rule_id}\n\nContent of {rule_id}.",
    )


def write_resource(root: Path, filename: str, uri: str, name: str = "Guide", body: str = "Guide body.") -> Path:
    return write_document(
        root / "resources" / filename,
        f"""
        uri: {uri}
        name: {name}
        description: {name} description
        mimeType: text/markdown
        """,
        body,
    )


@pytest.fixture
def content_root(tmp_path) -> Path:
    """
    Content tree with two rules per system, one resource, two prompts and
    one rule tool.
    """
    root = tmp_path / "content"

    write_rule(root, "microfrontend", "arch.md", "mf-arch-001", "architecture",
               title="Module Federation", tags=["architecture", "federation"])
    write_rule(root, "microfrontend", "perf.md", "mf-perf-001", "performance",
               title="Bundle Budgets")
    write_rule(root, "microservice", "arch.md", "ms-arch-001", "architecture",
               title="API Gateway")
    write_rule(root, "microservice", "test.md", "ms-test-001", "testing",
               title="Contract Testing", language="java", codeType="test")

    write_resource(root, "guide.md", "docs://microfrontend/guide", name="Microfrontend Guide")

    write_document(
        root / "prompts" / "design-microservice.md",
        """
        name: design-microservice
        description: Help design a new microservice
        arguments:
          - name: service_name
            description: Name of the microservice
            required: true
          - name: technology
            description: Technology stack
            required: false
        """,
        'Design a microservice named "{{service_name|my-service}}" using {{technology|Node.js}}.',
    )
    write_document(
        root / "prompts" / "review.md",
        """
        name: review-architecture
        description: Review an architecture
        arguments:
          - name: architecture_type
            required: true
          - name: description
        """,
        "Review my {{architecture_type}} architecture.{{#if description}} Context: {{description}}{{/if}}",
    )

    write_document(
        root / "tools" / "get-microservice-rules.md",
        """
        name: get-microservice-rules
        description: Get microservice rules
        system: microservice
        inputSchema:
          type: object
          properties:
            category:
              type: string
              enum: [architecture, performance, security, testing, all]
            language:
              type: string
              enum: [typescript, javascript, python, java, go, rust]
            codeType:
              type: string
              enum: [source, test]
        """,
        "Returns microservice rules.",
    )
    write_document(
        root / "tools" / "about.md",
        """
        name: about
        description: About this server
        inputSchema:
          type: object
        """,
        "Serves development rules.",
    )
    return root


@pytest.fixture
def catalog(content_root):
    from rules_mcp.catalog import ContentCatalog
    return ContentCatalog(content_root)


# ============================================================================
# Base Fixtures
# ============================================================================

@pytest.fixture
def logger():
    """
    Standard mock logger for all tests.
    """
    from rules_mcp.utils.logger import Logger
    return Mock(spec=Logger)


@pytest.fixture
def mock_context():
    """
    Standard mock ToolContext for all tests.
    """
    from rules_mcp.models.tools import ToolContext

    return ToolContext(
        requestId='test_req_123',
        timestamp=1234567890.0,
        toolName=None
    )
