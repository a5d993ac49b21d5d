"""
Pytest configuration and shared fixtures for Blogverse tests.
"""

import tempfile
import shutil
from pathlib import Path
from typing import Callable, Generator, Optional

import pytest
import yaml
from fastapi.testclient import TestClient

from app.content_store import ContentStore
from app.parser import FrontmatterParser
from app.repository import ContentRepository

EntryWriter = Callable[..., Path]


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    temp_path = Path(tempfile.mkdtemp())
    yield temp_path
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def empty_content_dir(temp_dir: Path) -> Path:
    """An existing content directory with no entries."""
    content_path = temp_dir / "blog"
    content_path.mkdir()
    return content_path


@pytest.fixture
def write_entry(empty_content_dir: Path) -> EntryWriter:
    """Return a helper that writes an .mdx entry into the content directory."""

    def _write(
        identifier: str,
        title: str = "Untitled",
        date: str = "2024-01-01",
        description: str = "A description",
        tags: Optional[list] = None,
        body: str = "Body text.\n",
        cover: Optional[str] = None,
    ) -> Path:
        metadata = {"title": title, "date": date, "description": description}
        if tags is not None:
            metadata["tags"] = tags
        if cover is not None:
            metadata["cover"] = cover
        header = yaml.safe_dump(metadata, sort_keys=False, allow_unicode=True)
        path = empty_content_dir / f"{identifier}.mdx"
        path.write_text(f"---\n{header}---\n{body}", encoding="utf-8")
        return path

    return _write


@pytest.fixture
def content_dir(empty_content_dir: Path) -> Path:
    """Create a content directory with a few sample entries."""
    (empty_content_dir / "hello-world.mdx").write_text(
        """---
title: "Hello World"
date: "2024-01-15"
description: "The very first entry"
tags: ["python", "testing"]
---

# Hello World

This is the **first** post about [Python](https://python.org).
""",
        encoding="utf-8"
    )

    long_body = "\n\n".join(" ".join(["word"] * 150) for _ in range(3))
    (empty_content_dir / "machine-learning.mdx").write_text(
        f"""---
title: "Notes on Machine Learning"
date: "2024-06-01"
description: "What I learned this spring"
tags:
  - Machine Learning
  - python
cover: "/images/ml.jpg"
---

{long_body}
""",
        encoding="utf-8"
    )

    (empty_content_dir / "notes-2023.mdx").write_text(
        """---
title: "Year in Review"
date: 2023-11-20
description: "Looking back"
tags: [notes]
---

Short body.
""",
        encoding="utf-8"
    )

    # Not entries
    (empty_content_dir / "draft.txt").write_text("not content", encoding="utf-8")
    (empty_content_dir / ".hidden.mdx").write_text("---\ntitle: x\n---\n", encoding="utf-8")

    return empty_content_dir


@pytest.fixture
def parser() -> FrontmatterParser:
    """Create a front matter parser instance."""
    return FrontmatterParser()


@pytest.fixture
def store(content_dir: Path) -> ContentStore:
    return ContentStore(content_dir, ".mdx")


@pytest.fixture
def repository(store: ContentStore) -> ContentRepository:
    return ContentRepository(store)


@pytest.fixture
def empty_repository(empty_content_dir: Path) -> ContentRepository:
    """Repository over a directory that tests fill with write_entry."""
    return ContentRepository(ContentStore(empty_content_dir, ".mdx"))


def _client_for(content_path: Path) -> Generator[TestClient, None, None]:
    from app.main import app
    from app.api.dependencies import get_repository

    app.dependency_overrides[get_repository] = lambda: ContentRepository(
        ContentStore(content_path, ".mdx")
    )
    try:
        with TestClient(app) as client:
            yield client
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def client(content_dir: Path) -> Generator[TestClient, None, None]:
    """Test client serving the sample content directory."""
    yield from _client_for(content_dir)


@pytest.fixture
def empty_client(empty_content_dir: Path) -> Generator[TestClient, None, None]:
    """Test client serving a content directory that starts empty."""
    yield from _client_for(empty_content_dir)
