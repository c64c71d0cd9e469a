"""Global test fixtures."""

import os
from dataclasses import dataclass, field
from typing import Any

import pytest

# Keep a developer's config file out of the tests
os.environ.pop("SOLRDOC_CONFIG_FILE", None)

from solrdoc.config import MapperConfig  # noqa: E402
from solrdoc.domain.document.service.mapper import DocumentMapper  # noqa: E402
from solrdoc.infrastructure.record.accessor import ConventionAccessor  # noqa: E402
from solrdoc.infrastructure.record.plain import (  # noqa: E402
    AttributeAssociationResolver,
    AttributeIdentity,
)


@dataclass
class Author:
    id: int
    name: str
    email: str | None = None


@dataclass
class Comment:
    id: int
    body: str


@dataclass
class Article:
    id: int = 42
    title: str | None = "Indexing made simple"
    body: str = "<b>bold</b> & more"
    rating: float = 4.5
    popularity: Any = 2.0
    keywords: list[str] = field(default_factory=lambda: ["search", "solr"])
    published: bool = True
    draft: bool = False
    status: str = "live"
    author: Author | None = None
    comments: list[Comment] = field(default_factory=list)

    def summary_for_index(self) -> str:
        return f"{self.title} ({self.status})"


@pytest.fixture
def article() -> Article:
    return Article(
        author=Author(id=7, name="Ada <Lovelace>", email="ada@example.com"),
        comments=[Comment(id=1, body="first"), Comment(id=2, body="second"), Comment(id=3, body="<i>third</i>")],
    )


@pytest.fixture
def mapper_config() -> MapperConfig:
    return MapperConfig()


@pytest.fixture
def mapper(mapper_config: MapperConfig) -> DocumentMapper:
    return DocumentMapper(
        identity=AttributeIdentity(),
        accessor=ConventionAccessor(),
        associations=AttributeAssociationResolver(),
        config=mapper_config,
    )
