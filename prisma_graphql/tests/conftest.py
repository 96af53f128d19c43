"""
Shared pytest fixtures for the prisma-graphql test suite.
"""

import pytest

BLOG_SCHEMA = """\
datasource db {
  provider = "postgresql"
  url      = env("DATABASE_URL")
}

generator client {
  provider = "prisma-client-js"
}

// Accounts
model user_profile {
  id         Int      @id @default(autoincrement())
  name       String
  bio        String?
  created_at DateTime @default(now())
  posts      post[]

  @@map("user_profiles")
}

model post {
  id        Int          @id
  title     String
  metadata  Json?
  rating    Decimal
  author    user_profile @relation(fields: [author_id], references: [id])
  author_id Int
}
"""


@pytest.fixture
def blog_schema() -> str:
    """A small two-model Prisma schema with a relation in both directions."""
    return BLOG_SCHEMA


@pytest.fixture
def schema_file(tmp_path):
    """Factory that writes Prisma text to a temporary `schema.prisma`."""

    def _write(content: str = BLOG_SCHEMA):
        path = tmp_path / "schema.prisma"
        path.write_text(content, encoding="utf-8")
        return path

    return _write
