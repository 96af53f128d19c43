"""
This module serves as the primary entry point for the prisma-graphql
command-line interface.

The console script in `pyproject.toml` points at `app` from
`prisma_graphql.app`; this file only makes `python -m prisma_graphql.main`
work as well.
"""

from prisma_graphql.app import app

if __name__ == "__main__":
    app()
