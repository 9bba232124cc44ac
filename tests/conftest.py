"""
Shared test fixtures.
"""

import pytest

from ormgen.core.context import RunContext
from ormgen.core.types import Column, ForeignKey, PrimaryKey, Schema, Table
from ormgen.utils.defaults import DEFAULT_POSTGRES

SERIAL = "nextval('{}_id_seq'::regclass)"


# === Test Schema ===


def _id_column(table: str) -> Column:
    return Column(
        name="id",
        type="int64",
        db_type="bigint",
        nullable=False,
        default=SERIAL.format(table),
    )


USERS = Table(
    name="users",
    columns=(
        _id_column("users"),
        Column(name="name", type="string", db_type="text"),
        Column(name="email", type="null.String", db_type="text", nullable=True),
        Column(name="created_at", type="time.Time", db_type="timestamp", default="now()"),
    ),
    primary_key=PrimaryKey(name="users_pkey", columns=("id",)),
)

POSTS = Table(
    name="posts",
    columns=(
        _id_column("posts"),
        Column(name="author_id", type="int64", db_type="bigint"),
        Column(name="editor_id", type="null.Int64", db_type="bigint", nullable=True),
        Column(name="title", type="string", db_type="text"),
    ),
    primary_key=PrimaryKey(name="posts_pkey", columns=("id",)),
    foreign_keys=(
        ForeignKey(
            name="posts_author_id_fkey",
            column="author_id",
            foreign_table="users",
            foreign_column="id",
        ),
        ForeignKey(
            name="posts_editor_id_fkey",
            column="editor_id",
            nullable=True,
            foreign_table="users",
            foreign_column="id",
        ),
    ),
)

COMMENTS = Table(
    name="comments",
    columns=(
        _id_column("comments"),
        Column(name="post_id", type="int64", db_type="bigint"),
        Column(name="body", type="string", db_type="text"),
    ),
    primary_key=PrimaryKey(name="comments_pkey", columns=("id",)),
    foreign_keys=(
        ForeignKey(column="post_id", foreign_table="posts", foreign_column="id"),
    ),
)

TAGS = Table(
    name="tags",
    columns=(
        _id_column("tags"),
        Column(name="label", type="string", db_type="text"),
    ),
    primary_key=PrimaryKey(name="tags_pkey", columns=("id",)),
)

POSTS_TAGS = Table(
    name="posts_tags",
    columns=(
        Column(name="post_id", type="int64", db_type="bigint"),
        Column(name="tag_id", type="int64", db_type="bigint"),
    ),
    primary_key=PrimaryKey(name="posts_tags_pkey", columns=("post_id", "tag_id")),
    foreign_keys=(
        ForeignKey(column="post_id", foreign_table="posts", foreign_column="id"),
        ForeignKey(column="tag_id", foreign_table="tags", foreign_column="id"),
    ),
)

BLOG_TABLES = [USERS, POSTS, COMMENTS, TAGS, POSTS_TAGS]


# === Fixtures ===


@pytest.fixture
def blog_schema() -> Schema:
    """Blog schema with a join table and two keys between posts and users."""
    return Schema.from_tables(BLOG_TABLES)


@pytest.fixture
def run_context(blog_schema: Schema) -> RunContext:
    """Run context over the blog schema."""
    return RunContext.create(blog_schema, profile=DEFAULT_POSTGRES, run_id="run-1")


@pytest.fixture
def blog_tables() -> dict[str, Table]:
    """Blog tables by name, before relationship inference."""
    return {table.name: table for table in BLOG_TABLES}
