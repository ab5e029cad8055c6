"""Read blog posts with a small metadata header from a directory."""

from __future__ import annotations

import argparse
import io
import sys
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path
from typing import Union

TITLE_SEPARATOR = "Title: "
DESCRIPTION_SEPARATOR = "Description: "
TAGS_SEPARATOR = "Tags: "

FileSystem = Union[str, "PathLike[str]", Mapping[str, Union[str, bytes]]]


@dataclass
class Post:
    """A post on a blog."""

    title: str = ""
    description: str = ""
    tags: list[str] = field(default_factory=list)
    body: str = ""


def _lines(post_body: Iterable[str]) -> Iterator[str]:
    for line in post_body:
        yield line.removesuffix("\n").removesuffix("\r")


def new_post(post_body: Iterable[str]) -> Post:
    """Parse a post from a text stream or any iterable of lines."""
    lines = _lines(post_body)

    def read_meta_line(tag_name: str) -> str:
        return next(lines, "").removeprefix(tag_name)

    title = read_meta_line(TITLE_SEPARATOR)
    description = read_meta_line(DESCRIPTION_SEPARATOR)
    tags = read_meta_line(TAGS_SEPARATOR).split(", ")
    next(lines, None)  # the separator line
    body = "\n".join(lines)
    return Post(title=title, description=description, tags=tags, body=body)


def new_posts_from_fs(file_system: FileSystem) -> list[Post]:
    """Read every file of a directory, or of a name-to-content mapping, as a post.

    Files are read in name order; any failure to read one is raised.
    """
    if isinstance(file_system, Mapping):
        posts = []
        for name in sorted(file_system):
            content = file_system[name]
            if isinstance(content, bytes):
                content = content.decode("utf-8")
            posts.append(new_post(io.StringIO(content)))
        return posts

    directory = Path(file_system)
    posts = []
    for entry in sorted(directory.iterdir(), key=lambda p: p.name):
        with entry.open(encoding="utf-8") as post_file:
            posts.append(new_post(post_file))
    return posts


def main(argv: list[str] | None = None) -> int:
    """Read the posts of a directory (``./posts`` by default) and print them."""
    parser = argparse.ArgumentParser(description="Read blog posts from a directory.")
    parser.add_argument("directory", nargs="?", default=str(Path.cwd() / "posts"))
    args = parser.parse_args(argv)
    try:
        posts = new_posts_from_fs(args.directory)
    except OSError as err:
        print(f"failed to get posts: {err}", file=sys.stderr)
        return 1
    print(posts, file=sys.stderr)
    return 0