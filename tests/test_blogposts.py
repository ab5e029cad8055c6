import io

import pytest

from learnkit.blogposts import Post, main, new_post, new_posts_from_fs

FIRST_BODY = """Title: Post 1
Description: Description 1
Tags: tdd, go
---
Hello
World"""

SECOND_BODY = """Title: Post 2
Description: Description 2
Tags: rust, borrow-checker
---
B
L
M"""

FIRST_POST = Post(
    title="Post 1",
    description="Description 1",
    tags=["tdd", "go"],
    body="Hello\nWorld",
)


def test_new_blog_posts_from_mapping():
    fs = {
        "hello world.md": FIRST_BODY.encode("utf-8"),
        "hello-world2.md": SECOND_BODY.encode("utf-8"),
    }
    posts = new_posts_from_fs(fs)
    assert len(posts) == len(fs)
    assert posts[0] == FIRST_POST


def test_new_blog_posts_from_directory(tmp_path):
    (tmp_path / "hello world.md").write_text(FIRST_BODY, encoding="utf-8")
    (tmp_path / "hello-world2.md").write_text(SECOND_BODY, encoding="utf-8")
    posts = new_posts_from_fs(tmp_path)
    assert len(posts) == 2
    assert posts[0] == FIRST_POST
    assert posts[1] == Post(
        title="Post 2",
        description="Description 2",
        tags=["rust", "borrow-checker"],
        body="B\nL\nM",
    )


def test_new_post_ignores_trailing_newline():
    assert new_post(io.StringIO(FIRST_BODY + "\n")) == FIRST_POST


def test_missing_directory_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        new_posts_from_fs(tmp_path / "absent")


def test_main_reports_failure(tmp_path, capsys):
    assert main([str(tmp_path / "absent")]) == 1
    assert "failed to get posts" in capsys.readouterr().err


def test_main_prints_posts(tmp_path, capsys):
    (tmp_path / "hello world.md").write_text(FIRST_BODY, encoding="utf-8")
    assert main([str(tmp_path)]) == 0
    assert "Post 1" in capsys.readouterr().err