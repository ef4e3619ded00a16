from concurrent.futures import ThreadPoolExecutor

import pytest

from blog_services.app.core.errors import ValidationError
from blog_services.app.services.comment_store import CommentStore


def test_unknown_post_has_no_comments(comment_store):
    assert comment_store.list_comments("nonexistent") == []


def test_listing_does_not_create_entries(comment_store):
    comment_store.list_comments("nonexistent")

    assert len(comment_store) == 0


def test_add_comment_returns_full_list(comment_store):
    first = comment_store.add_comment("abc123", "first")
    second = comment_store.add_comment("abc123", "second")

    assert [c.content for c in first] == ["first"]
    assert [c.content for c in second] == ["first", "second"]
    assert second[0] == first[0]
    assert second[0].id != second[1].id


def test_add_echo_matches_subsequent_list(comment_store):
    for content in ("a", "b", "c"):
        echoed = comment_store.add_comment("p1", content)
        assert echoed == comment_store.list_comments("p1")


def test_comments_are_grouped_by_post(comment_store):
    comment_store.add_comment("p1", "on p1")
    comment_store.add_comment("p2", "on p2")

    assert [c.content for c in comment_store.list_comments("p1")] == ["on p1"]
    assert [c.content for c in comment_store.list_comments("p2")] == ["on p2"]
    assert len(comment_store) == 2


def test_returned_lists_do_not_alias_store(comment_store):
    echoed = comment_store.add_comment("p1", "one")
    echoed.append("junk")
    comment_store.list_comments("p1").clear()

    assert [c.content for c in comment_store.list_comments("p1")] == ["one"]


def test_missing_content_is_stored_as_none(comment_store):
    comments = comment_store.add_comment("p1")

    assert comments[0].content is None


def test_strict_store_requires_content():
    store = CommentStore(strict=True)

    with pytest.raises(ValidationError):
        store.add_comment("p1", None)
    assert store.list_comments("p1") == []
    assert len(store) == 0


def test_concurrent_adds_append_every_comment_in_order():
    store = CommentStore()
    workers, per_worker = 8, 500

    def add_many(worker):
        for i in range(per_worker):
            store.add_comment("shared", (worker, i))

    with ThreadPoolExecutor(max_workers=workers) as pool:
        list(pool.map(add_many, range(workers)))

    comments = store.list_comments("shared")
    total = workers * per_worker
    assert len(comments) == total
    assert len({c.id for c in comments}) == total
    for worker in range(workers):
        sequence = [c.content[1] for c in comments if c.content[0] == worker]
        assert sequence == list(range(per_worker))
