from __future__ import annotations

from newsroom_feed.deduplication import canonical_url, merge_articles


def test_canonical_url_strips_fragment():
    assert canonical_url("https://a/x#frag") == "https://a/x"
    assert canonical_url("https://a/x#one#two") == "https://a/x"
    assert canonical_url("https://a/x") == "https://a/x"


def test_later_published_wins_for_same_stripped_url(make_article):
    first = make_article(url="https://a/x", published="2024-01-01T00:00:00Z")
    second = make_article(url="https://a/x#frag", published="2024-01-02T00:00:00Z")

    assert merge_articles([first, second]) == [second]
    assert merge_articles([second, first]) == [second]


def test_equal_timestamps_keep_first_seen(make_article):
    first = make_article(url="https://a/x", title="first")
    second = make_article(url="https://a/x#again", title="second")

    assert merge_articles([first, second]) == [first]


def test_urlless_articles_are_dropped(make_article):
    articles = [make_article(url="") for _ in range(5)]
    articles += [make_article(url="https://a/1"), make_article(url="https://a/2")]

    merged = merge_articles(articles)

    assert len(merged) == 2
    assert all(article.url for article in merged)


def test_output_sorted_newest_first(make_article):
    articles = [
        make_article(url="https://a/1", published="2024-01-03T00:00:00Z"),
        make_article(url="https://a/2", published="2024-03-01T00:00:00Z"),
        make_article(url="https://a/3", published="2023-12-31T00:00:00Z"),
        make_article(url="https://a/4", published="2024-02-10T08:30:00Z"),
    ]

    merged = merge_articles(articles)

    for current, following in zip(merged, merged[1:]):
        assert current.published_at >= following.published_at
    assert [a.url for a in merged] == ["https://a/2", "https://a/4", "https://a/1", "https://a/3"]


def test_merge_is_idempotent(make_article):
    articles = [
        make_article(url="https://a/1", published="2024-01-03T00:00:00Z"),
        make_article(url="https://a/1#c", published="2024-01-04T00:00:00Z"),
        make_article(url="https://a/2", published="2024-01-03T00:00:00Z"),
        make_article(url="", published="2024-01-05T00:00:00Z"),
        make_article(url="https://a/3", published="2024-01-01T00:00:00Z"),
    ]

    once = merge_articles(articles)

    assert merge_articles(once) == once


def test_merge_does_not_mutate_input(make_article):
    articles = [make_article(url="https://a/1"), make_article(url="")]
    snapshot = list(articles)

    merge_articles(articles)

    assert articles == snapshot
