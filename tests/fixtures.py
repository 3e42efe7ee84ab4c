# =============================================================================
# tests/fixtures.py - Shared Test Data
# =============================================================================
# One small news data set used by both the in-memory store (conftest.py) and
# the PostgreSQL integration tests (test_integration.py).
#
# Known shape:
# - 3 topics, 4 users, 12 articles, 18 comments
# - article 1 has 100 votes and 11 comments; article 2 has none
# =============================================================================

from datetime import datetime, timezone


def _ts(year, month, day, hour=0, minute=0):
    return datetime(year, month, day, hour, minute, tzinfo=timezone.utc)


TOPICS = [
    {"slug": "mitch", "description": "The man, the Mitch, the legend"},
    {"slug": "cats", "description": "Not dogs"},
    {"slug": "paper", "description": "what books are made of"},
]

USERS = [
    {
        "username": "butter_bridge",
        "name": "jonny",
        "avatar_url": "https://www.healthytherapies.com/wp-content/uploads/2016/06/Lime3.jpg",
    },
    {
        "username": "icellusedkars",
        "name": "sam",
        "avatar_url": "https://avatars2.githubusercontent.com/u/24604688?s=460&v=4",
    },
    {
        "username": "rogersop",
        "name": "paul",
        "avatar_url": "https://avatars2.githubusercontent.com/u/24394918?s=400&v=4",
    },
    {
        "username": "lurker",
        "name": "do_nothing",
        "avatar_url": "https://www.golenbock.com/wp-content/uploads/2015/01/placeholder-user.png",
    },
]

ARTICLES = [
    {
        "article_id": 1,
        "title": "Living in the shadow of a great man",
        "topic": "mitch",
        "author": "butter_bridge",
        "body": "I find this existence challenging",
        "created_at": _ts(2020, 7, 9, 20, 11),
        "votes": 100,
    },
    {
        "article_id": 2,
        "title": "Sony Vaio; or, The Laptop",
        "topic": "mitch",
        "author": "icellusedkars",
        "body": "Call me Mitchell.",
        "created_at": _ts(2020, 10, 16, 5, 3),
        "votes": 0,
    },
    {
        "article_id": 3,
        "title": "Eight pug gifs that remind me of mitch",
        "topic": "mitch",
        "author": "icellusedkars",
        "body": "some gifs",
        "created_at": _ts(2020, 11, 3, 9, 12),
        "votes": 0,
    },
    {
        "article_id": 4,
        "title": "Student SUES Mitch!",
        "topic": "mitch",
        "author": "rogersop",
        "body": "We all love Mitch and his wonderful, unique typing style.",
        "created_at": _ts(2020, 5, 6, 1, 14),
        "votes": 0,
    },
    {
        "article_id": 5,
        "title": "UNCOVERED: catspiracy to bring down democracy",
        "topic": "cats",
        "author": "rogersop",
        "body": "Bastet walks amongst us, and the cats are taking arms!",
        "created_at": _ts(2020, 8, 3, 13, 14),
        "votes": 0,
    },
    {
        "article_id": 6,
        "title": "A",
        "topic": "mitch",
        "author": "icellusedkars",
        "body": "Delicious tin of cat food",
        "created_at": _ts(2020, 10, 18, 1, 0),
        "votes": 0,
    },
    {
        "article_id": 7,
        "title": "Z",
        "topic": "mitch",
        "author": "icellusedkars",
        "body": "I was hungry.",
        "created_at": _ts(2020, 1, 7, 14, 8),
        "votes": 0,
    },
    {
        "article_id": 8,
        "title": "Does Mitch predate civilisation?",
        "topic": "mitch",
        "author": "icellusedkars",
        "body": "Archaeologists have uncovered a gigantic statue from the dawn of humanity.",
        "created_at": _ts(2020, 4, 17, 1, 8),
        "votes": 0,
    },
    {
        "article_id": 9,
        "title": "They're not exactly dogs, are they?",
        "topic": "mitch",
        "author": "butter_bridge",
        "body": "Well? Think about it.",
        "created_at": _ts(2020, 6, 6, 9, 10),
        "votes": 0,
    },
    {
        "article_id": 10,
        "title": "Seven inspirational thought leaders from Manchester UK",
        "topic": "mitch",
        "author": "rogersop",
        "body": "Who are we kidding, there is only one, and it's Mitch!",
        "created_at": _ts(2020, 5, 14, 4, 15),
        "votes": 0,
    },
    {
        "article_id": 11,
        "title": "Am I a cat?",
        "topic": "mitch",
        "author": "icellusedkars",
        "body": "Having run out of ideas for articles, I am staring at the wall blankly.",
        "created_at": _ts(2020, 1, 15, 22, 21),
        "votes": 0,
    },
    {
        "article_id": 12,
        "title": "Moustache",
        "topic": "mitch",
        "author": "butter_bridge",
        "body": "Have you seen the size of that thing?",
        "created_at": _ts(2020, 10, 11, 11, 24),
        "votes": 0,
    },
]

# article_id -> number of comments on it
COMMENT_COUNTS = {1: 11, 2: 0, 3: 2, 4: 0, 5: 2, 6: 1, 7: 0, 8: 0, 9: 2, 10: 0, 11: 0, 12: 0}


def _build_comments():
    authors = ["butter_bridge", "icellusedkars", "rogersop"]
    comments = []
    comment_id = 1
    for article_id, count in COMMENT_COUNTS.items():
        for n in range(count):
            comments.append(
                {
                    "comment_id": comment_id,
                    "article_id": article_id,
                    "author": authors[comment_id % len(authors)],
                    "body": f"Comment {n + 1} on article {article_id}",
                    "votes": (comment_id * 7) % 20 - 4,
                    "created_at": _ts(2020, 3, 1 + comment_id, 12, comment_id),
                }
            )
            comment_id += 1
    return comments


COMMENTS = _build_comments()
