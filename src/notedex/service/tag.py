# SPDX-License-Identifier: MIT

from notedex.model.tag import TagRecord
from notedex.repository.repositories import Repositories


def rank_by_popularity(counts: dict[str, int], limit: int = 0) -> list[tuple[str, int]]:
    """
    Order names by count, highest first, then by name.

    A limit of zero or less keeps everything.
    """
    ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    if limit > 0:
        return ranked[:limit]
    return ranked


def list_tags(repos: Repositories) -> list[TagRecord]:
    tag_index = repos.tags.load()
    return [tag_index[tag] for tag in sorted(tag_index)]


def get_popular_tags(repos: Repositories, limit: int = 0) -> list[TagRecord]:
    """The most used tags, using each tag's note count as its popularity."""
    tag_index = repos.tags.load()
    ranked = rank_by_popularity(
        {tag: record["count"] for tag, record in tag_index.items()}, limit
    )
    return [tag_index[tag] for tag, _ in ranked]
