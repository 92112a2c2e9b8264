# SPDX-License-Identifier: MIT

from typing import Optional

from notedex.time import stamp_to_display_str


def format_tags(tags: Optional[list[str]]) -> str:
    """Format a list of tags as a comma-separated string without brackets or quotes."""
    if tags is None or len(tags) == 0:
        return ""
    return ", ".join(tags)


def format_stamp(stamp: Optional[str]) -> str:
    if stamp is None or stamp == "":
        return ""
    return f"{stamp}  ({stamp_to_display_str(stamp)})"
