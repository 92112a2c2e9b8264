# SPDX-License-Identifier: MIT

import os

import pendulum

# Fixed-width and zero-padded, so string order is chronological order.
STAMP_FORMAT = "YYMMDD.HHmmss"


def now_local() -> pendulum.DateTime:
    return pendulum.now("local")


def datetime_to_stamp(datetime: pendulum.DateTime) -> str:
    return datetime.in_tz("local").format(STAMP_FORMAT)


def timestamp_to_stamp(timestamp: float) -> str:
    return datetime_to_stamp(pendulum.from_timestamp(timestamp, tz="local"))


def now_stamp() -> str:
    return datetime_to_stamp(now_local())


def stamp_to_datetime(stamp: str) -> pendulum.DateTime:
    return pendulum.datetime(
        2000 + int(stamp[0:2]),
        int(stamp[2:4]),
        int(stamp[4:6]),
        int(stamp[7:9]),
        int(stamp[9:11]),
        int(stamp[11:13]),
        tz="local",
    )


def birth_stamp(stat_result: os.stat_result) -> str:
    """Creation time where the platform records it, otherwise modification time."""
    birthtime = getattr(stat_result, "st_birthtime", None)
    if birthtime is None:
        return timestamp_to_stamp(stat_result.st_mtime)
    return timestamp_to_stamp(birthtime)


def modified_stamp(stat_result: os.stat_result) -> str:
    return timestamp_to_stamp(stat_result.st_mtime)


def last_day_of_month(year: int, month: int) -> int:
    return pendulum.date(year, month, 1).end_of("month").day


def stamp_to_display_str(stamp: str) -> str:
    if stamp == "":
        return ""
    return stamp_to_datetime(stamp).format("YYYY-MM-DD ddd HH:mm")
