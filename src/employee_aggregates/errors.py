"""Exception types raised by the aggregation pipelines and the dataset loader."""

from __future__ import annotations


class AggregateError(RuntimeError):
    """Base class for every error raised by this package."""


class MalformedPostCodeError(AggregateError, ValueError):
    """A post code is too short to derive the proximity group key."""

    def __init__(self, post_code: str, prefix_length: int) -> None:
        super().__init__(
            f"Post code {post_code!r} is shorter than the {prefix_length}-character group prefix"
        )
        self.post_code = post_code
        self.prefix_length = prefix_length


class DatasetError(AggregateError):
    """The employee dataset could not be read or validated."""


class EmptyDatasetError(DatasetError):
    """The employee dataset contains no records."""
