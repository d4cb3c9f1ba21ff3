from ._src.comparable import SupportsRichComparison
from ._src.sequence import OrderedSequence
from ._src.mutable_sequence import OrderedMutableSequence

__all__ = [
    "OrderedMutableSequence",
    "OrderedSequence",
    "SupportsRichComparison",
]
