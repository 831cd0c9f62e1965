from crazy_generics.shared.utils.datetime import utc_now

__all__ = [
    "utc_now",
]
