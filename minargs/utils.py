from typing import Callable, Optional, TypeVar

T = TypeVar("T")

# A conversion callback: returns the parsed value, or None to decline the token.
Converter = Callable[[str], Optional[T]]
