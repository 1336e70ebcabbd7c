import threading
import unicodedata
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")


class LoadOnce(Generic[T]):
    """
    Memo cell around a zero-argument loader.

    The loader runs at most once; concurrent first callers wait on the lock
    and share its result. A raised exception is kept and re-raised to every
    later caller.
    """

    def __init__(self, loader: Callable[[], T]):
        self._loader = loader
        self._lock = threading.Lock()
        self._done = False
        self._value: Optional[T] = None
        self._error: Optional[BaseException] = None

    @property
    def loaded(self) -> bool:
        return self._done

    def get(self) -> T:
        if not self._done:
            with self._lock:
                if not self._done:
                    try:
                        self._value = self._loader()
                    except Exception as e:
                        self._error = e
                    self._done = True

        if self._error is not None:
            raise self._error
        return self._value  # type: ignore[return-value]


def locale_sort_key(value: str) -> tuple:
    """
    Approximate locale-aware collation: compare letters without accents or
    case first, then lowercase before uppercase.
    """
    decomposed = unicodedata.normalize("NFKD", value)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    # swapcase puts "a" ahead of "A" on the tie-break
    return (base.casefold(), value.swapcase())
