"""Manager classes for list state."""

from .list_store_manager import ListStoreManager
from .mutation_manager import InfiniteScrollHandle
from .page_loader_manager import PageLoaderManager
from .pagination_manager import LoadState, PaginationManager

__all__ = [
    "InfiniteScrollHandle",
    "ListStoreManager",
    "LoadState",
    "PageLoaderManager",
    "PaginationManager",
]
