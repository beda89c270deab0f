"""
Module containing the page-aware collection of resources.
"""

import logging


logger = logging.getLogger(__name__)


class Collection:
    """
    An ordered sequence of resources that may span several pages of API responses.

    Iterating over a collection fetches the remaining pages as they are needed,
    so that the whole sequence is produced in the order given by the server.
    """

    def __init__(self, parent, resource_cls, items = ()):
        self.parent = parent
        self.resource_cls = resource_cls
        self._items = [self._make(item) for item in items]
        self._next_page_callback = None
        self._next_page_url = None

    def _make(self, item):
        if isinstance(item, self.resource_cls):
            return item
        return self.resource_cls(self.parent, item)

    def set_next_page_callback(self, callback, url):
        """
        Sets the callable used to fetch the next page, and the URL of that page.

        The callback is called as ``callback(resource_cls, url, parent)`` and must
        return another collection.
        """
        self._next_page_callback = callback
        self._next_page_url = url

    @property
    def next_page_url(self):
        return self._next_page_url

    def has_next_page(self):
        return bool(self._next_page_callback and self._next_page_url)

    def next_page(self):
        """
        Fetches the next page and appends its items.

        Returns ``False`` if there are no more pages.
        """
        if not self.has_next_page():
            return False
        logger.debug(
            f"fetching next page of {self.resource_cls.__name__} "
            f"from '{self._next_page_url}'"
        )
        page = self._next_page_callback(self.resource_cls, self._next_page_url, self.parent)
        self._items.extend(page._items)
        # Take on the continuation of the new page, if any
        self._next_page_callback = page._next_page_callback
        self._next_page_url = page._next_page_url
        return True

    def __iter__(self):
        index = 0
        while True:
            while index < len(self._items):
                yield self._items[index]
                index += 1
            if not self.next_page():
                break

    def __len__(self):
        return len(self._items)

    def __getitem__(self, index):
        return self._items[index]

    def __repr__(self):
        return (
            f"Collection({self.resource_cls.__name__}, "
            f"{len(self._items)} items, next={self._next_page_url!r})"
        )

    def all(self):
        """
        Fetches all the remaining pages and returns the resources as a list.
        """
        return list(self)

    def first(self):
        """
        Returns the first resource, or ``None`` if the collection is empty.
        """
        return next(iter(self), None)

    def select(self, predicate):
        """
        Returns the resources for which the predicate is true, fetching all pages.
        """
        return [item for item in self if predicate(item)]

    def sort(self, key = None, reverse = False):
        """
        Sorts the items that have been fetched so far, in place.
        """
        self._items.sort(key = key or (lambda item: item.id), reverse = reverse)
        return self
