from booklists.domain.lists.aggregates.book_list import BookList

__all__ = ["BookList"]
