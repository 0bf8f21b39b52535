from booklists.domain.user.value_objects.about_entry import AboutEntry
from booklists.domain.user.value_objects.email import Email

__all__ = ["AboutEntry", "Email"]
