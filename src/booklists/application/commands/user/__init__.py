from booklists.application.commands.user.about_entry_commands import (
    AddAboutEntryCommand,
    RemoveAboutEntryCommand,
)
from booklists.application.commands.user.delete_account_command import (
    DeleteAccountCommand,
)

__all__ = [
    "AddAboutEntryCommand",
    "DeleteAccountCommand",
    "RemoveAboutEntryCommand",
]
