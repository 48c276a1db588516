"""Google Workspace commands (mail, docs, sheets, slides, chat)."""

from linkhop.core.command import Command, SearchCommand, command_args, encode_path


class GmailCommand(Command):
    BINDINGS = ("mail", "gmail")
    DESCRIPTION = "Open Gmail, or search your mailbox"
    EXAMPLE = "mail from:boss"

    def process(self, args: str) -> str:
        query = command_args(args)
        if not query:
            return "https://mail.google.com/mail/u/0/"
        return f"https://mail.google.com/mail/u/0/#search/{encode_path(query)}"


class GoogleDocsCommand(SearchCommand):
    BINDINGS = ("docs", "gdoc")
    DESCRIPTION = "Open Google Docs, or search your documents"
    EXAMPLE = "docs roadmap"
    HOME_URL = "https://docs.google.com/document/u/0/"
    SEARCH_URL = "https://docs.google.com/document/u/0/?q={query}"


class GoogleSheetsCommand(SearchCommand):
    BINDINGS = ("sheets", "gsheet")
    DESCRIPTION = "Open Google Sheets, or search your spreadsheets"
    EXAMPLE = "sheets budget"
    HOME_URL = "https://docs.google.com/spreadsheets/u/0/"
    SEARCH_URL = "https://docs.google.com/spreadsheets/u/0/?q={query}"


class GoogleSlidesCommand(SearchCommand):
    BINDINGS = ("slides", "gslide")
    DESCRIPTION = "Open Google Slides, or search your presentations"
    EXAMPLE = "slides all hands"
    HOME_URL = "https://docs.google.com/presentation/u/0/"
    SEARCH_URL = "https://docs.google.com/presentation/u/0/?q={query}"


class GoogleChatCommand(Command):
    BINDINGS = ("chat", "gchat")
    DESCRIPTION = "Open Google Chat"
    EXAMPLE = "chat"

    def process(self, args: str) -> str:
        return "https://chat.google.com"


COMMANDS_WORKSPACE = (
    GmailCommand(),
    GoogleDocsCommand(),
    GoogleSheetsCommand(),
    GoogleSlidesCommand(),
    GoogleChatCommand(),
)
