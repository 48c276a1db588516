"""General-purpose commands: search engines, reference sites, shopping, media."""

from linkhop.core.command import Command, SearchCommand, command_args, encode_path


class BindingsCommand(Command):
    BINDINGS = ("list", "bindings", "commands")
    DESCRIPTION = "List all available commands"
    EXAMPLE = "list"

    def process(self, args: str) -> str:
        return "/bindings"


class OpenCommand(Command):
    BINDINGS = ("open",)
    DESCRIPTION = "Open an arbitrary website by domain name"
    EXAMPLE = "open example.com"

    def process(self, args: str) -> str:
        target = command_args(args)
        if not target:
            return "https://"
        if target.startswith(("http://", "https://")):
            return target
        return f"https://{target}"


class GoogleSearchCommand(SearchCommand):
    BINDINGS = ("g", "google")
    DESCRIPTION = "Search Google"
    EXAMPLE = "g python asyncio"
    HOME_URL = "https://www.google.com"
    SEARCH_URL = "https://www.google.com/search?q={query}"


class DuckDuckGoCommand(SearchCommand):
    BINDINGS = ("ddg", "duckduckgo")
    DESCRIPTION = "Search DuckDuckGo"
    EXAMPLE = "ddg privacy tools"
    HOME_URL = "https://duckduckgo.com"
    SEARCH_URL = "https://duckduckgo.com/?q={query}"


class WikipediaCommand(SearchCommand):
    BINDINGS = ("wiki", "wikipedia")
    DESCRIPTION = "Search Wikipedia"
    EXAMPLE = "wiki Alan Turing"
    HOME_URL = "https://en.wikipedia.org"
    SEARCH_URL = "https://en.wikipedia.org/w/index.php?search={query}"


class AmazonCommand(SearchCommand):
    BINDINGS = ("az", "amazon")
    DESCRIPTION = "Search Amazon"
    EXAMPLE = "az mechanical keyboard"
    HOME_URL = "https://www.amazon.com"
    SEARCH_URL = "https://www.amazon.com/s?k={query}"


class YouTubeCommand(SearchCommand):
    BINDINGS = ("yt", "youtube")
    DESCRIPTION = "Search YouTube"
    EXAMPLE = "yt lofi beats"
    HOME_URL = "https://www.youtube.com"
    SEARCH_URL = "https://www.youtube.com/results?search_query={query}"


class GoogleMapsCommand(SearchCommand):
    BINDINGS = ("maps",)
    DESCRIPTION = "Search Google Maps"
    EXAMPLE = "maps coffee near me"
    HOME_URL = "https://www.google.com/maps"

    def search(self, query: str) -> str:
        return f"https://www.google.com/maps/search/{encode_path(query)}"


class REICommand(SearchCommand):
    BINDINGS = ("rei",)
    DESCRIPTION = "Search REI"
    EXAMPLE = "rei tent"
    HOME_URL = "https://www.rei.com"
    SEARCH_URL = "https://www.rei.com/search?q={query}"


class SoundCloudCommand(SearchCommand):
    BINDINGS = ("sc", "soundcloud")
    DESCRIPTION = "Search SoundCloud"
    EXAMPLE = "sc ambient"
    HOME_URL = "https://soundcloud.com"
    SEARCH_URL = "https://soundcloud.com/search?q={query}"


COMMANDS_GENERAL = (
    BindingsCommand(),
    OpenCommand(),
    GoogleSearchCommand(),
    DuckDuckGoCommand(),
    WikipediaCommand(),
    AmazonCommand(),
    YouTubeCommand(),
    GoogleMapsCommand(),
    REICommand(),
    SoundCloudCommand(),
)
