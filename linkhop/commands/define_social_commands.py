"""Social and code-hosting commands.

Invariants:
    - "@name" arguments go to a profile page where the service has one
    - Multi-word arguments become a search on the service
"""

import re

from linkhop.core.command import Command, SearchCommand, command_args, encode_path, encode_query

_PHONE_CHARS = re.compile(r"[\s\-()+]")


class GitHubCommand(Command):
    BINDINGS = ("gh",)
    DESCRIPTION = "Navigate to GitHub users/repositories, or search GitHub"
    EXAMPLE = "gh facebook/react"

    def process(self, args: str) -> str:
        target = command_args(args)
        if not target:
            return "https://github.com"
        if " " in target:
            return f"https://github.com/search?q={encode_query(target)}"
        return f"https://github.com/{encode_path(target, safe='/')}"


class GitlabCommand(Command):
    BINDINGS = ("gl", "gitlab")
    DESCRIPTION = "Navigate to GitLab projects, or search GitLab"
    EXAMPLE = "gl gitlab-org/gitlab"

    def process(self, args: str) -> str:
        target = command_args(args)
        if not target:
            return "https://gitlab.com"
        if " " in target:
            return f"https://gitlab.com/search?search={encode_query(target)}"
        return f"https://gitlab.com/{encode_path(target, safe='/')}"


class TwitterCommand(Command):
    BINDINGS = ("tw", "x")
    DESCRIPTION = "Navigate to X/Twitter profiles, or search X"
    EXAMPLE = "tw @rustlang"

    def process(self, args: str) -> str:
        target = command_args(args)
        if not target:
            return "https://x.com"
        if target.startswith("@") and len(target) > 1 and " " not in target:
            return f"https://x.com/{encode_path(target[1:])}"
        return f"https://x.com/search?q={encode_query(target)}"


class RedditCommand(Command):
    BINDINGS = ("r", "reddit")
    DESCRIPTION = "Navigate to a subreddit (r/name), or search Reddit"
    EXAMPLE = "r r/rust"

    def process(self, args: str) -> str:
        target = command_args(args)
        if not target:
            return "https://www.reddit.com"
        if target.startswith("r/") and len(target) > 2 and " " not in target:
            return f"https://www.reddit.com/r/{encode_path(target[2:])}"
        return f"https://www.reddit.com/search/?q={encode_query(target)}"


class InstagramCommand(Command):
    BINDINGS = ("ig", "instagram")
    DESCRIPTION = "Navigate to Instagram profiles, or search Instagram"
    EXAMPLE = "ig @natgeo"

    def process(self, args: str) -> str:
        target = command_args(args)
        if not target:
            return "https://www.instagram.com"
        if target.startswith("@") and len(target) > 1 and " " not in target:
            return f"https://www.instagram.com/{encode_path(target[1:])}/"
        return (
            "https://www.instagram.com/explore/search/keyword/"
            f"?q={encode_query(target)}"
        )


class LinkedInCommand(SearchCommand):
    BINDINGS = ("li", "linkedin")
    DESCRIPTION = "Search LinkedIn"
    EXAMPLE = "li software engineer"
    HOME_URL = "https://www.linkedin.com"
    SEARCH_URL = "https://www.linkedin.com/search/results/all/?keywords={query}"


class FacebookCommand(SearchCommand):
    BINDINGS = ("fb", "facebook")
    DESCRIPTION = "Search Facebook"
    EXAMPLE = "fb events"
    HOME_URL = "https://www.facebook.com"
    SEARCH_URL = "https://www.facebook.com/search/top/?q={query}"


class ThreadsCommand(Command):
    BINDINGS = ("threads",)
    DESCRIPTION = "Navigate to Threads profiles, or search Threads"
    EXAMPLE = "threads @zuck"

    def process(self, args: str) -> str:
        target = command_args(args)
        if not target:
            return "https://www.threads.net"
        if target.startswith("@") and len(target) > 1 and " " not in target:
            return f"https://www.threads.net/@{encode_path(target[1:])}"
        return f"https://www.threads.net/search?q={encode_query(target)}"


class WhatsAppCommand(Command):
    BINDINGS = ("wa", "whatsapp")
    DESCRIPTION = "Open WhatsApp Web, or start a chat with a phone number"
    EXAMPLE = "wa +1 555 010 9999"

    def process(self, args: str) -> str:
        digits = _PHONE_CHARS.sub("", command_args(args))
        if digits.isdigit():
            return f"https://wa.me/{digits}"
        return "https://web.whatsapp.com"


class MetaCommand(Command):
    BINDINGS = ("meta",)
    DESCRIPTION = "Open meta.com"
    EXAMPLE = "meta"

    def process(self, args: str) -> str:
        return "https://www.meta.com"


COMMANDS_SOCIAL = (
    GitHubCommand(),
    GitlabCommand(),
    TwitterCommand(),
    RedditCommand(),
    InstagramCommand(),
    LinkedInCommand(),
    FacebookCommand(),
    ThreadsCommand(),
    WhatsAppCommand(),
    MetaCommand(),
)
