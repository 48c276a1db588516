"""Command handler tests: representative URLs per family plus the never-fail contract.

Design Decisions:
    - Contract checks run over ALL_COMMANDS with awkward inputs (no args, junk args)
    - Exact URL checks only for handlers with branching logic
"""

import pytest

from linkhop.commands.catalog import ALL_COMMANDS
from linkhop.commands.define_developer_commands import (
    BrewCommand, GodocsCommand, NodeCommand, PypiCommand,
)
from linkhop.commands.define_finance_ai_commands import (
    ChatGPTCommand, ClaudeCommand, SchwabCommand, StockCommand,
)
from linkhop.commands.define_general_commands import (
    BindingsCommand, GoogleMapsCommand, GoogleSearchCommand, OpenCommand,
)
from linkhop.commands.define_social_commands import (
    GitHubCommand, InstagramCommand, RedditCommand, TwitterCommand, WhatsAppCommand,
)
from linkhop.commands.define_workspace_commands import GmailCommand
from linkhop.core.command import command_args, first_token


# ─── Contract ────────────────────────────────────────────────────

@pytest.mark.parametrize("command", ALL_COMMANDS, ids=lambda c: c.name)
@pytest.mark.parametrize("suffix", ["", "   ", " a b c", " %$&?#/", " 日本", " a\udcffb c"])
def test_handler_never_returns_empty(command, suffix):
    url = command.process(command.BINDINGS[0] + suffix)
    assert isinstance(url, str) and url
    assert url.startswith(("https://", "http://", "/"))


@pytest.mark.parametrize("command", ALL_COMMANDS, ids=lambda c: c.name)
def test_handler_is_deterministic(command):
    args = f"{command.BINDINGS[0]} some query"
    assert command.process(args) == command.process(args)


@pytest.mark.parametrize("command", ALL_COMMANDS, ids=lambda c: c.name)
def test_descriptor_metadata_present(command):
    descriptor = command.describe()
    assert descriptor.description
    assert first_token(descriptor.example) in command.BINDINGS
    assert descriptor.primary_binding == command.BINDINGS[0]
    assert command.bindings() == frozenset(descriptor.bindings)


# ─── Helpers ─────────────────────────────────────────────────────

def test_command_args_strips_first_token():
    assert command_args("gh facebook/react") == "facebook/react"
    assert command_args("  g   hello   world ") == "hello   world"
    assert command_args("gh") == ""
    assert command_args("") == ""


# ─── General ─────────────────────────────────────────────────────

def test_open_adds_https():
    assert OpenCommand().process("open example.com/docs") == "https://example.com/docs"


def test_open_keeps_explicit_scheme():
    assert OpenCommand().process("open http://example.com") == "http://example.com"


def test_open_without_target():
    assert OpenCommand().process("open") == "https://"


def test_bindings_points_to_listing_page():
    assert BindingsCommand().process("list") == "/bindings"


def test_google_search_and_home():
    cmd = GoogleSearchCommand()
    assert cmd.process("g") == "https://www.google.com"
    assert cmd.process("g python asyncio") == "https://www.google.com/search?q=python+asyncio"


def test_maps_query_in_path():
    assert GoogleMapsCommand().process("maps coffee shop") == (
        "https://www.google.com/maps/search/coffee%20shop"
    )


# ─── Social ──────────────────────────────────────────────────────

def test_github_paths_and_search():
    cmd = GitHubCommand()
    assert cmd.process("gh") == "https://github.com"
    assert cmd.process("gh mbinns") == "https://github.com/mbinns"
    assert cmd.process("gh facebook/react") == "https://github.com/facebook/react"
    assert cmd.process("gh async runtime") == "https://github.com/search?q=async+runtime"
    assert cmd.process("gh a\udcffb c") == "https://github.com/search?q=a%3Fb+c"


def test_twitter_profile_vs_search():
    cmd = TwitterCommand()
    assert cmd.process("tw @rustlang") == "https://x.com/rustlang"
    assert cmd.process("tw rust news") == "https://x.com/search?q=rust+news"
    assert cmd.process("tw @") == "https://x.com/search?q=%40"


def test_reddit_subreddit_vs_search():
    cmd = RedditCommand()
    assert cmd.process("r") == "https://www.reddit.com"
    assert cmd.process("r r/rust") == "https://www.reddit.com/r/rust"
    assert cmd.process("r best keyboards") == "https://www.reddit.com/search/?q=best+keyboards"


def test_instagram_profile():
    assert InstagramCommand().process("ig @natgeo") == "https://www.instagram.com/natgeo/"


def test_whatsapp_phone_number():
    cmd = WhatsAppCommand()
    assert cmd.process("wa +1 (555) 010-9999") == "https://wa.me/15550109999"
    assert cmd.process("wa mom") == "https://web.whatsapp.com"


# ─── Workspace / developer / finance ─────────────────────────────

def test_gmail_search_fragment():
    assert GmailCommand().process("mail from:boss") == (
        "https://mail.google.com/mail/u/0/#search/from%3Aboss"
    )


def test_pypi_search():
    assert PypiCommand().process("pip requests") == "https://pypi.org/search/?q=requests"


def test_brew_formula_uses_first_word():
    assert BrewCommand().process("brew ripgrep extra") == "https://formulae.brew.sh/formula/ripgrep"


def test_godocs_package_path():
    assert GodocsCommand().process("godocs net/http") == "https://pkg.go.dev/net/http"


def test_node_module_docs():
    cmd = NodeCommand()
    assert cmd.process("node FS") == "https://nodejs.org/docs/latest/api/fs.html"
    assert cmd.process("node") == "https://nodejs.org/docs/latest/api/"


def test_stock_command_and_ticker_prefix():
    cmd = StockCommand()
    assert cmd.process("stock aapl") == "https://finance.yahoo.com/quote/AAPL"
    assert cmd.process("stock") == "https://finance.yahoo.com"
    assert cmd.process_ticker("$tsla") == "https://finance.yahoo.com/quote/TSLA"


def test_schwab_pages():
    cmd = SchwabCommand()
    assert cmd.process("schwab trade") == "https://client.schwab.com/app/trade/tom/"
    assert cmd.process("schwab") == "https://client.schwab.com/app/accounts/summary/"


def test_assistants_pass_prompt():
    assert ClaudeCommand().process("claude hi there") == "https://claude.ai/new?q=hi+there"
    assert ChatGPTCommand().process("gpt") == "https://chatgpt.com"
