"""Finance, password-manager and AI assistant commands.

StockCommand also backs the "$TICKER" prefix rule (see catalog.PREFIX_RULES).
"""

from linkhop.core.command import Command, command_args, encode_path, encode_query, first_token

TICKER_SENTINEL = "$"


class StockCommand(Command):
    BINDINGS = ("stock", "stocks")
    DESCRIPTION = "Look up a stock quote on Yahoo Finance (also: $TICKER)"
    EXAMPLE = "stock AAPL"

    def process(self, args: str) -> str:
        ticker = first_token(command_args(args))
        return self.quote_url(ticker)

    def process_ticker(self, token: str) -> str:
        """Handle a prefixed token such as "$AAPL"."""
        return self.quote_url(token.removeprefix(TICKER_SENTINEL))

    @staticmethod
    def quote_url(ticker: str) -> str:
        ticker = ticker.strip().upper()
        if not ticker:
            return "https://finance.yahoo.com"
        return f"https://finance.yahoo.com/quote/{encode_path(ticker)}"


class SchwabCommand(Command):
    BINDINGS = ("schwab",)
    DESCRIPTION = "Open Charles Schwab (summary, trade or positions)"
    EXAMPLE = "schwab trade"

    _PAGES = {
        "trade": "https://client.schwab.com/app/trade/tom/",
        "positions": "https://client.schwab.com/app/accounts/positions/",
    }

    def process(self, args: str) -> str:
        page = first_token(command_args(args)).lower()
        return self._PAGES.get(
            page, "https://client.schwab.com/app/accounts/summary/",
        )


class OnePasswordCommand(Command):
    BINDINGS = ("1p", "1password")
    DESCRIPTION = "Open 1Password"
    EXAMPLE = "1p"

    def process(self, args: str) -> str:
        return "https://my.1password.com"


class ClaudeCommand(Command):
    BINDINGS = ("claude",)
    DESCRIPTION = "Start a Claude conversation, optionally with a prompt"
    EXAMPLE = "claude explain monads"

    def process(self, args: str) -> str:
        prompt = command_args(args)
        if not prompt:
            return "https://claude.ai/new"
        return f"https://claude.ai/new?q={encode_query(prompt)}"


class ChatGPTCommand(Command):
    BINDINGS = ("gpt", "chatgpt")
    DESCRIPTION = "Start a ChatGPT conversation, optionally with a prompt"
    EXAMPLE = "gpt write a haiku"

    def process(self, args: str) -> str:
        prompt = command_args(args)
        if not prompt:
            return "https://chatgpt.com"
        return f"https://chatgpt.com/?q={encode_query(prompt)}"


STOCK_COMMAND = StockCommand()

COMMANDS_FINANCE_AI = (
    STOCK_COMMAND,
    SchwabCommand(),
    OnePasswordCommand(),
    ClaudeCommand(),
    ChatGPTCommand(),
)
