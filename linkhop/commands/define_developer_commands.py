"""Developer commands: package registries, language docs, Q&A."""

from linkhop.core.command import Command, SearchCommand, command_args, encode_path, first_token


class CargoCommand(SearchCommand):
    BINDINGS = ("cargo", "crates")
    DESCRIPTION = "Search crates.io"
    EXAMPLE = "cargo serde"
    HOME_URL = "https://crates.io"
    SEARCH_URL = "https://crates.io/search?q={query}"


class NpmCommand(SearchCommand):
    BINDINGS = ("npm",)
    DESCRIPTION = "Search npm packages"
    EXAMPLE = "npm react"
    HOME_URL = "https://www.npmjs.com"
    SEARCH_URL = "https://www.npmjs.com/search?q={query}"


class PypiCommand(SearchCommand):
    BINDINGS = ("pypi", "pip")
    DESCRIPTION = "Search PyPI packages"
    EXAMPLE = "pypi requests"
    HOME_URL = "https://pypi.org"
    SEARCH_URL = "https://pypi.org/search/?q={query}"


class PythonCommand(SearchCommand):
    BINDINGS = ("py", "python")
    DESCRIPTION = "Search the Python documentation"
    EXAMPLE = "py asyncio.gather"
    HOME_URL = "https://docs.python.org/3/"
    SEARCH_URL = "https://docs.python.org/3/search.html?q={query}"


class RustCommand(SearchCommand):
    BINDINGS = ("rs", "rust")
    DESCRIPTION = "Search the Rust standard library docs"
    EXAMPLE = "rs HashMap"
    HOME_URL = "https://doc.rust-lang.org/std/"
    SEARCH_URL = "https://doc.rust-lang.org/std/?search={query}"


class HackCommand(SearchCommand):
    BINDINGS = ("hack",)
    DESCRIPTION = "Search the Hack language docs"
    EXAMPLE = "hack shapes"
    HOME_URL = "https://docs.hhvm.com/hack/"
    SEARCH_URL = "https://docs.hhvm.com/search?term={query}"


class BrewCommand(SearchCommand):
    BINDINGS = ("brew",)
    DESCRIPTION = "Look up a Homebrew formula"
    EXAMPLE = "brew ripgrep"
    HOME_URL = "https://brew.sh"

    def search(self, query: str) -> str:
        return f"https://formulae.brew.sh/formula/{encode_path(first_token(query))}"


class ChocoCommand(SearchCommand):
    BINDINGS = ("choco",)
    DESCRIPTION = "Search Chocolatey packages"
    EXAMPLE = "choco git"
    HOME_URL = "https://community.chocolatey.org/packages"
    SEARCH_URL = "https://community.chocolatey.org/packages?q={query}"


class DockerhubCommand(SearchCommand):
    BINDINGS = ("docker", "dockerhub")
    DESCRIPTION = "Search Docker Hub images"
    EXAMPLE = "docker postgres"
    HOME_URL = "https://hub.docker.com"
    SEARCH_URL = "https://hub.docker.com/search?q={query}"


class GodocsCommand(SearchCommand):
    BINDINGS = ("godocs",)
    DESCRIPTION = "Open Go standard library docs for a package"
    EXAMPLE = "godocs net/http"
    HOME_URL = "https://pkg.go.dev/std"

    def search(self, query: str) -> str:
        return f"https://pkg.go.dev/{encode_path(first_token(query), safe='/')}"


class GopkgCommand(SearchCommand):
    BINDINGS = ("gopkg", "go")
    DESCRIPTION = "Search Go packages"
    EXAMPLE = "gopkg cobra"
    HOME_URL = "https://pkg.go.dev"
    SEARCH_URL = "https://pkg.go.dev/search?q={query}"


class MdnCommand(SearchCommand):
    BINDINGS = ("mdn",)
    DESCRIPTION = "Search MDN Web Docs"
    EXAMPLE = "mdn flexbox"
    HOME_URL = "https://developer.mozilla.org"
    SEARCH_URL = "https://developer.mozilla.org/en-US/search?q={query}"


class NodeCommand(Command):
    BINDINGS = ("node", "nodejs")
    DESCRIPTION = "Open Node.js API docs for a module"
    EXAMPLE = "node fs"

    def process(self, args: str) -> str:
        module = first_token(command_args(args)).lower()
        if not module:
            return "https://nodejs.org/docs/latest/api/"
        return f"https://nodejs.org/docs/latest/api/{encode_path(module)}.html"


class NugetCommand(SearchCommand):
    BINDINGS = ("nuget",)
    DESCRIPTION = "Search NuGet packages"
    EXAMPLE = "nuget Newtonsoft.Json"
    HOME_URL = "https://www.nuget.org"
    SEARCH_URL = "https://www.nuget.org/packages?q={query}"


class PackagistCommand(SearchCommand):
    BINDINGS = ("packagist", "composer")
    DESCRIPTION = "Search Packagist (PHP) packages"
    EXAMPLE = "packagist monolog"
    HOME_URL = "https://packagist.org"
    SEARCH_URL = "https://packagist.org/?query={query}"


class RubygemsCommand(SearchCommand):
    BINDINGS = ("gem", "rubygems")
    DESCRIPTION = "Search RubyGems"
    EXAMPLE = "gem rails"
    HOME_URL = "https://rubygems.org"
    SEARCH_URL = "https://rubygems.org/search?query={query}"


class StackOverflowCommand(SearchCommand):
    BINDINGS = ("so", "stackoverflow")
    DESCRIPTION = "Search Stack Overflow"
    EXAMPLE = "so python list comprehension"
    HOME_URL = "https://stackoverflow.com"
    SEARCH_URL = "https://stackoverflow.com/search?q={query}"


COMMANDS_DEVELOPER = (
    CargoCommand(),
    NpmCommand(),
    PypiCommand(),
    PythonCommand(),
    RustCommand(),
    HackCommand(),
    BrewCommand(),
    ChocoCommand(),
    DockerhubCommand(),
    GodocsCommand(),
    GopkgCommand(),
    MdnCommand(),
    NodeCommand(),
    NugetCommand(),
    PackagistCommand(),
    RubygemsCommand(),
    StackOverflowCommand(),
)
