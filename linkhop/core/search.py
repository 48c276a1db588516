"""Search URL construction for the default-search fallback."""

from urllib.parse import quote_plus

from linkhop.core.domain_types import SearchEngine

QUERY_PLACEHOLDER = "{query}"

ENGINE_TEMPLATES: dict[SearchEngine, str] = {
    SearchEngine.GOOGLE: "https://www.google.com/search?q={query}",
    SearchEngine.DDG: "https://duckduckgo.com/?q={query}",
    SearchEngine.BING: "https://www.bing.com/search?q={query}",
}


def build_search_url(template: str, query: str) -> str:
    """Substitute the url-encoded query into a template containing {query}.

    str.replace rather than str.format: templates may legitimately contain
    other braces.
    """
    encoded = quote_plus(query.strip(), errors="replace")
    return template.replace(QUERY_PLACEHOLDER, encoded)


def engine_search_url(engine: SearchEngine, query: str) -> str:
    return build_search_url(ENGINE_TEMPLATES[engine], query)
