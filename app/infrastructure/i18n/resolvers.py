"""Language negotiation for incoming requests.

Determines which configured language a request asks for, from an explicit
query parameter, a cookie, or the Accept-Language header.
"""

from typing import List, Optional, Sequence, Tuple

from starlette.requests import Request

from infrastructure.logging import get_module_logger

logger = get_module_logger().bind(component="i18n.resolver")


def _normalize(tag: str) -> str:
    return tag.strip().replace("_", "-").lower()


class LanguageNegotiator:
    """Matches requested language tags against available language codes.

    Tags compare case-insensitively and treat ``-`` and ``_`` alike, so a
    request for "pt-BR" matches the code "pt_BR".
    """

    @staticmethod
    def matches_language(
        requested: str,
        available: str,
        strict: bool = False,
    ) -> bool:
        """Check if available language matches requested language.

        Args:
            requested: Requested language tag (e.g., "en-US").
            available: Available language code (e.g., "en").
            strict: If True, requires exact match. If False, allows language-only match.

        Returns:
            True if languages match.
        """
        requested_tag = _normalize(requested)
        available_tag = _normalize(available)
        if requested_tag == available_tag:
            return True

        if strict:
            return False

        # Language-only match (e.g., "en-US" matches "en")
        return requested_tag.split("-")[0] == available_tag.split("-")[0]

    @staticmethod
    def find_best_match(
        requested: Sequence[str],
        available: Sequence[str],
        default: Optional[str] = None,
    ) -> Optional[str]:
        """Find best matching language from available options.

        Args:
            requested: Requested language tags in preference order.
            available: Available language codes.
            default: Default if no match found.

        Returns:
            Best matching code from available, or default if no match.
        """
        for req_lang in requested:
            if req_lang == "*":
                continue

            for avail_lang in available:
                if LanguageNegotiator.matches_language(req_lang, avail_lang, strict=True):
                    return avail_lang

            for avail_lang in available:
                if LanguageNegotiator.matches_language(req_lang, avail_lang, strict=False):
                    return avail_lang

        return default


def parse_accept_language(accept_language: Optional[str]) -> List[str]:
    """Parse an Accept-Language header into tags ordered by preference.

    "en-US,en;q=0.9,fr;q=0.8" -> ["en-US", "en", "fr"]. Entries with an
    unreadable quality count as 1.0; entries with quality 0 are dropped.
    """
    if not accept_language:
        return []

    preferences: List[Tuple[str, float]] = []
    for part in accept_language.split(","):
        lang_range, *params = [p.strip() for p in part.split(";")]
        if not lang_range:
            continue

        quality = 1.0
        for param in params:
            name, _, value = param.partition("=")
            if name.strip().lower() == "q":
                try:
                    quality = float(value)
                except ValueError:
                    quality = 1.0
                break

        if quality > 0:
            preferences.append((lang_range, quality))

    # sorted() is stable, so equal qualities keep header order
    return [tag for tag, _ in sorted(preferences, key=lambda x: x[1], reverse=True)]


class LocaleResolver:
    """Resolves a request's language among the configured language codes.

    Resolution order:
    1. Query parameter (e.g. ``?locale=de``)
    2. Cookie
    3. Accept-Language header

    Attributes:
        language_codes: Codes the resolver may return.
        query_param: Query parameter name.
        cookie_name: Cookie name.
    """

    def __init__(
        self,
        language_codes: Sequence[str],
        query_param: Optional[str] = "locale",
        cookie_name: Optional[str] = "locale",
    ):
        self.language_codes = tuple(language_codes)
        self.query_param = query_param
        self.cookie_name = cookie_name

    def resolve_from_header(self, accept_language: Optional[str]) -> Optional[str]:
        """Resolve a language code from an Accept-Language header.

        Returns:
            The best matching configured code, or None.
        """
        resolved = LanguageNegotiator.find_best_match(
            parse_accept_language(accept_language), self.language_codes
        )
        if resolved is None and accept_language:
            logger.debug("no_matching_locale_in_header", accept_language=accept_language)
        return resolved

    def resolve_from_string(self, locale_str: Optional[str]) -> Optional[str]:
        """Match an explicit locale string (query parameter or cookie value)."""
        if not locale_str:
            return None
        return LanguageNegotiator.find_best_match([locale_str], self.language_codes)

    def resolve_from_request(self, request: Request) -> Optional[str]:
        """Negotiate the language of a request.

        Args:
            request: Incoming request.

        Returns:
            A configured language code, or None when nothing matches.
        """
        if self.query_param:
            resolved = self.resolve_from_string(request.query_params.get(self.query_param))
            if resolved:
                logger.debug("resolved_from_query", locale=resolved)
                return resolved

        if self.cookie_name:
            resolved = self.resolve_from_string(request.cookies.get(self.cookie_name))
            if resolved:
                logger.debug("resolved_from_cookie", locale=resolved)
                return resolved

        resolved = self.resolve_from_header(request.headers.get("accept-language"))
        if resolved:
            logger.debug("resolved_from_header", locale=resolved)
        return resolved
